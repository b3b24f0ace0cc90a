"""
Field Validator: the rules attached to one field of a record.

Configuration happens on a FieldValidatorBuilder; build() resolves the
field path and freezes everything into an immutable FieldValidator that
can be shared between threads.

    validator = (
        FieldValidatorBuilder(operator.attrgetter("items"), "items")
        .is_not_null()
        .is_not_empty()
        .build()
    )
    result = validator.validate(bean)   # {"items": [is_not_null, is_not_empty]} for items=None

Evaluation (validate):
    1. fresh ValidationResult carrying this field's separator
    2. MUST_BE_TRUE rules, then MUST_BE_FALSE rules, each in insertion order
    3. nested RecordValidators on the field value, merged under the field path
"""
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, List, Optional, Tuple

from beancheck.config.settings import DEFAULT_PATH_SEPARATOR
from beancheck.models.rule import Polarity, Rule
from beancheck.models.validation import ValidationResult
from beancheck.validation.errors import (
    AccessorError,
    ConfigurationError,
    RuleEvaluationError,
    UnresolvedFieldPathError,
)
from beancheck.validation.metrics import record_rule_violation
from beancheck.validation.naming import NamingStrategy
from beancheck.validation.rules import (
    custom_false_rule,
    custom_true_rule,
    is_empty_rule,
    is_false_rule,
    is_not_empty_rule,
    is_not_null_rule,
    is_null_rule,
    is_true_rule,
)

if TYPE_CHECKING:
    from beancheck.validation.record_validator import RecordValidator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldValidator:
    """Immutable rule set for one field; produced by FieldValidatorBuilder.build()."""

    accessor: Callable[[Any], Any]
    field_path: str
    separator: str = DEFAULT_PATH_SEPARATOR
    rules: Tuple[Rule, ...] = ()
    nested: Tuple["RecordValidator", ...] = ()

    def __post_init__(self):
        if not isinstance(self.field_path, str) or not self.field_path:
            raise UnresolvedFieldPathError("FieldValidator requires a non-empty field path")
        if not isinstance(self.separator, str) or not self.separator:
            raise ConfigurationError(f"Separator of field '{self.field_path}' must be a non-empty string")

    def read(self, record: Any) -> Any:
        """Read the field value off *record*; accessor failures are fatal."""
        try:
            return self.accessor(record)
        except Exception as e:
            logger.error("Accessor for field '%s' failed: %s", self.field_path, e)
            raise AccessorError(self.field_path) from e

    def validate(self, record: Any) -> ValidationResult:
        """
        Evaluate every rule and nested validator against *record*.

        Returns:
            Scoped ValidationResult whose paths are fully qualified from
            this field downwards.
        """
        result = ValidationResult(separator=self.separator)
        if not self.rules and not self.nested:
            return result

        value = self.read(record)

        for polarity in (Polarity.MUST_BE_TRUE, Polarity.MUST_BE_FALSE):
            for rule in self.rules:
                if rule.polarity is polarity and self._violates(rule, value):
                    result.add_error(self.field_path, rule.key)
                    record_rule_violation(rule.key)

        for record_validator in self.nested:
            result.merge_under(self.field_path, record_validator.evaluate(value))

        return result

    def _violates(self, rule: Rule, value: Any) -> bool:
        try:
            return rule.is_violated(value)
        except Exception as e:
            logger.error("Rule '%s' on field '%s' raised: %s", rule.key, self.field_path, e)
            raise RuleEvaluationError(self.field_path, rule.key) from e

    def __repr__(self) -> str:
        return (
            f"FieldValidator('{self.field_path}', rules={[r.key for r in self.rules]}, "
            f"nested={len(self.nested)})"
        )


class FieldValidatorBuilder:
    """
    Fluent configuration of a FieldValidator.

    Every configuration call returns the builder itself. Rules keep the
    order in which they were added.

    Args:
        accessor: Pure callable reading the field value off a record.
        field_path: Name of the field in result paths. When omitted, the
            configured naming strategy derives it at build() time.
    """

    def __init__(self, accessor: Callable[[Any], Any], field_path: Optional[str] = None):
        if not callable(accessor):
            raise ConfigurationError(f"Accessor must be callable, got {type(accessor).__name__}")
        self._accessor = accessor
        self._field_path = field_path
        self._separator = DEFAULT_PATH_SEPARATOR
        self._naming_strategy: Optional[NamingStrategy] = None
        self._rules: List[Rule] = []
        self._nested: List["RecordValidator"] = []

    # ------------------------------------------------------------------
    # Naming
    # ------------------------------------------------------------------

    def field_path(self, field_path: str) -> "FieldValidatorBuilder":
        """Set the field path used in validation results."""
        self._field_path = field_path
        return self

    def separator(self, separator: str) -> "FieldValidatorBuilder":
        """Set the separator between this field's path and nested paths."""
        if not isinstance(separator, str) or not separator:
            raise ConfigurationError("Separator must be a non-empty string")
        self._separator = separator
        return self

    def naming_strategy(self, strategy: NamingStrategy) -> "FieldValidatorBuilder":
        """Derive the field path from the accessor when none is set explicitly."""
        if not callable(strategy):
            raise ConfigurationError("Naming strategy must be callable")
        self._naming_strategy = strategy
        return self

    # ------------------------------------------------------------------
    # Built-in rules
    # ------------------------------------------------------------------

    def is_null(self) -> "FieldValidatorBuilder":
        """The field must be None."""
        return self._add(is_null_rule())

    def is_not_null(self) -> "FieldValidatorBuilder":
        """The field must not be None."""
        return self._add(is_not_null_rule())

    def is_empty(self) -> "FieldValidatorBuilder":
        """
        The field must not be a container with elements.

        Passes on None, on empty str/sequence/set/mapping/array values and
        on objects that are not containers.
        """
        return self._add(is_empty_rule())

    def is_not_empty(self) -> "FieldValidatorBuilder":
        """
        The field must not be None nor an empty container.

        Objects that are not containers always pass.
        """
        return self._add(is_not_empty_rule())

    def is_true(
        self,
        key: Optional[str] = None,
        predicate: Optional[Callable[[Any], Any]] = None,
    ) -> "FieldValidatorBuilder":
        """
        Without arguments: the field must not be None nor boolean False.

        With ``key`` and ``predicate``: the field must not be None and
        ``predicate(value)`` must be true; violations are reported as *key*.
        """
        if key is None and predicate is None:
            return self._add(is_true_rule())
        self._check_custom_rule(key, predicate)
        return self._add(custom_true_rule(key, predicate))

    def is_false(
        self,
        key: Optional[str] = None,
        predicate: Optional[Callable[[Any], Any]] = None,
    ) -> "FieldValidatorBuilder":
        """
        Without arguments: the field must not be None nor boolean True.

        With ``key`` and ``predicate``: the field must not be None and
        ``predicate(value)`` must be false; violations are reported as *key*.
        """
        if key is None and predicate is None:
            return self._add(is_false_rule())
        self._check_custom_rule(key, predicate)
        return self._add(custom_false_rule(key, predicate))

    def rule(self, rule: Rule) -> "FieldValidatorBuilder":
        """Attach a ready-made Rule; its predicate receives the raw field value."""
        if not isinstance(rule, Rule):
            raise ConfigurationError(f"Expected a Rule, got {type(rule).__name__}")
        self._check_custom_rule(rule.key, rule.predicate)
        return self._add(rule)

    # ------------------------------------------------------------------
    # Nesting
    # ------------------------------------------------------------------

    def with_record_validator(self, record_validator: Any) -> "FieldValidatorBuilder":
        """
        Validate the field value itself with *record_validator*.

        Accepts a RecordValidator or a RecordValidatorBuilder (built now).
        """
        from beancheck.validation.record_validator import RecordValidator, RecordValidatorBuilder

        if isinstance(record_validator, RecordValidatorBuilder):
            record_validator = record_validator.build()
        if not isinstance(record_validator, RecordValidator):
            raise ConfigurationError(
                f"Nested validator must be a RecordValidator, got {type(record_validator).__name__}"
            )
        self._nested.append(record_validator)
        return self

    # ------------------------------------------------------------------
    # Build
    # ------------------------------------------------------------------

    def build(self) -> FieldValidator:
        """Resolve the field path and freeze the configuration."""
        field_path = self._resolve_field_path()
        validator = FieldValidator(
            accessor=self._accessor,
            field_path=field_path,
            separator=self._separator,
            rules=tuple(self._rules),
            nested=tuple(self._nested),
        )
        logger.debug("Built %r", validator)
        return validator

    def _resolve_field_path(self) -> str:
        if self._field_path:
            return self._field_path
        if self._naming_strategy is None:
            raise UnresolvedFieldPathError(
                f"No field path for accessor {self._accessor!r} and no naming strategy configured"
            )
        field_path = self._naming_strategy(self._accessor)
        if not isinstance(field_path, str) or not field_path:
            raise UnresolvedFieldPathError(
                f"Naming strategy returned no usable field path for {self._accessor!r}"
            )
        return field_path

    def _add(self, rule: Rule) -> "FieldValidatorBuilder":
        self._rules.append(rule)
        return self

    @staticmethod
    def _check_custom_rule(key: Optional[str], predicate: Optional[Callable[[Any], Any]]) -> None:
        if not isinstance(key, str) or not key:
            raise ConfigurationError("Custom rules need a non-empty key")
        if not callable(predicate):
            raise ConfigurationError(f"Predicate of rule '{key}' must be callable")
