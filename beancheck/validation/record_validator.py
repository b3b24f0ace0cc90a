"""
Record Validator: all field validators of one record type.

validate_all() runs every FieldValidator in declaration order and merges
their scoped results as-is: field validators already qualify their own
paths, including everything coming from nested records.
"""
import logging
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Tuple, Union

from beancheck.models.validation import ValidationResult
from beancheck.validation.errors import ConfigurationError
from beancheck.validation.field_validator import FieldValidator, FieldValidatorBuilder
from beancheck.validation.metrics import record_validation_outcome, timed_validation

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RecordValidator:
    """Immutable, ordered collection of FieldValidators for one record type."""

    field_validators: Tuple[FieldValidator, ...] = ()
    name: Optional[str] = None

    def validate_all(self, record: Any) -> ValidationResult:
        """
        Validate every field of *record*.

        Returns:
            Aggregate ValidationResult (default separator). Valid only if
            every rule of every field, nested ones included, passed.
        """
        record_type = self.name or type(record).__name__

        with timed_validation(record_type):
            result = self.evaluate(record)

        record_validation_outcome(record_type, result.is_valid())
        logger.debug(
            "Validated %s: %d field(s), %d error(s)",
            record_type,
            len(self.field_validators),
            result.error_count(),
        )
        return result

    def evaluate(self, record: Any) -> ValidationResult:
        """
        Same result as validate_all(), without timing or outcome metrics.

        FieldValidator calls this for nested records so only top-level
        validations are counted.
        """
        result = ValidationResult()
        for field_validator in self.field_validators:
            scoped = field_validator.validate(record)
            if scoped.has_errors():
                result.merge(scoped)
        return result

    def validate_all_many(self, records: Iterable[Any]) -> List[ValidationResult]:
        """One ValidationResult per record, in input order."""
        return [self.validate_all(record) for record in records]

    def __repr__(self) -> str:
        fields = [fv.field_path for fv in self.field_validators]
        return f"RecordValidator({self.name or '?'}, fields={fields})"


class RecordValidatorBuilder:
    """
    Fluent configuration of a RecordValidator.

    Args:
        name: Record type label used in logs and metrics. Defaults to the
            class name of each validated record.
    """

    def __init__(self, name: Optional[str] = None):
        self._name = name
        self._field_validators: List[FieldValidator] = []

    def add_field_validator(
        self,
        field_validator: Union[FieldValidator, FieldValidatorBuilder],
    ) -> "RecordValidatorBuilder":
        """Append a field validator; builders are built immediately."""
        if isinstance(field_validator, FieldValidatorBuilder):
            field_validator = field_validator.build()
        if not isinstance(field_validator, FieldValidator):
            raise ConfigurationError(
                f"Expected a FieldValidator, got {type(field_validator).__name__}"
            )
        self._field_validators.append(field_validator)
        return self

    def build(self) -> RecordValidator:
        validator = RecordValidator(field_validators=tuple(self._field_validators), name=self._name)
        logger.debug("Built %r", validator)
        return validator
