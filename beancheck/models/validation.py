"""
ValidationResult: field path -> violated rules, with path composition.
"""
import logging
from typing import Dict, Iterator, List, Optional

from beancheck.config.settings import DEFAULT_PATH_SEPARATOR
from beancheck.models.field_error import FieldError

logger = logging.getLogger(__name__)


class ValidationResult:
    """
    Container of FieldErrors grouped by field path.

    Paths keep insertion order, and so do the errors within one path.
    A path is only present once at least one error was added for it, so
    ``errors_for()`` returning ``None`` means "validated and clean".

    The ``separator`` belongs to the scope that owns this result: it is
    the string ``merge_under()`` puts between that scope's field path and
    the paths coming from nested results, whatever separator the nested
    results were built with.
    """

    def __init__(self, separator: str = DEFAULT_PATH_SEPARATOR):
        self.separator = separator
        self._errors: Dict[str, List[FieldError]] = {}

    # ------------------------------------------------------------------
    # Adding errors
    # ------------------------------------------------------------------

    def add_error(self, path: str, key: str) -> None:
        """Append one violation of rule *key* at *path*."""
        self._append(path, [FieldError(path=path, key=key)])

    def merge(self, other: "ValidationResult") -> None:
        """Append every error of *other* under its own path."""
        for path, errors in other._errors.items():
            self._append(path, errors)

    def merge_under(self, prefix: str, other: "ValidationResult") -> None:
        """
        Append every error of *other* below *prefix*.

        Each nested path becomes ``prefix + self.separator + path`` and the
        errors are re-homed to that composed path.
        """
        for path, errors in other._errors.items():
            new_path = f"{prefix}{self.separator}{path}"
            self._append(new_path, [error.rehome(new_path) for error in errors])
            logger.debug("Merged %d error(s) from '%s' into '%s'", len(errors), path, new_path)

    def _append(self, path: str, errors: List[FieldError]) -> None:
        if not errors:
            return
        self._errors.setdefault(path, []).extend(errors)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def is_valid(self) -> bool:
        return not self._errors

    def has_errors(self) -> bool:
        return not self.is_valid()

    def errors_for(self, path: str) -> Optional[List[FieldError]]:
        """Errors reported at *path*, or None if that path never failed."""
        return self._errors.get(path)

    def keys_for(self, path: str) -> List[str]:
        return [error.key for error in self._errors.get(path, [])]

    @property
    def errors(self) -> Dict[str, List[FieldError]]:
        """Full path -> errors mapping (a shallow copy)."""
        return {path: list(errors) for path, errors in self._errors.items()}

    def paths(self) -> List[str]:
        return list(self._errors)

    def error_count(self) -> int:
        return sum(len(errors) for errors in self._errors.values())

    def iter_errors(self) -> Iterator[FieldError]:
        for errors in self._errors.values():
            yield from errors

    def to_dict(self) -> Dict[str, List[str]]:
        return {path: [error.key for error in errors] for path, errors in self._errors.items()}

    def __len__(self) -> int:
        return self.error_count()

    def __repr__(self) -> str:
        return f"ValidationResult(separator='{self.separator}', errors={self.to_dict()})"
