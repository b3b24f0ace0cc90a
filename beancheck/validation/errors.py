"""
Configuration and programming errors.

Rule violations never raise: they are collected into a ValidationResult.
Everything in this module signals a broken validator setup (or a broken
accessor/predicate) and is always propagated to the caller.
"""
from typing import Optional


class ConfigurationError(ValueError):
    """A validator was configured in a way that cannot be evaluated."""


class UnresolvedFieldPathError(ConfigurationError):
    """No explicit field path was given and no naming strategy could supply one."""


class AccessorError(ConfigurationError):
    """The accessor of a field raised while reading the field off a record."""

    def __init__(self, field_path: str, message: Optional[str] = None):
        self.field_path = field_path
        super().__init__(message or f"Accessor for field '{field_path}' failed")


class RuleEvaluationError(ConfigurationError):
    """A custom rule predicate raised instead of returning a boolean."""

    def __init__(self, field_path: str, key: str):
        self.field_path = field_path
        self.key = key
        super().__init__(f"Predicate of rule '{key}' on field '{field_path}' failed")
