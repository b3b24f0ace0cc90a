"""
Built-in rule predicates.

Every predicate receives the field value (already read off the record)
and is paired with a key and a polarity in a Rule:

    is_null        MUST_BE_TRUE   value is None
    is_not_null    MUST_BE_TRUE   value is not None
    is_empty       MUST_BE_TRUE   value is not a non-empty container
    is_not_empty   MUST_BE_FALSE  value is None or an empty container
    is_true        MUST_BE_TRUE   value is not None and not boolean False
    is_false       MUST_BE_FALSE  value is None or boolean True

None is never "empty": is_empty passes on it while is_not_empty fails.
Non-boolean values pass both is_true and is_false.
"""
from typing import Any, Callable

import numpy as np

from beancheck.config.constants import (
    IS_EMPTY,
    IS_FALSE,
    IS_NOT_EMPTY,
    IS_NOT_NULL,
    IS_NULL,
    IS_TRUE,
)
from beancheck.models.rule import Polarity, Rule
from beancheck.validation.emptiness import is_empty_container, is_non_empty_container

BOOLEAN_TYPES = (bool, np.bool_)


def value_is_null(value: Any) -> bool:
    return value is None


def value_is_not_null(value: Any) -> bool:
    return value is not None


def value_is_not_filled(value: Any) -> bool:
    """Holds unless *value* is a container with elements."""
    if value is None:
        return True
    return not is_non_empty_container(value)


def value_is_null_or_empty(value: Any) -> bool:
    if value is None:
        return True
    return is_empty_container(value)


def value_is_not_false(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, BOOLEAN_TYPES):
        return bool(value)
    return True


def value_is_null_or_true(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, BOOLEAN_TYPES):
        return bool(value)
    return False


def null_fails(predicate: Callable[[Any], Any]) -> Callable[[Any], bool]:
    """Wrap a must-be-true custom predicate so that None never satisfies it."""

    def holds(value: Any) -> bool:
        if value is None:
            return False
        return bool(predicate(value))

    return holds


def null_matches(predicate: Callable[[Any], Any]) -> Callable[[Any], bool]:
    """Wrap a must-be-false custom predicate so that None always trips it."""

    def matches(value: Any) -> bool:
        if value is None:
            return True
        return bool(predicate(value))

    return matches


# =============================================================================
# Rule factories
# =============================================================================

def is_null_rule() -> Rule:
    return Rule(IS_NULL, value_is_null, Polarity.MUST_BE_TRUE)


def is_not_null_rule() -> Rule:
    return Rule(IS_NOT_NULL, value_is_not_null, Polarity.MUST_BE_TRUE)


def is_empty_rule() -> Rule:
    return Rule(IS_EMPTY, value_is_not_filled, Polarity.MUST_BE_TRUE)


def is_not_empty_rule() -> Rule:
    return Rule(IS_NOT_EMPTY, value_is_null_or_empty, Polarity.MUST_BE_FALSE)


def is_true_rule() -> Rule:
    return Rule(IS_TRUE, value_is_not_false, Polarity.MUST_BE_TRUE)


def is_false_rule() -> Rule:
    return Rule(IS_FALSE, value_is_null_or_true, Polarity.MUST_BE_FALSE)


def custom_true_rule(key: str, predicate: Callable[[Any], Any]) -> Rule:
    return Rule(key, null_fails(predicate), Polarity.MUST_BE_TRUE)


def custom_false_rule(key: str, predicate: Callable[[Any], Any]) -> Rule:
    return Rule(key, null_matches(predicate), Polarity.MUST_BE_FALSE)
