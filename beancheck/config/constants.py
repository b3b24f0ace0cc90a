"""
Constants used across the validation engine.
Rule keys are part of the public contract: callers map them to messages.
"""
from typing import Tuple

# =============================================================================
# Built-in rule keys
# =============================================================================
IS_NULL: str = "is_null"
IS_NOT_NULL: str = "is_not_null"
IS_EMPTY: str = "is_empty"
IS_NOT_EMPTY: str = "is_not_empty"
IS_TRUE: str = "is_true"
IS_FALSE: str = "is_false"

BUILTIN_RULE_KEYS: Tuple[str, ...] = (
    IS_NULL,
    IS_NOT_NULL,
    IS_EMPTY,
    IS_NOT_EMPTY,
    IS_TRUE,
    IS_FALSE,
)

# =============================================================================
# Field naming
# =============================================================================
# Accessor name prefixes stripped by the function-name strategy (first match wins).
ACCESSOR_NAME_PREFIXES: Tuple[str, ...] = ("get_", "is_", "has_")

# Callables whose __name__ can never be a field name.
ANONYMOUS_CALLABLE_NAMES: Tuple[str, ...] = ("<lambda>", "<genexpr>", "")
