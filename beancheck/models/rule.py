"""
Rule: a named predicate over a field value, with a polarity.

Field validators store their rules as an ordered tuple of Rule objects,
so evaluation follows declaration order and two equal predicates never
overwrite each other.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable


class Polarity(str, Enum):
    """Which predicate outcome counts as passing."""
    MUST_BE_TRUE = "must_be_true"
    MUST_BE_FALSE = "must_be_false"


@dataclass(frozen=True)
class Rule:
    """One validation rule attached to a field."""

    key: str
    predicate: Callable[[Any], bool]
    polarity: Polarity = Polarity.MUST_BE_TRUE

    def is_violated(self, value: Any) -> bool:
        """Evaluate the predicate against *value* and apply the polarity."""
        outcome = bool(self.predicate(value))
        if self.polarity is Polarity.MUST_BE_TRUE:
            return not outcome
        return outcome

    def __repr__(self) -> str:
        return f"Rule({self.key}, {self.polarity.value})"
