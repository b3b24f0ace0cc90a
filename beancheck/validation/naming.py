"""
Field naming strategies: derive a field path from an accessor.

A strategy is any callable ``accessor -> str``. It is only consulted when a
FieldValidatorBuilder was given no explicit field path; with neither a path
nor a strategy, build() raises UnresolvedFieldPathError.

Supported accessors:
    operator.attrgetter("address.city")     -> "address.city"
    operator.itemgetter("id")               -> "id"
    def get_id(bean): ...                   -> "id"
    Bean.is_active (method)                 -> "active"

Lambdas, partials and other anonymous callables cannot be named.
"""
import logging
import operator
import re
from typing import Any, Callable

from beancheck.config.constants import ACCESSOR_NAME_PREFIXES, ANONYMOUS_CALLABLE_NAMES
from beancheck.validation.errors import UnresolvedFieldPathError

logger = logging.getLogger(__name__)

NamingStrategy = Callable[[Callable[[Any], Any]], str]

# repr() of a single-argument getter, e.g. operator.attrgetter('address.city')
_GETTER_REPR_RE = re.compile(r"^operator\.(?:attrgetter|itemgetter)\((['\"])(?P<name>[^'\"]+)\1\)$")


def attrgetter_name(accessor: Callable[[Any], Any]) -> str:
    """Name of the single attribute (or string key) an operator getter reads."""
    if not isinstance(accessor, (operator.attrgetter, operator.itemgetter)):
        raise UnresolvedFieldPathError(f"{accessor!r} is not an attrgetter/itemgetter")

    match = _GETTER_REPR_RE.match(repr(accessor))
    if match is None:
        raise UnresolvedFieldPathError(
            f"Cannot name {accessor!r}: only getters of one attribute or string key are supported"
        )
    return match.group("name")


def function_name(accessor: Callable[[Any], Any]) -> str:
    """
    Accessor ``__name__`` with one leading ``get_``/``is_``/``has_`` stripped.
    """
    name = getattr(accessor, "__name__", None)
    if not isinstance(name, str) or name in ANONYMOUS_CALLABLE_NAMES:
        raise UnresolvedFieldPathError(
            f"Cannot derive a field path from anonymous accessor {accessor!r}; "
            f"pass an explicit field path"
        )

    for prefix in ACCESSOR_NAME_PREFIXES:
        if name.startswith(prefix) and len(name) > len(prefix):
            return name[len(prefix):]
    return name


def default_naming_strategy(accessor: Callable[[Any], Any]) -> str:
    """Operator getters by their attribute, everything else by function name."""
    if isinstance(accessor, (operator.attrgetter, operator.itemgetter)):
        name = attrgetter_name(accessor)
    else:
        name = function_name(accessor)
    logger.debug("Derived field path '%s' from accessor %r", name, accessor)
    return name
