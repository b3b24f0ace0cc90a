"""
Container emptiness: the length rules use for is_empty / is_not_empty.

Only containers have a length here. Checked in order:
    1. str
    2. numpy arrays, counted by ``size`` (any dtype)
    3. any other sized collection: sequences, sets, mappings, dict views,
       array.array, memoryview, ...

numpy arrays come before the generic collection check because they pass
``isinstance(value, Collection)`` while 0-d arrays have no len().

Everything else (numbers, plain objects, iterators) is not a container:
container_length() returns None and neither emptiness rule fires on it.
"""
from collections.abc import Collection
from typing import Any, Optional

import numpy as np


def container_length(value: Any) -> Optional[int]:
    """
    Number of elements in *value*, or None when *value* is not a container.

    numpy arrays count all their elements (``size``), so a ``(0, 3)``
    array is empty and a 0-d array holds one element.
    """
    if isinstance(value, str):
        return len(value)
    if isinstance(value, np.ndarray):
        return int(value.size)
    if isinstance(value, Collection):
        return len(value)
    return None


def is_empty_container(value: Any) -> bool:
    """True only for a container holding zero elements."""
    length = container_length(value)
    return length is not None and length == 0


def is_non_empty_container(value: Any) -> bool:
    """True only for a container holding at least one element."""
    length = container_length(value)
    return length is not None and length > 0
