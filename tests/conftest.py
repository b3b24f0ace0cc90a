"""
Shared test fixtures for the validation test suite.
"""
import operator
from dataclasses import dataclass
from types import SimpleNamespace
from typing import Optional

import pytest

from beancheck.validation.field_validator import FieldValidatorBuilder
from beancheck.validation.record_validator import RecordValidatorBuilder


# ==========================================================================
# Beans
# ==========================================================================

@dataclass
class SimpleProperty:
    items: Optional[object] = None


@dataclass
class NestedSimpleProperty:
    simple_property: Optional[SimpleProperty] = None
    nested_text: Optional[str] = None


@dataclass
class SimpleBean:
    id: Optional[object] = None
    messages: Optional[object] = None
    simple: bool = False
    complicated: Optional[bool] = None
    simple_property: Optional[SimpleProperty] = None
    nested: Optional[NestedSimpleProperty] = None


@pytest.fixture
def beans():
    """The bean classes, for tests that build their own records."""
    return SimpleNamespace(
        SimpleBean=SimpleBean,
        SimpleProperty=SimpleProperty,
        NestedSimpleProperty=NestedSimpleProperty,
    )


@pytest.fixture
def simple_bean():
    return SimpleBean()


@pytest.fixture
def nested_bean():
    """SimpleBean -> nested -> simple_property with items=None."""
    return SimpleBean(
        nested=NestedSimpleProperty(simple_property=SimpleProperty(items=None)),
    )


# ==========================================================================
# Validators
# ==========================================================================

@pytest.fixture
def items_validator():
    """RecordValidator for SimpleProperty: items must be set and non-empty."""
    return (
        RecordValidatorBuilder()
        .add_field_validator(
            FieldValidatorBuilder(operator.attrgetter("items"), "items")
            .is_not_null()
            .is_not_empty()
        )
        .build()
    )


@pytest.fixture
def id_builder():
    return FieldValidatorBuilder(operator.attrgetter("id"), "id")
