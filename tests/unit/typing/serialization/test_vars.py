"""Unit tests for the raw discriminator accessor."""

from types import SimpleNamespace

import pytest

from polyserial.typing.serialization.vars import UNDEFINED, Undefined, get_discriminator_value, is_missing


@pytest.mark.unit
def test_mapping_value():
    assert get_discriminator_value({"type": "circle"}, "type") == "circle"


@pytest.mark.unit
def test_attribute_value():
    assert get_discriminator_value(SimpleNamespace(type="circle"), "type") == "circle"


@pytest.mark.unit
@pytest.mark.parametrize("value", [{}, SimpleNamespace(), None, "circle"])
def test_absent_field_is_undefined(value):
    assert get_discriminator_value(value, "type") is UNDEFINED


@pytest.mark.unit
def test_null_is_kept_distinct_from_absent():
    assert get_discriminator_value({"type": None}, "type") is None


@pytest.mark.unit
@pytest.mark.parametrize(("value", "expected"), [(UNDEFINED, True), (None, True), ("", False), (0, False), (False, False)])
def test_is_missing(value, expected):
    assert is_missing(value) is expected


@pytest.mark.unit
def test_undefined_is_a_falsy_singleton():
    assert Undefined() is UNDEFINED
    assert not UNDEFINED
    assert repr(UNDEFINED) == "UNDEFINED"
