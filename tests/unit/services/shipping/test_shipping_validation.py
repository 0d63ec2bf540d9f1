# tests/unit/services/shipping/test_shipping_validation.py
import pytest
from decimal import Decimal

from shipping_calc.core.exceptions import InvalidArgument
from shipping_calc.services.shipping.data import US_STATES
from shipping_calc.services.shipping.validation import (
    check_optional_bool,
    format_number,
    is_number,
    parse_dimensions,
    require_fields,
    valid_state,
)


def test_us_states():
    assert len(US_STATES) == 51
    assert "DC" in US_STATES
    assert "PR" not in US_STATES
    assert isinstance(US_STATES, frozenset)


@pytest.mark.parametrize("value, expected", [
    (1, True), (1.5, True), (Decimal("2.5"), True),
    (True, False), ("1", False), (None, False),
    (float("nan"), False), (float("inf"), False),
    (Decimal("NaN"), False), (Decimal("sNaN"), False), (Decimal("Infinity"), False),
])
def test_is_number(value, expected):
    assert is_number(value) is expected


@pytest.mark.parametrize("value, expected", [
    (Decimal("1E+2"), "100"), (Decimal("42.50"), "42.50"), (34, "34"), (0.5, "0.5"),
])
def test_format_number(value, expected):
    assert format_number(value) == expected


def test_valid_state():
    assert valid_state("NY")
    assert not valid_state("ny")
    assert not valid_state("ZZ")
    assert not valid_state(None)


def test_require_fields_reports_first_missing():
    with pytest.raises(InvalidArgument) as exc_info:
        require_fields({"a": 1, "b": None}, ("a", "b", "c"))
    assert str(exc_info.value) == 'Required field "b" not found.'


def test_require_fields_ok():
    require_fields({"a": 0, "b": ""}, ("a", "b"))


def test_check_optional_bool():
    assert check_optional_bool(None, "bad") is False
    assert check_optional_bool(True, "bad") is True
    with pytest.raises(InvalidArgument, match="bad"):
        check_optional_bool("yes", "bad")


@pytest.mark.parametrize("dimensions, expected", [
    ("23x32x15", ("23", "32", "15")),
    ("1x1x1", ("1", "1", "1")),
    ("12x3", None),
    ("12X3X4", None),
    (" 1x1x1", None),
    (None, None),
])
def test_parse_dimensions(dimensions, expected):
    assert parse_dimensions(dimensions) == expected


def test_invalid_argument_is_a_value_error():
    assert issubclass(InvalidArgument, ValueError)
