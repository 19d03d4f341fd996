from utils.validation_utils import validate_phone_number, format_phone_number
import pytest


@pytest.mark.parametrize("phone", ["+639171234567", "+14155552671", "+1234567"])
def test_valid_international_numbers(phone):
    assert validate_phone_number(phone) is True


@pytest.mark.parametrize("phone", [
    "09171234567",        # local format, no "+"
    "+0123",              # leading zero after the sign
    "",
    None,
    "+123456",            # only 6 digits
    "+1234567890123456",  # 16 digits
    "+63 917 123 4567",   # separators are not allowed
    "+639171234567\n",
])
def test_invalid_numbers(phone):
    assert validate_phone_number(phone) is False


def test_format_drops_trunk_zero_and_adds_country_code():
    assert format_phone_number("09171234567", "+63") == "+639171234567"


def test_format_does_not_double_prefix():
    assert format_phone_number("639171234567", "+63") == "+639171234567"


def test_format_strips_separators():
    assert format_phone_number("0917-123 (4567)", "+63") == "+639171234567"
    assert format_phone_number("+63 917 123 4567", "+63") == "+639171234567"


def test_format_uses_default_country_code():
    assert format_phone_number("9171234567") == "+639171234567"


def test_format_other_country_code():
    assert format_phone_number("4155552671", "+1") == "+14155552671"


def test_format_only_drops_one_leading_zero():
    assert format_phone_number("009171234567", "+63") == "+6309171234567"
