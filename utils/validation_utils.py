"""
utils/validation_utils.py

Purpose: Input validation

- International (E.164-style) phone number validation
- Local-to-international phone number formatting
"""

import re

from utils.constants import DEFAULT_COUNTRY_CODE


# "+" then 7-15 digits, no leading zero after the sign
PHONE_PATTERN = re.compile(r"\+[1-9]\d{6,14}")


def validate_phone_number(phone_number: str) -> bool:
    """
    Validates international phone number format.

    Example: +639171234567

    Args:
        phone_number: Phone number string

    Returns:
        True if valid, False otherwise
    """
    if not phone_number or not isinstance(phone_number, str):
        return False

    return PHONE_PATTERN.fullmatch(phone_number) is not None


def format_phone_number(phone_number: str, country_code: str = DEFAULT_COUNTRY_CODE) -> str:
    """
    Converts a local phone number to international format.

    "0917-123-4567" -> "+639171234567"
    "639171234567"  -> "+639171234567" (country code already present)

    Args:
        phone_number: Phone number in any common local format
        country_code: Country code with leading "+" (default: +63, Philippines)

    Returns:
        Phone number prefixed with the country code
    """
    cleaned = re.sub(r"\D", "", phone_number or "")

    # Trunk prefix used for local dialing
    if cleaned.startswith("0"):
        cleaned = cleaned[1:]

    if not cleaned.startswith(country_code.replace("+", "")):
        return f"{country_code}{cleaned}"

    return f"+{cleaned}"
