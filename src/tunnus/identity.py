"""Finnish national identifier validation.

This module validates the Finnish identifier formats:
- Personal Identity Numbers (henkilötunnus, HETU), also exposed as SSN
- Business IDs (Y-tunnus)
- VAT numbers (ALV-numero), derived from the Business ID
- Unique Identification Numbers (SATU, FINUID)

Every validator takes a string and returns a bool. Malformed input is
reported as ``False``; nothing here raises.

Example:
    >>> from tunnus.identity import validate_pin, validate_vat
    >>> validate_pin("311280-888Y")
    True
    >>> validate_vat("FI15728600")
    True
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import date
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)


# ============================================================================
# Tables
# ============================================================================

# Remainder (mod 31) -> control character. G, I, O, Q and Z are left out.
CONTROL_CHARACTERS = "0123456789ABCDEFHJKLMNPRSTUVWXY"

BUSINESS_ID_WEIGHTS = (7, 9, 10, 5, 8, 4, 2)

CENTURY_MARKERS: dict[str, int] = {
    "+": 18,
    "-": 19,
    "U": 19,
    "V": 19,
    "W": 19,
    "X": 19,
    "Y": 19,
}
DEFAULT_CENTURY = 20  # A, B, C, D, E, F

PIN_PATTERN = re.compile(
    r"(\d{2})(\d{2})(\d{2})([+\-UVWXYABCDEF])(\d{3})([0-9A-Z])", re.ASCII
)
FINUID_PATTERN = re.compile(r"(\d{8})([0-9A-Z])", re.ASCII)
BUSINESS_ID_PATTERN = re.compile(r"(\d{6,7})-(\d)", re.ASCII)


# ============================================================================
# Personal Identity Number
# ============================================================================

@dataclass(frozen=True)
class PersonalIdentityNumber:
    """A decomposed, checksum-valid personal identity number.

    Format: DDMMYYCIIIK
    - DDMMYY: Birth date (day, month, two last digits of the year)
    - C: Century marker ("+" 1800s, "-" or U-Y 1900s, A-F 2000s)
    - III: Individual number
    - K: Control character
    """

    birth_date: date
    century_marker: str
    individual_number: str
    control: str


def resolve_century(marker: str) -> int:
    """Return the century (18, 19 or 20) denoted by a century marker."""
    return CENTURY_MARKERS.get(marker, DEFAULT_CENTURY)


def resolve_birth_date(day: str, month: str, year: str, marker: str) -> date | None:
    """Build the Gregorian birth date, or None when no such date exists.

    Args:
        day: Two-digit day of month
        month: Two-digit month
        year: Two last digits of the year
        marker: Century marker

    Returns:
        The birth date, or None for impossible dates (e.g. 29 Feb 1900)
    """
    full_year = resolve_century(marker) * 100 + int(year)
    try:
        return date(full_year, int(month), int(day))
    except ValueError:
        return None


def _ascii_upper(number: object) -> str | None:
    """Uppercase ASCII text; None for non-strings and anything non-ASCII."""
    if not isinstance(number, str) or not number.isascii():
        return None
    return number.upper()


def control_character(digits: str) -> str:
    """Return the mod 31 control character for a run of decimal digits."""
    return CONTROL_CHARACTERS[int(digits) % 31]


def parse_pin(number: str) -> PersonalIdentityNumber | None:
    """Parse a personal identity number.

    ASCII letters are accepted in either case; any non-ASCII input is rejected.

    Args:
        number: Candidate PIN, e.g. "311280-888Y"

    Returns:
        The decomposed number if it is valid, None otherwise
    """
    number = _ascii_upper(number)
    if number is None:
        return None

    match = PIN_PATTERN.fullmatch(number)
    if match is None:
        return None

    day, month, year, marker, individual, control = match.groups()

    birth_date = resolve_birth_date(day, month, year, marker)
    if birth_date is None:
        logger.debug("Rejected personal identity number: invalid birth date")
        return None

    if control_character(day + month + year + individual) != control:
        logger.debug("Rejected personal identity number: control character mismatch")
        return None

    return PersonalIdentityNumber(
        birth_date=birth_date,
        century_marker=marker,
        individual_number=individual,
        control=control,
    )


def validate_pin(number: str) -> bool:
    """Validate a Finnish personal identity number (henkilötunnus)."""
    return parse_pin(number) is not None


def validate_ssn(number: str) -> bool:
    """Validate a Finnish social security number.

    Same format and rules as the personal identity number.
    """
    return validate_pin(number)


# ============================================================================
# Business ID and VAT number
# ============================================================================

def business_id_control_digit(number: str) -> int | None:
    """Compute the Business ID control digit.

    Args:
        number: The 6 or 7 digits before the separator

    Returns:
        The control digit, or None when the weighted sum leaves remainder 1
        (no control digit exists for such numbers)
    """
    padded = number.zfill(7)
    total = sum(int(d) * w for d, w in zip(padded, BUSINESS_ID_WEIGHTS))
    remainder = total % 11

    if remainder == 0:
        return 0
    if remainder == 1:
        return None
    return 11 - remainder


def validate_business_id(number: str) -> bool:
    """Validate a Finnish Business ID (Y-tunnus).

    Format: NNNNNNN-C, where a 6-digit number is read as zero-padded.
    """
    if not isinstance(number, str):
        return False

    match = BUSINESS_ID_PATTERN.fullmatch(number)
    if match is None:
        return False

    digits, control = match.groups()
    expected = business_id_control_digit(digits)
    if expected is None:
        logger.debug("Rejected business id: weighted sum has no control digit")
        return False

    return expected == int(control)


def validate_vat(number: str) -> bool:
    """Validate a Finnish VAT number (ALV-numero).

    Format: FI followed by the Business ID digits and control digit
    without the separator, e.g. FI15728600 for 1572860-0.
    """
    number = _ascii_upper(number)
    if number is None:
        return False

    country_code = number[:2]
    control = number[-1:]
    business_number = number[2:-1]

    if country_code != "FI":
        return False

    return validate_business_id(f"{business_number}-{control}")


# ============================================================================
# Unique Identification Number
# ============================================================================

def validate_finuid(number: str) -> bool:
    """Validate a Finnish Unique Identification Number (SATU).

    Format: eight digits followed by a control character, e.g. 10011187H.
    """
    number = _ascii_upper(number)
    if number is None:
        return False

    match = FINUID_PATTERN.fullmatch(number)
    if match is None:
        return False

    digits, control = match.groups()
    return control_character(digits) == control


# ============================================================================
# Validator interface
# ============================================================================

@runtime_checkable
class IdentityValidator(Protocol):
    """Interface of a national identity number validator."""

    @staticmethod
    def validate_pin(number: str) -> bool: ...

    @staticmethod
    def validate_ssn(number: str) -> bool: ...

    @staticmethod
    def validate_vat(number: str) -> bool: ...


class FinnishIdentityValidator:
    """Stateless IdentityValidator for Finnish identifiers."""

    validate_pin = staticmethod(validate_pin)
    validate_ssn = staticmethod(validate_ssn)
    validate_vat = staticmethod(validate_vat)
    validate_business_id = staticmethod(validate_business_id)
    validate_finuid = staticmethod(validate_finuid)
