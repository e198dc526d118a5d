"""
Validation of JMBG (13 digit Yugoslav unique master citizen number) and OIB
(11 digit Croatian personal identification number) values.
"""

import calendar
import enum
import logging
from datetime import date

from pydantic import BaseModel, ConfigDict

from jmbg.util.enum import CaseInsensitiveUppercaseEnum

logger = logging.getLogger(__name__)

JMBG_LENGTH = 13
OIB_LENGTH = 11

_JMBG_WEIGHTS = (7, 6, 5, 4, 3, 2, 7, 6, 5, 4, 3, 2)
_FOREIGN_REGION_CODE = "03"


class Region(CaseInsensitiveUppercaseEnum):
    UNKNOWN = enum.auto()
    BOSNIA_AND_HERZEGOVINA = enum.auto()
    MONTENEGRO = enum.auto()
    CROATIA = enum.auto()
    MACEDONIA = enum.auto()
    SLOVENIA = enum.auto()
    SERBIA = enum.auto()
    SERBIA_VOJVODINA = enum.auto()
    REPUBLIC_OF_KOSOVO = enum.auto()
    FOREIGN = enum.auto()

    @property
    def description(self) -> str:
        return _REGION_DESCRIPTIONS[self]


_REGION_DESCRIPTIONS = {
    Region.UNKNOWN: "Unknown",
    Region.BOSNIA_AND_HERZEGOVINA: "Bosnia and Herzegovina",
    Region.MONTENEGRO: "Montenegro",
    Region.CROATIA: "Croatia",
    Region.MACEDONIA: "Macedonia",
    Region.SLOVENIA: "Slovenia",
    Region.SERBIA: "Serbia",
    Region.SERBIA_VOJVODINA: "Vojvodina (Serbia)",
    Region.REPUBLIC_OF_KOSOVO: "Republic of Kosovo",
    Region.FOREIGN: "Foreign",
}

# Only the first digit of the two digit region code is significant
_REGION_BY_LEADING_DIGIT = {
    "1": Region.BOSNIA_AND_HERZEGOVINA,
    "2": Region.MONTENEGRO,
    "3": Region.CROATIA,
    "4": Region.MACEDONIA,
    "5": Region.SLOVENIA,
    "7": Region.SERBIA,
    "8": Region.SERBIA_VOJVODINA,
    "9": Region.REPUBLIC_OF_KOSOVO,
}


class Gender(CaseInsensitiveUppercaseEnum):
    UNKNOWN = enum.auto()
    MALE = enum.auto()
    FEMALE = enum.auto()

    @property
    def description(self) -> str:
        return self.name.capitalize()


class JmbgDetails(BaseModel):
    """
    Everything that could be decoded from a JMBG or OIB. Built once by
    `validate` and read-only afterwards.
    """

    model_config = ConfigDict(frozen=True)

    raw_value: str
    birth_date: date | None = None
    is_birth_date_valid: bool = False
    region: Region = Region.UNKNOWN
    gender: Gender = Gender.UNKNOWN
    is_valid: bool = False

    def format(self) -> str:
        """
        Return the identifier if it is valid, otherwise the DDMMYYY birth date
        prefix if that much could be salvaged, otherwise an empty string.
        """
        if self.is_valid:
            return self.raw_value
        if self.is_birth_date_valid and self.birth_date is not None:
            return _date_prefix(self.birth_date)
        return ""

    def __str__(self) -> str:
        return self.format()


def _parse_digits(text: str) -> int | None:
    if not (text.isascii() and text.isdigit()):
        return None
    return int(text)


def _date_prefix(birth_date: date) -> str:
    return f"{birth_date.day:02d}{birth_date.month:02d}{birth_date.year % 1000:03d}"


def _extract_birth_date(value: str) -> date | None:
    """
    Decode the DDMMYYY birth date from the first seven characters.

    The year only carries its last three digits; anything below 800 is taken
    to be in the 2000s.
    """
    day = _parse_digits(value[0:2])
    month = _parse_digits(value[2:4])
    year_tail = _parse_digits(value[4:7])
    if day is None or month is None or year_tail is None:
        logger.debug("Birth date contains non-digit characters")
        return None

    year = 1000 + year_tail
    if year < 1800:
        year += 1000

    if not 1 <= month <= 12 or not 1 <= day <= calendar.monthrange(year, month)[1]:
        logger.debug("Birth date is not a calendar date")
        return None

    birth_date = date(year, month, day)
    if _date_prefix(birth_date) != value[0:7]:
        logger.debug("Birth date does not round-trip")
        return None
    return birth_date


def _oib_checksum_matches(value: str) -> bool:
    """
    ISO 7064 MOD 11-10 check over the first ten digits.
    """
    total = 10
    for char in value[:10]:
        digit = _parse_digits(char)
        if digit is None:
            logger.debug("OIB contains non-digit characters")
            return False
        total += digit
        if total > 10:
            total -= 10
        total *= 2
        if total >= 11:
            total -= 11

    check = 11 - total
    check_digit = "0" if check == 10 else str(check)
    if value[10] != check_digit:
        logger.debug("OIB checksum mismatch")
        return False
    return True


def _jmbg_checksum_matches(digits: list[int]) -> bool:
    remainder = sum(weight * digit for weight, digit in zip(_JMBG_WEIGHTS, digits)) % 11
    if remainder == 1:
        # No check digit exists for this residue
        logger.debug("JMBG checksum residue has no valid check digit")
        return False

    expected = 0 if remainder == 0 else 11 - remainder
    if expected != digits[12]:
        logger.debug("JMBG checksum mismatch")
        return False
    return True


def _classify(value: str) -> tuple[Region, Gender] | None:
    """
    Check the structure and checksum of a JMBG and decode its region and
    gender. Returns None if the value is not a valid JMBG.
    """
    if len(value) != JMBG_LENGTH:
        logger.debug("JMBG has wrong length %d", len(value))
        return None

    if not (value.isascii() and value.isdigit()):
        logger.debug("JMBG contains non-digit characters")
        return None

    if not _jmbg_checksum_matches([int(char) for char in value]):
        return None

    region_code = value[7:9]
    if region_code == _FOREIGN_REGION_CODE:
        region = Region.FOREIGN
    elif region_code[0] in _REGION_BY_LEADING_DIGIT:
        region = _REGION_BY_LEADING_DIGIT[region_code[0]]
    else:
        logger.debug("JMBG has unknown region code")
        return None

    gender = Gender.MALE if int(value[9:12]) < 500 else Gender.FEMALE
    return region, gender


def validate(value: str, accept_oib: bool = False) -> JmbgDetails:
    """
    Validate a JMBG, or with `accept_oib` also an 11 digit OIB, and decode
    what it carries.

    Malformed identifiers never raise; they come back with `is_valid` set to
    False and whatever could be decoded before the failure (the birth date
    is kept even when the checksum is wrong). Raises TypeError if `value` is
    not a string.
    """
    if not isinstance(value, str):
        raise TypeError(f"value must be a str, not {type(value).__name__}")

    if accept_oib and len(value) == OIB_LENGTH:
        return JmbgDetails(raw_value=value, is_valid=_oib_checksum_matches(value))

    birth_date = _extract_birth_date(value) if len(value) >= 7 else None
    is_birth_date_valid = birth_date is not None and birth_date <= date.today()

    classification = _classify(value)
    if classification is None:
        return JmbgDetails(raw_value=value, birth_date=birth_date, is_birth_date_valid=is_birth_date_valid)

    region, gender = classification
    return JmbgDetails(
        raw_value=value,
        birth_date=birth_date,
        is_birth_date_valid=is_birth_date_valid,
        region=region,
        gender=gender,
        is_valid=True,
    )


def is_valid_identifier(value: str, accept_oib: bool = False) -> bool:
    """
    Check if the given value is a valid JMBG (or OIB when `accept_oib` is set).
    """
    return validate(value, accept_oib).is_valid
