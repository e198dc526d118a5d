import typing as t
from datetime import date

import pytest

from jmbg.service.validator import Gender, JmbgDetails, Region, is_valid_identifier, validate


def test_valid_jmbg() -> None:
    assert validate("0101990330124") == JmbgDetails(
        raw_value="0101990330124",
        birth_date=date(1990, 1, 1),
        is_birth_date_valid=True,
        region=Region.CROATIA,
        gender=Gender.MALE,
        is_valid=True,
    )
    assert validate("2801979505051") == JmbgDetails(
        raw_value="2801979505051",
        birth_date=date(1979, 1, 28),
        is_birth_date_valid=True,
        region=Region.SLOVENIA,
        gender=Gender.FEMALE,
        is_valid=True,
    )


def test_regions(subtests: t.Any) -> None:
    for value, region in (
        ("0101990100005", Region.BOSNIA_AND_HERZEGOVINA),
        ("0101990210005", Region.MONTENEGRO),
        ("0101990330124", Region.CROATIA),
        ("0101990410004", Region.MACEDONIA),
        ("2801979505051", Region.SLOVENIA),
        ("0101990715018", Region.SERBIA),
        ("0101990800007", Region.SERBIA_VOJVODINA),
        ("0101990910007", Region.REPUBLIC_OF_KOSOVO),
        ("0101990030007", Region.FOREIGN),
    ):
        with subtests.test(value=value):
            details = validate(value)
            assert details.is_valid
            assert details.region == region


def test_unknown_region_is_invalid(subtests: t.Any) -> None:
    # Checksums are correct, only the region code is unassigned
    for value in ("0101990010006", "0101990600008"):
        with subtests.test(value=value):
            details = validate(value)
            assert not details.is_valid
            assert details.region == Region.UNKNOWN
            assert details.gender == Gender.UNKNOWN
            assert details.birth_date == date(1990, 1, 1)


def test_gender_boundary() -> None:
    assert validate("0101990715018").gender == Gender.FEMALE
    assert validate("0101990330000").gender == Gender.MALE


def test_zero_remainder_check_digit() -> None:
    assert validate("0101990330000").is_valid


def test_remainder_one_is_always_invalid() -> None:
    for check_digit in "0123456789":
        assert not is_valid_identifier("010199033006" + check_digit)


def test_checksum_mismatch_keeps_birth_date() -> None:
    details = validate("0101990123456")
    assert not details.is_valid
    assert details.birth_date == date(1990, 1, 1)
    assert details.is_birth_date_valid
    assert details.region == Region.UNKNOWN
    assert details.gender == Gender.UNKNOWN
    assert details.format() == "0101990"
    assert str(details) == "0101990"


def test_wrong_length(subtests: t.Any) -> None:
    for value in ("", "0", "010199", "0101990", "010199033012", "01019903301240", "69435151530"):
        for accept_oib in (False, True):
            if accept_oib and len(value) == 11:
                continue
            with subtests.test(value=value, accept_oib=accept_oib):
                assert not validate(value, accept_oib).is_valid


def test_non_digit_in_any_position(subtests: t.Any) -> None:
    valid = "0101990330124"
    for position in range(len(valid)):
        for char in ("x", "²", "-"):
            value = valid[:position] + char + valid[position + 1 :]
            with subtests.test(value=value):
                details = validate(value)
                assert not details.is_valid
                assert details.region == Region.UNKNOWN


def test_non_digit_characters() -> None:
    assert not is_valid_identifier("0101990a30124")
    assert not is_valid_identifier("010199033012x")
    assert not is_valid_identifier("0101990 30124")
    # Non-ASCII digits are not digits here
    assert not is_valid_identifier("0101990３30124")


def test_birth_date_year_tail() -> None:
    assert validate("0101800").birth_date == date(1800, 1, 1)
    assert validate("0101799").birth_date == date(2799, 1, 1)
    assert validate("0101000").birth_date == date(2000, 1, 1)
    assert validate("3112999").birth_date == date(1999, 12, 31)


def test_impossible_dates(subtests: t.Any) -> None:
    for value in ("3102990", "3002000", "2902900", "0001990", "0100990", "3201990", "0113990", "+101990", " 101990"):
        with subtests.test(value=value):
            details = validate(value)
            assert details.birth_date is None
            assert not details.is_birth_date_valid
            assert details.format() == ""

    assert validate("2902000").birth_date == date(2000, 2, 29)


def test_impossible_date_does_not_block_checksum() -> None:
    # 31 February with an otherwise correct checksum and region
    details = validate("3102990330008")
    assert details.birth_date is None
    assert not details.is_birth_date_valid
    assert details.is_valid
    assert details.region == Region.CROATIA


def test_future_birth_date() -> None:
    details = validate("0101700330002")
    assert details.is_valid
    assert details.birth_date == date(2700, 1, 1)
    assert not details.is_birth_date_valid
    assert details.format() == "0101700330002"

    details = validate("0101700330003")
    assert not details.is_valid
    assert details.birth_date == date(2700, 1, 1)
    assert details.format() == ""


def test_format() -> None:
    assert validate("0101990330124").format() == "0101990330124"
    assert validate("2801979").format() == "2801979"
    assert validate("2801979505050").format() == "2801979"
    assert validate("0101000").format() == "0101000"
    assert validate("foo").format() == ""


def test_valid_oib() -> None:
    for value in ("69435151530", "12345678903"):
        details = validate(value, accept_oib=True)
        assert details == JmbgDetails(raw_value=value, is_valid=True)
        assert details.format() == value

    # OIBs are only recognised when asked for
    assert not is_valid_identifier("69435151530")
    assert validate("69435151530").region == Region.UNKNOWN


def test_invalid_oib() -> None:
    details = validate("12345678900", accept_oib=True)
    assert not details.is_valid
    assert details.region == Region.UNKNOWN
    assert details.gender == Gender.UNKNOWN
    assert not details.is_birth_date_valid
    assert details.format() == ""

    assert not is_valid_identifier("1234567890a", accept_oib=True)
    assert not is_valid_identifier("12345a78903", accept_oib=True)


def test_oib_single_digit_substitution() -> None:
    valid = "69435151530"
    for position in range(10):
        for digit in "0123456789":
            if digit == valid[position]:
                continue
            mutated = valid[:position] + digit + valid[position + 1 :]
            assert not is_valid_identifier(mutated, accept_oib=True), mutated


def test_thirteen_digits_with_oib_enabled() -> None:
    assert validate("0101990330124", accept_oib=True).region == Region.CROATIA


def test_none_is_rejected() -> None:
    with pytest.raises(TypeError):
        validate(None)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        is_valid_identifier(101990330124)  # type: ignore[arg-type]


def test_details_are_frozen() -> None:
    details = validate("0101990330124")
    with pytest.raises(ValueError):
        details.is_valid = False  # type: ignore[misc]


def test_enums() -> None:
    assert Region("croatia") is Region.CROATIA
    assert str(Region.SERBIA_VOJVODINA) == "SERBIA_VOJVODINA"
    assert Region.SERBIA_VOJVODINA.description == "Vojvodina (Serbia)"
    assert Region.REPUBLIC_OF_KOSOVO.description == "Republic of Kosovo"
    assert Gender("Female") is Gender.FEMALE
    assert Gender.FEMALE.description == "Female"
    assert Gender.UNKNOWN.description == "Unknown"


def test_serialisation() -> None:
    assert validate("0101990330124").model_dump(mode="json") == {
        "raw_value": "0101990330124",
        "birth_date": "1990-01-01",
        "is_birth_date_valid": True,
        "region": "CROATIA",
        "gender": "MALE",
        "is_valid": True,
    }
