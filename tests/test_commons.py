import pytest

from homefinancials.commons import (
    DatabaseError,
    HomeFinancialsError,
    InvalidInputError,
    MaxMembersExceededError,
    NotFoundError,
    parse_money_to_paise,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Rs.7,43,483.09", 74348309),
        ("Rs.2,74,369.09", 27436909),
        ("Rs.9,99,999.00", 99999900),
    ],
)
def test_parses_rupee_amounts(text, expected):
    assert parse_money_to_paise(text) == expected


@pytest.mark.parametrize("text", ["", "abc", "Rs", ",,,"])
def test_unparseable_returns_none(text):
    assert parse_money_to_paise(text) is None


def test_overflow_returns_none():
    assert parse_money_to_paise("99999999999999999999") is None


@pytest.mark.parametrize("paise", [0, 1, 99, 100, 12345, 74348309])
def test_round_trip_from_formatted_value(paise):
    assert parse_money_to_paise(f"{paise // 100}.{paise % 100:02d}") == paise


def test_minus_sign_negates():
    assert parse_money_to_paise("-Rs.2,74,369.09") == -parse_money_to_paise("Rs.2,74,369.09")


def test_minus_anywhere_negates():
    assert parse_money_to_paise("274369.09-") == -parse_money_to_paise("274369.09")


def test_integer_without_decimal_point_has_zero_paise():
    assert parse_money_to_paise("12") == parse_money_to_paise("12.00")


def test_fraction_is_truncated_to_two_digits():
    assert parse_money_to_paise("1.239") == parse_money_to_paise("1.23")


def test_single_fraction_digit_is_padded():
    assert parse_money_to_paise("5.5") == parse_money_to_paise("5.50")


def test_missing_integer_part_reads_as_zero():
    assert parse_money_to_paise(".75") == parse_money_to_paise("0.75")


def test_currency_prefix_dot_is_ignored():
    assert parse_money_to_paise("Rs.100.25") == parse_money_to_paise("100.25")


@pytest.mark.parametrize(
    "error_type",
    [InvalidInputError, MaxMembersExceededError, NotFoundError, DatabaseError],
)
def test_errors_share_a_base_class(error_type):
    assert issubclass(error_type, HomeFinancialsError)
    with pytest.raises(HomeFinancialsError) as excinfo:
        raise error_type("failure")
    assert excinfo.type is error_type
    assert str(excinfo.value) == "failure"