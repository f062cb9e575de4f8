from __future__ import annotations

import pendulum
import pytest

from data_parser.utils.parsers import (
    compile_date_format,
    expand_two_digit_year,
    is_valid_email,
    parse_double,
    parse_email,
    parse_flexible_date,
    parse_integer,
    parse_non_empty_string,
)


@pytest.mark.parametrize(
    "text, expected",
    [("42", 42), ("-7", -7), ("+3", 3), ("007", 7),
     ("2147483647", 2147483647), ("-2147483648", -2147483648)],
)
def test_parse_integer_accepts(text, expected):
    assert parse_integer(text) == expected


@pytest.mark.parametrize(
    "text", ["", "abc", "12a", "1,000", "1_000", "1.0", "2147483648", "-2147483649", "٣"]
)
def test_parse_integer_rejects(text):
    with pytest.raises(ValueError):
        parse_integer(text)


@pytest.mark.parametrize(
    "text, expected",
    [("1", 1.0), ("-2.5", -2.5), (".5", 0.5), ("3.", 3.0), ("1e10", 1e10), ("6.02E+23", 6.02e23)],
)
def test_parse_double_accepts(text, expected):
    assert parse_double(text) == expected


@pytest.mark.parametrize("text", ["", ".", "abc", "1,5", "1,000.0", "1_0.0", "inf", "nan", "1e", "--1"])
def test_parse_double_rejects(text):
    with pytest.raises(ValueError):
        parse_double(text)


def test_parse_non_empty_string():
    assert parse_non_empty_string("hello") == "hello"
    for text in ("", "   ", "\t"):
        with pytest.raises(ValueError):
            parse_non_empty_string(text)


@pytest.mark.parametrize(
    "text",
    ["25/12/2024", "25-12-2024", "25.12.2024", "25122024", "25 12 2024",
     "25/12/24", "25-12-24", "25.12.24", "251224", "25 12 24"],
)
def test_every_default_format(text):
    assert parse_flexible_date(text) == pendulum.date(2024, 12, 25)


def test_short_formats_take_one_digit_day_and_month():
    assert parse_flexible_date("1/2/24") == pendulum.date(2024, 2, 1)
    assert parse_flexible_date("111224") == pendulum.date(2024, 12, 11)
    assert parse_flexible_date("5 7 99") == pendulum.date(1999, 7, 5)


@pytest.mark.parametrize("text", ["1124", "1224", "11224"])
def test_unseparated_short_date_does_not_backtrack(text):
    # DMYY takes two digits for D and M whenever it can, like an exact
    # parse reading left to right; "1124" is D=11 M=2 and no year left
    with pytest.raises(ValueError):
        parse_flexible_date(text)


def test_four_digit_patterns_need_four_digit_years():
    # "24" is not a YYYY year, so the later D/M/YY pattern wins
    assert parse_flexible_date("01/06/24") == pendulum.date(2024, 6, 1)


@pytest.mark.parametrize("text", ["", "hello", "2024-12-25", "31/02/2024", "32/01/2024", "1/13/24", "25/12/202"])
def test_parse_flexible_date_rejects(text):
    with pytest.raises(ValueError):
        parse_flexible_date(text)


def test_custom_formats_replace_defaults():
    assert parse_flexible_date("2024-12-25", ["YYYY-MM-DD"]) == pendulum.date(2024, 12, 25)
    with pytest.raises(ValueError):
        parse_flexible_date("25/12/2024", ["YYYY-MM-DD"])


def test_first_matching_format_wins():
    assert parse_flexible_date("01/02/2024", ["MM/DD/YYYY", "DD/MM/YYYY"]) == pendulum.date(2024, 1, 2)


def test_two_digit_year_window():
    assert expand_two_digit_year(0) == 2000
    assert expand_two_digit_year(49) == 2049
    assert expand_two_digit_year(50) == 1950
    assert expand_two_digit_year(99) == 1999


@pytest.mark.parametrize("fmt", ["DD/MM", "YYYY", "DD/MM/YYYY/YY", "MMM D YYYY", "hello"])
def test_compile_date_format_rejects_incomplete_patterns(fmt):
    with pytest.raises(ValueError):
        compile_date_format(fmt)


def test_compile_date_format_escapes_literals():
    pattern = compile_date_format("DD.MM.YYYY")
    assert pattern.fullmatch("25.12.2024")
    assert not pattern.fullmatch("25x12x2024")


@pytest.mark.parametrize(
    "email", ["a.b@example.com", "first-last@sub.domain.org", "user_1@mail.co", "x@y-z.info"]
)
def test_valid_emails(email):
    assert is_valid_email(email)
    assert parse_email(email) == email


@pytest.mark.parametrize(
    "email", ["", "not-an-email", "a@b", "a@example.toolong", "a b@example.com", "@example.com", "a@@example.com"]
)
def test_invalid_emails(email):
    assert not is_valid_email(email)
    with pytest.raises(ValueError):
        parse_email(email)
