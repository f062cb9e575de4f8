"""
Parsers used by the prompt loops.

Each parser takes an already trimmed line and either returns the typed
value or raises ValueError. The prompt loop treats ValueError as
"invalid input, ask again".
"""
import re
from functools import lru_cache

import pendulum

from data_parser.config.config_parser import *

_INT_RE = re.compile(r"[+-]?[0-9]+")
_DOUBLE_RE = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")
_EMAIL_RE = re.compile(EMAIL_PATTERN)

# Longest tokens first so "YYYY" is not read as two "YY"
_DATE_TOKEN_RE = re.compile(r"(YYYY|YY|MM|M|DD|D)")
_DATE_TOKENS = {
    "YYYY": ("year", r"[0-9]{4}"),
    "YY":   ("short_year", r"[0-9]{2}"),
    "MM":   ("month", r"[0-9]{2}"),
    "M":    ("month", r"[0-9]{1,2}+"),
    "DD":   ("day", r"[0-9]{2}"),
    "D":    ("day", r"[0-9]{1,2}+"),
}


def parse_integer(text: str) -> int:
    """Base 10 integer, no separators, within the 32-bit signed range."""
    if not _INT_RE.fullmatch(text):
        raise ValueError(f"not an integer: {text!r}")

    value = int(text)
    if not INT_MIN <= value <= INT_MAX:
        raise ValueError(f"integer out of range: {text}")
    return value


def parse_double(text: str) -> float:
    """
    Floating point literal in invariant notation.

    Accepts "1", "-2.5", ".5", "3.", "1e10", "6.02E+23". Rejects
    thousands separators, decimal commas, underscores, inf and nan.
    """
    if not _DOUBLE_RE.fullmatch(text):
        raise ValueError(f"not a number: {text!r}")
    return float(text)


def parse_non_empty_string(text: str) -> str:
    if not text.strip():
        raise ValueError("empty input")
    return text


@lru_cache(maxsize=64)
def compile_date_format(fmt: str) -> re.Pattern:
    """
    Turn a date pattern like "DD/MM/YYYY" into an exact-match regex.

    Digit widths are strict: DD, MM and YY need two digits, YYYY four,
    D and M one or two, taken greedily with no backtracking, so "1124"
    does not fit DMYY.

    Raises:
        ValueError: If the pattern does not name a day, a month and a
            year exactly once each.
    """
    parts = _DATE_TOKEN_RE.split(fmt)
    fields = []
    regex = []
    for i, part in enumerate(parts):
        # split() with a capture group puts tokens at odd indexes
        if i % 2:
            name, digits = _DATE_TOKENS[part]
            fields.append("year" if name == "short_year" else name)
            regex.append(f"(?P<{name}>{digits})")
        else:
            regex.append(re.escape(part))

    if sorted(fields) != ["day", "month", "year"]:
        raise ValueError(f"Unsupported date format: {fmt!r}")

    return re.compile("".join(regex))


def expand_two_digit_year(short_year: int, year_max: int = TWO_DIGIT_YEAR_MAX) -> int:
    year = year_max // 100 * 100 + short_year
    if year > year_max:
        year -= 100
    return year


def parse_flexible_date(text: str, formats=None) -> pendulum.Date:
    """
    Match text against each accepted pattern in order, first match wins.

    A pattern that matches the shape but names an impossible date
    (31/02/2024) does not count as a match; the next pattern is tried.

    Args:
        text: Trimmed input line.
        formats: Ordered list of patterns. Defaults to DEFAULT_DATE_FORMATS.

    Returns:
        The parsed pendulum.Date.

    Raises:
        ValueError: If no pattern produces a valid date.
    """
    for fmt in formats or DEFAULT_DATE_FORMATS:
        match = compile_date_format(fmt).fullmatch(text)
        if not match:
            continue

        parsed = match.groupdict()
        if "short_year" in parsed:
            year = expand_two_digit_year(int(parsed["short_year"]))
        else:
            year = int(parsed["year"])

        try:
            return pendulum.date(year, int(parsed["month"]), int(parsed["day"]))
        except ValueError:
            continue

    raise ValueError(f"no accepted date format matches {text!r}")


def is_valid_email(email: str) -> bool:
    return _EMAIL_RE.fullmatch(email) is not None


def parse_email(text: str) -> str:
    if not is_valid_email(text):
        raise ValueError(f"not an email address: {text!r}")
    return text
