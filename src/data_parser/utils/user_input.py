import functools
import logging
import sys
from typing import Callable, TypeVar

import pendulum

from data_parser.config.config_parser import *
from data_parser.config.logging_config import log_error
from .exceptions import EndOfInput, UserCancelled
from .parsers import (
    compile_date_format,
    parse_double,
    parse_email,
    parse_flexible_date,
    parse_integer,
    parse_non_empty_string,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


def clean_line(line: str) -> str:
    """
    Trim a raw input line and check it for the exit keyword.

    Raises:
        UserCancelled: If the trimmed line is the exit keyword (any case).
    """
    line = line.strip()
    if line.lower() == EXIT_KEYWORD.lower():
        raise UserCancelled()
    return line


def read_line_safe() -> str:
    """
    Read one line from standard input and trim it.

    Returns:
        The trimmed line. May be empty.

    Raises:
        UserCancelled: If the line is the exit keyword (any case).
        EndOfInput: If standard input is exhausted.
    """
    try:
        line = input()
    except EOFError:
        raise EndOfInput() from None

    return clean_line(line)


def fail_fast(func):
    """
    Turn EndOfInput into a logged, non-zero process exit.

    The prompts are meant for an interactive user; a closed input stream
    means nobody is there to answer. The undecorated function stays
    reachable through __wrapped__ for callers that want to handle it.
    The error is logged only when logging is configured (setup_logging).
    """
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except EndOfInput as e:
            print(f"\n{e}", file=sys.stderr)
            # Unconfigured logging would echo the message to stderr again
            if logger.hasHandlers():
                log_error(logger, f"{e} ({func.__name__})")
            sys.exit(1)

    return wrapper


def prompt_for(prompt: str,
               parse: Callable[[str], T],
               error_message: str | Callable[[str], str] | None = None,
               display_errors: bool = True) -> T:
    """
    Prompt until parse() accepts the input.

    Prints the prompt (when non-empty) before every attempt and the error
    message after every rejected attempt. There is no retry limit.

    Args:
        prompt: Text shown before each read. Empty or None shows nothing.
        parse: Called with the trimmed line. Returns the value or raises
            ValueError to reject it.
        error_message: Shown after a rejected line. A callable receives
            the rejected line and returns the message.
        display_errors: If False, rejected lines are silently re-prompted.

    Returns:
        The first value parse() accepts.

    Raises:
        UserCancelled: If the exit keyword is entered.
        EndOfInput: If input runs out.
    """
    while True:
        if prompt:
            print(prompt)

        line = read_line_safe()

        try:
            return parse(line)
        except ValueError:
            pass

        if display_errors and error_message:
            msg = error_message(line) if callable(error_message) else error_message
            print(msg)


@fail_fast
def prompt_for_integer(prompt: str,
                       error_message: str = INTEGER_ERROR,
                       display_errors: bool = True) -> int:
    return prompt_for(prompt, parse_integer, error_message, display_errors)


@fail_fast
def prompt_for_double(prompt: str,
                      error_message: str = DOUBLE_ERROR,
                      display_errors: bool = True) -> float:
    return prompt_for(prompt, parse_double, error_message, display_errors)


@fail_fast
def prompt_for_non_empty_string(prompt: str,
                                error_message: str = STRING_ERROR,
                                display_errors: bool = True) -> str:
    """Returns the trimmed input. Blank or whitespace-only input is re-prompted."""
    return prompt_for(prompt, parse_non_empty_string, error_message, display_errors)


def _date_parser(accepted_formats, default_today: bool):
    formats = list(accepted_formats or DEFAULT_DATE_FORMATS)

    # A bad pattern is a programming error; raise before reading anything
    for fmt in formats:
        compile_date_format(fmt)

    def parse(text: str) -> pendulum.Date:
        if default_today and text == "":
            return pendulum.today().date()
        return parse_flexible_date(text, formats)

    message = DATE_ERROR.format(formats=", ".join(formats))
    return parse, message


@fail_fast
def prompt_for_flexible_date(prompt: str,
                             accepted_formats: list[str] | None = None,
                             display_errors: bool = True) -> pendulum.Date:
    """
    Prompt for a date in any of the accepted formats.

    Args:
        prompt: Text displayed to the user.
        accepted_formats: Ordered patterns, first match wins. Defaults to
            DEFAULT_DATE_FORMATS.
        display_errors: If True, list the accepted formats after a
            rejected line.

    Returns:
        The parsed date.

    Raises:
        ValueError: If accepted_formats contains an unsupported pattern.
        UserCancelled: If the exit keyword is entered.
    """
    parse, message = _date_parser(accepted_formats, default_today=False)
    return prompt_for(prompt, parse, message, display_errors)


@fail_fast
def prompt_for_flexible_date_or_default(prompt: str,
                                        accepted_formats: list[str] | None = None,
                                        display_errors: bool = True) -> pendulum.Date:
    """Same as prompt_for_flexible_date, but a blank line means today."""
    parse, message = _date_parser(accepted_formats, default_today=True)
    return prompt_for(prompt, parse, message, display_errors)


@fail_fast
def prompt_for_email(prompt: str,
                     error_message: str = EMAIL_ERROR,
                     display_errors: bool = True) -> str:
    return prompt_for(prompt, parse_email, error_message, display_errors)
