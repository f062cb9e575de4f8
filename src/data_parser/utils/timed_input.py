import functools
import time

from inputimeout import inputimeout, TimeoutOccurred

try:
    import termios
except ImportError:  # Windows: inputimeout polls the console there
    termios = None

from data_parser.config.config_parser import TIMEOUT_SECONDS, TIMEOUT_MESSAGE, EMPTY_READ_PAUSE
from .exceptions import PromptTimedOut
from .user_input import clean_line

# On timeout inputimeout flushes stdin with tcflush, which fails with
# termios.error when stdin is a pipe or file rather than a terminal
_NO_INPUT = (TimeoutOccurred,) if termios is None else (TimeoutOccurred, termios.error)


def soft_timeout(func):
    """Return "" instead of raising PromptTimedOut."""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except PromptTimedOut:
            return ""

    return wrapper


@soft_timeout
def prompt_for_string_with_timeout(prompt: str,
                                   timeout: float = TIMEOUT_SECONDS,
                                   timeout_message: str = TIMEOUT_MESSAGE) -> str:
    """
    Prompt for a non-blank line, giving up after timeout seconds.

    The budget covers the whole call: blank lines are ignored and do not
    reset the clock. Works with a terminal or redirected input.

    Args:
        prompt: Text displayed once before waiting.
        timeout: Overall budget in seconds.
        timeout_message: Printed once when the budget runs out.

    Returns:
        The trimmed line, or "" if the time ran out.

    Raises:
        UserCancelled: If the exit keyword is entered.
    """
    if prompt:
        print(prompt)

    deadline = time.monotonic() + timeout

    while True:
        remaining = deadline - time.monotonic()
        if remaining <= 0:
            break

        try:
            raw = inputimeout(prompt="", timeout=remaining)
        except _NO_INPUT:
            break

        line = clean_line(raw)
        if line:
            return line

        # Blank line, or end of input which keeps reading empty
        time.sleep(min(EMPTY_READ_PAUSE, max(0.0, deadline - time.monotonic())))

    print(timeout_message)
    raise PromptTimedOut(timeout_message)
