from data_parser.config.config_parser import CANCELLED_MESSAGE, END_OF_INPUT_MESSAGE


class UserCancelled(Exception):
    """
    The user typed the exit keyword at a prompt.

    Never caught by the prompt helpers. Callers treat it as
    "abandon the current operation", not as a crash.
    """

    def __init__(self, msg: str = CANCELLED_MESSAGE):
        super().__init__(msg)


class EndOfInput(EOFError):
    """The input stream ran out while a prompt was waiting for a line."""

    def __init__(self, msg: str = END_OF_INPUT_MESSAGE):
        super().__init__(msg)


class PromptTimedOut(Exception):
    """A timed prompt's budget elapsed without a usable line."""
