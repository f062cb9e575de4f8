import inspect
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .exceptions import EndOfInput, PromptTimedOut, UserCancelled


class PromptStatus(Enum):
    VALUE = "value"
    CANCELLED = "cancelled"
    END_OF_INPUT = "end_of_input"
    TIMED_OUT = "timed_out"


@dataclass
class PromptResult:
    status: PromptStatus
    value: Any = None

    @property
    def ok(self) -> bool:
        return self.status is PromptStatus.VALUE


def try_prompt(func, *args, **kwargs) -> PromptResult:
    """
    Run a prompt and report how it ended instead of raising or exiting.

    The prompt's fail-fast and soft-timeout wrappers are bypassed, so a
    closed input stream comes back as END_OF_INPUT rather than ending the
    process, and a timed prompt that runs out comes back as TIMED_OUT
    rather than "".

    Example:
        result = try_prompt(prompt_for_integer, "Quantity:")
        if result.status is PromptStatus.CANCELLED:
            return
    """
    raw = inspect.unwrap(func)
    try:
        value = raw(*args, **kwargs)
    except UserCancelled:
        return PromptResult(PromptStatus.CANCELLED)
    except EndOfInput:
        return PromptResult(PromptStatus.END_OF_INPUT)
    except PromptTimedOut:
        return PromptResult(PromptStatus.TIMED_OUT)

    return PromptResult(PromptStatus.VALUE, value)
