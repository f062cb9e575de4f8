import logging
import os
import sys
import traceback
import pendulum

from data_parser.config.config_parser import LOG_FILE, CANCELLED_MESSAGE
from data_parser.utils.exceptions import UserCancelled


def setup_logging(log_file: str | os.PathLike = LOG_FILE) -> None:
    """
    Send error records to the log file and install the exception hook.

    Does nothing if the root logger is already configured, so callers
    embedding the prompts in a larger program keep their own setup.
    """
    if logging.getLogger().handlers:
        return  # already configured

    logging.basicConfig(
        filename=log_file,
        filemode="a",
        level=logging.ERROR,
        format="%(message)s",
    )

    sys.excepthook = log_uncaught_exceptions


def log_error(logger: logging.Logger, msg: str) -> None:
    """Log an error line prefixed with the current ISO-8601 timestamp."""
    now = pendulum.now().to_iso8601_string()
    logger.error(f"[{now}] {msg}")


def log_uncaught_exceptions(exctype, value, tb):
    """
    sys.excepthook replacement.

    A cancellation that nobody caught is the user abandoning the program,
    not a crash: it is reported on stderr and never logged. Anything else
    is written to the error log with a compact traceback.
    """
    if issubclass(exctype, UserCancelled):
        print(f"\n{value or CANCELLED_MESSAGE}", file=sys.stderr)
        return

    if issubclass(exctype, KeyboardInterrupt):
        sys.__excepthook__(exctype, value, tb)
        return

    lines = []
    for frame in traceback.extract_tb(tb):
        filename = os.path.basename(frame.filename)
        lines.append(
            f'  File "{filename}", line {frame.lineno}, in {frame.name}'
        )

    trace_summary = "\n".join(reversed(lines)) if lines else "  <no traceback>"
    error_msg = f"{exctype.__name__}: {value}"

    log_error(
        logging.getLogger(),
        f"Uncaught exception: {error_msg}\n"
        f"Traceback (most recent call last):\n"
        f"{trace_summary}\n"
        f"{error_msg}\n"
    )

    print("\nError! Something went wrong.", file=sys.stderr)
    print("Details saved to the error log\n", file=sys.stderr)
