from __future__ import annotations

import contextlib
import logging
import sys


@contextlib.contextmanager
def bare_root_logger():
    """Empty the root logger in place, then put pytest's handlers back."""
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    saved_hook = sys.excepthook
    root.handlers.clear()
    try:
        yield root
    finally:
        for handler in root.handlers[:]:
            root.removeHandler(handler)
            handler.close()
        root.handlers.extend(saved_handlers)
        root.setLevel(saved_level)
        sys.excepthook = saved_hook
