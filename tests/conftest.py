from __future__ import annotations

import io
import sys

import pytest


@pytest.fixture
def stdin(monkeypatch):
    """Replace standard input with scripted lines. No lines means end of input."""

    def feed(*lines: str) -> io.StringIO:
        stream = io.StringIO("".join(f"{line}\n" for line in lines))
        monkeypatch.setattr(sys, "stdin", stream)
        return stream

    return feed
