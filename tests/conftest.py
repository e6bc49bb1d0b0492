"""
Pytest fixtures for ctxlog tests. Backends write JSON lines to an in-memory
stream and record exit codes instead of terminating the test process.
"""

from __future__ import annotations

import io
import json
import logging

import pytest

from ctxlog import LoggerConfig, new_backend


class Capture:
    """In-memory sink plus recorded exit codes for one backend."""

    def __init__(self) -> None:
        self.stream = io.StringIO()
        self.exit_codes: list[int] = []

    def record_exit(self, code: int) -> None:
        self.exit_codes.append(code)

    def entries(self) -> list[dict]:
        return [json.loads(line) for line in self.stream.getvalue().splitlines() if line.strip()]


@pytest.fixture
def capture():
    return Capture()


@pytest.fixture
def make_backend(capture):
    """Factory: backend at the given level, JSON output, paths trimmed after /tests/."""

    def _make(level=logging.DEBUG, log_format="json", root_marker="/tests/"):
        return new_backend(
            LoggerConfig(
                level=level,
                log_format=log_format,
                root_marker=root_marker,
                stream=capture.stream,
                exit_func=capture.record_exit,
            )
        )

    return _make


@pytest.fixture
def backend(make_backend):
    return make_backend()
