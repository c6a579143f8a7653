"""Shared pytest fixtures for the monaditto test suite.

Provides:
- calls: a recording wrapper that logs every argument it is invoked with
- pulled: a lazy source that logs every element handed to the consumer
- library_logger: the ``monaditto`` logger, restored after the test
"""

import logging

import pytest
import structlog


class CallRecorder:
    """Wrap a function and record each argument it is called with."""

    def __init__(self) -> None:
        self.args: list = []

    def wrap(self, fn):
        def recorded(value):
            self.args.append(value)
            return fn(value)

        return recorded


class PulledSource:
    """Generator factory that records which elements were pulled."""

    def __init__(self) -> None:
        self.seen: list = []

    def over(self, items):
        for item in items:
            self.seen.append(item)
            yield item


@pytest.fixture()
def calls() -> CallRecorder:
    return CallRecorder()


@pytest.fixture()
def pulled() -> PulledSource:
    return PulledSource()


@pytest.fixture()
def library_logger():
    """Yield the library logger and undo any configuration afterwards."""
    lib_logger = logging.getLogger("monaditto")
    saved = (list(lib_logger.handlers), lib_logger.level, lib_logger.propagate)
    yield lib_logger
    lib_logger.handlers, level, lib_logger.propagate = saved
    lib_logger.setLevel(level)
    structlog.reset_defaults()
