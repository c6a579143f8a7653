"""Exception capture: run a callable and return its result as an Outcome."""

import logging
from collections.abc import Callable
from typing import Any

from monaditto.models.outcome import Failure, Outcome, Success

logger = logging.getLogger(__name__)


def safe(fn: Callable[[], Any], after: Callable[[], Any] | None = None) -> Outcome:
    """Call ``fn`` and wrap its return value in ``Success``.

    Any ``Exception`` (or ``SystemExit``) raised by ``fn`` is returned as
    ``Failure(exc)`` instead of propagating. ``KeyboardInterrupt`` is not
    captured.

    The return value is always the single payload item, so a function that
    returns a tuple yields ``Success((a, b))``, not ``Success(a, b)``.

    Args:
        fn: Zero-argument callable to run.
        after: Optional cleanup callable, run exactly once after ``fn`` on
            both paths. Errors raised by ``after`` itself propagate.
    """
    try:
        return Success(fn())
    except (Exception, SystemExit) as exc:
        logger.debug("safe captured %s: %s", type(exc).__name__, exc)
        return Failure(exc)
    finally:
        if after is not None:
            after()
