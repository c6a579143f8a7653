"""Pass-through combinators over a single Outcome.

None of these fold: each one dispatches on the tag and either transforms
the payload or hands the outcome back untouched.
"""

import logging
from collections.abc import Callable
from typing import Any

from monaditto.engine.folding import is_collection
from monaditto.engine.normalizer import (
    is_failure,
    is_success,
    make_failure,
    make_success,
    require_outcome,
    unwrap_payload,
)
from monaditto.models.outcome import FoldHalted, Outcome
from monaditto.safe import safe

logger = logging.getLogger(__name__)


def map(outcome: Outcome, fn: Callable[[Any], Any]) -> Outcome:  # noqa: A001
    """Apply ``fn`` to a Success payload and re-wrap the result.

    Multi-value payloads reach ``fn`` as one tuple::

        map(Success("John", 25), lambda p: f"{p[0]} is {p[1]}")
        # Success('John is 25')
    """
    if is_success(require_outcome(outcome)):
        return make_success(fn(unwrap_payload(outcome)))
    return outcome


def map_error(outcome: Outcome, fn: Callable[[Any], Any]) -> Outcome:
    """Apply ``fn`` to a Failure payload and re-wrap it as a Failure."""
    if is_failure(require_outcome(outcome)):
        return make_failure(fn(unwrap_payload(outcome)))
    return outcome


def bimap(
    outcome: Outcome,
    on_success: Callable[[Any], Any],
    on_failure: Callable[[Any], Any],
) -> Outcome:
    if is_success(require_outcome(outcome)):
        return make_success(on_success(unwrap_payload(outcome)))
    return make_failure(on_failure(unwrap_payload(outcome)))


def peek(outcome: Outcome, fn: Callable[[Outcome], Any]) -> Outcome:
    """Call ``fn`` with the whole outcome for its side effect.

    Always returns ``outcome``; anything ``fn`` raises is swallowed.
    """
    require_outcome(outcome)
    observed = safe(lambda: fn(outcome))
    if is_failure(observed):
        logger.debug("peek callback failed: %r", unwrap_payload(observed))
    return outcome


def unwrap(outcome: Outcome, default: Any = None) -> Any:
    if is_success(require_outcome(outcome)):
        return unwrap_payload(outcome)
    return default


def unwrap_or_raise(outcome: Outcome) -> Any:
    """Return the Success payload.

    Raises:
        FoldHalted: If ``outcome`` is a Failure. The message names the payload.
    """
    if is_success(require_outcome(outcome)):
        return unwrap_payload(outcome)
    raise FoldHalted(outcome, unwrap_payload(outcome))


def any_error(data: Any) -> bool:
    """True if ``data`` is a Failure, or a collection holding at least one.

    Elements are checked one level deep only.
    """
    if is_collection(data):
        return any(is_failure(item) for item in data)
    return is_failure(require_outcome(data))


def all_ok(data: Any) -> bool:
    """True if ``data`` is a Success, or a collection of nothing but Successes."""
    if is_collection(data):
        return all(is_success(item) for item in data)
    return is_success(require_outcome(data))
