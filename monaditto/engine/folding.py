"""Folding Engine: short-circuiting left folds over outcomes.

``sequence``, ``traverse`` and ``flat_map`` scan their source strictly left
to right, pulling one element at a time, and return on the first Failure.
Elements past that point are never pulled from the iterator and the caller's
function is never invoked on them.

Successful payloads are collected in source order; empty payloads (bare
``Success()``) contribute nothing. A fold that collects nothing yields the
bare ``Success()``, otherwise ``Success([...])``.
"""

import logging
from collections.abc import Callable, Iterable
from typing import Any

from monaditto.engine.normalizer import (
    classify,
    is_failure,
    is_outcome,
    is_success,
    make_success,
    unwrap_payload,
)
from monaditto.models.outcome import FoldSignal, Outcome

logger = logging.getLogger(__name__)

# Text iterates as characters, never as a collection of outcomes.
_NON_COLLECTIONS = (str, bytes, bytearray)


def is_collection(value: Any) -> bool:
    """True for iterables the engine folds over (not outcomes, not text)."""
    return (
        isinstance(value, Iterable)
        and not isinstance(value, _NON_COLLECTIONS)
        and not is_outcome(value)
    )


class _Accumulator:
    """Ordered success payloads for a single fold call."""

    __slots__ = ("_items",)

    def __init__(self) -> None:
        self._items: list[Any] = []

    def add(self, payload: Any) -> None:
        if type(payload) is tuple and not payload:
            return
        self._items.append(payload)

    def finish(self) -> Outcome:
        return make_success(self._items)


def _fold(op: str, items: Iterable[Any], step: Callable[[Any], Outcome]) -> Outcome:
    """Run ``step`` per element; collect successes, return the first failure."""
    acc = _Accumulator()
    for index, item in enumerate(items):
        outcome = step(item)
        if classify(outcome) is FoldSignal.HALT:
            logger.debug("%s halted at index %d: %r", op, index, outcome)
            return outcome
        acc.add(unwrap_payload(outcome))
    return acc.finish()


def sequence(outcomes: Iterable[Outcome]) -> Outcome:
    """Turn a collection of outcomes into one outcome.

    The first Failure is returned as is, payload shape included.

    Examples:
        >>> sequence([Success(1), Success(2), Success(3)])
        Success([1, 2, 3])
        >>> sequence([Success(1), Failure("x"), Success(3)])
        Failure('x')

    Raises:
        TypeError: If an element reached before any Failure is not an Outcome.
    """
    return _fold("sequence", outcomes, lambda outcome: outcome)


def traverse(source: Any, fn: Callable[[Any], Outcome]) -> Any:
    """Map ``fn`` over ``source`` and sequence the results.

    - Success: returns ``fn(payload)`` as is.
    - Failure: returns ``source`` without calling ``fn``.
    - Collection: ``fn`` receives each raw element and must return an
      Outcome; results fold like ``sequence``.
    - Anything else is returned unchanged.
    """
    if is_success(source):
        return fn(unwrap_payload(source))
    if is_failure(source) or not is_collection(source):
        return source
    return _fold("traverse", source, fn)


def flat_map(source: Outcome | Iterable[Outcome], fn: Callable[[Any], Outcome]) -> Outcome:
    """Chain ``fn`` onto the payload of each successful outcome.

    For a single outcome, a Success returns ``fn(payload)`` and a Failure is
    returned unchanged. For a collection, the first Failure element halts the
    fold and is returned as is, before ``fn`` is called on it; the first
    Failure returned by ``fn`` halts it too.

    Raises:
        TypeError: If ``source`` is neither an Outcome nor a collection.
    """
    if is_success(source):
        return fn(unwrap_payload(source))
    if is_failure(source):
        return source
    if not is_collection(source):
        msg = f"flat_map expects an Outcome or a collection of them, got {type(source).__name__}"
        raise TypeError(msg)

    def step(element: Outcome) -> Outcome:
        if classify(element) is FoldSignal.HALT:
            return element
        return fn(unwrap_payload(element))

    return _fold("flat_map", source, step)
