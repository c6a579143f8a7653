"""Outcome Normalizer: converts between an Outcome and its payload.

Payload shape follows arity:

- arity 0 -> ``()``
- arity 1 -> the single value
- arity N -> the N-tuple of values

``make_success`` / ``make_failure`` invert this. Empty tuples and lists
collapse to the bare tag and plain tuples of two or more items are spread;
anything else is kept as one item.
"""

from typing import Any

from monaditto.models.outcome import Failure, FoldSignal, Outcome, Success

EMPTY_PAYLOAD: tuple[()] = ()


def is_success(value: Any) -> bool:
    return isinstance(value, Success)


def is_failure(value: Any) -> bool:
    return isinstance(value, Failure)


def is_outcome(value: Any) -> bool:
    return isinstance(value, (Success, Failure))


def require_outcome(value: Any) -> Outcome:
    """Return ``value`` unchanged, or raise TypeError if it is not an Outcome."""
    if not is_outcome(value):
        msg = f"expected Success or Failure, got {type(value).__name__}: {value!r}"
        raise TypeError(msg)
    return value


def unwrap_payload(outcome: Outcome) -> Any:
    """Extract the payload of either tag."""
    values = require_outcome(outcome).values
    if len(values) == 1:
        return values[0]
    return values


def _spread(payload: Any) -> tuple[Any, ...]:
    # Exact types only: named tuples and list subclasses stay single values.
    if type(payload) in (tuple, list) and not payload:
        return EMPTY_PAYLOAD
    if type(payload) is tuple and len(payload) > 1:
        return payload
    return (payload,)


def make_success(payload: Any) -> Success:
    return Success(*_spread(payload))


def make_failure(payload: Any) -> Failure:
    return Failure(*_spread(payload))


def classify(outcome: Outcome) -> FoldSignal:
    """Map Success to CONTINUE and Failure to HALT."""
    if is_success(require_outcome(outcome)):
        return FoldSignal.CONTINUE
    return FoldSignal.HALT
