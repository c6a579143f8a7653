"""Outcome sum type: ``Success`` or ``Failure`` carrying zero or more values.

An outcome is a tag plus an ordered tuple of payload items. The constructor
takes the items positionally, so arity is explicit and never inferred::

    Success()            # bare tag, arity 0
    Success(user)        # arity 1
    Failure(404, "gone") # arity 2
"""

from dataclasses import dataclass
from enum import StrEnum
from typing import Any, ClassVar, TypeAlias


class Tag(StrEnum):
    """Outcome tag, rendered the way tagged tuples spell it."""

    SUCCESS = "ok"
    FAILURE = "error"


class FoldSignal(StrEnum):
    """Per-element control signal consumed by the folding engine."""

    CONTINUE = "CONTINUE"
    HALT = "HALT"


class _Tagged:
    """Behaviour shared by both outcome classes."""

    __slots__ = ()

    tag: ClassVar[Tag]
    values: tuple[Any, ...]

    @property
    def arity(self) -> int:
        return len(self.values)

    def as_tuple(self) -> tuple[Any, ...]:
        """Render as the conventional ``(tag, *values)`` tagged tuple."""
        return (self.tag.value, *self.values)

    def __repr__(self) -> str:
        args = ", ".join(repr(v) for v in self.values)
        return f"{type(self).__name__}({args})"


@dataclass(frozen=True, slots=True, init=False, repr=False)
class Success(_Tagged):
    """Successful outcome."""

    tag: ClassVar[Tag] = Tag.SUCCESS
    values: tuple[Any, ...]

    def __init__(self, *values: Any) -> None:
        object.__setattr__(self, "values", values)


@dataclass(frozen=True, slots=True, init=False, repr=False)
class Failure(_Tagged):
    """Failed outcome."""

    tag: ClassVar[Tag] = Tag.FAILURE
    values: tuple[Any, ...]

    def __init__(self, *values: Any) -> None:
        object.__setattr__(self, "values", values)


Outcome: TypeAlias = Success | Failure


class FoldHalted(RuntimeError):
    """Raised when a Failure reaches an accessor that demands a success.

    Carries the halting Failure unchanged so callers can still inspect it.
    """

    def __init__(self, failure: Failure, payload: Any) -> None:
        self.failure = failure
        self.payload = payload
        super().__init__(f"Error: {payload!r}")
