"""monaditto: combinators for success/failure outcomes.

Compose fallible steps without exceptions::

    from monaditto import Failure, Success, traverse

    traverse([1, 2, 3], lambda v: Success(v * 2))
    # Success([2, 4, 6])
    traverse([1, 2, 3], lambda v: Failure("two") if v == 2 else Success(v))
    # Failure('two'), and the function never sees 3
"""

from monaditto.combinators import (
    all_ok,
    any_error,
    bimap,
    map,
    map_error,
    peek,
    unwrap,
    unwrap_or_raise,
)
from monaditto.engine.folding import flat_map, sequence, traverse
from monaditto.engine.normalizer import (
    classify,
    is_failure,
    is_outcome,
    is_success,
    make_failure,
    make_success,
    unwrap_payload,
)
from monaditto.models.outcome import (
    Failure,
    FoldHalted,
    FoldSignal,
    Outcome,
    Success,
    Tag,
)
from monaditto.observability.log_config import configure_logging
from monaditto.safe import safe

__version__ = "0.1.0"

__all__ = [
    "Failure",
    "FoldHalted",
    "FoldSignal",
    "Outcome",
    "Success",
    "Tag",
    "all_ok",
    "any_error",
    "bimap",
    "classify",
    "configure_logging",
    "flat_map",
    "is_failure",
    "is_outcome",
    "is_success",
    "make_failure",
    "make_success",
    "map",
    "map_error",
    "peek",
    "safe",
    "sequence",
    "traverse",
    "unwrap",
    "unwrap_or_raise",
    "unwrap_payload",
]
