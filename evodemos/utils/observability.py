"""Helpers for checking that two seeded runs replayed identically."""

from __future__ import annotations

import hashlib
import json
from typing import Any, Sequence

from evodemos.utils.validation import ValidationError


class ReplayMismatchError(ValidationError):
    """Two runs expected to replay identically produced different values."""


def compare_runs(first: Sequence[Any], second: Sequence[Any]) -> list[tuple[Any, Any, bool]]:
    """Pair up two recorded sequences as (first, second, same) rows."""
    if len(first) != len(second):
        raise ValidationError(
            'length_mismatch',
            f"Runs have different lengths: {len(first)} != {len(second)}",
            first=len(first),
            second=len(second),
        )
    return [(a, b, a == b) for a, b in zip(first, second)]


def replay_signature(values: Sequence[Any]) -> str:
    payload = json.dumps(list(values), sort_keys=True, default=str)
    return hashlib.sha256(payload.encode('utf-8')).hexdigest()


def assert_replay_equivalence(first: Sequence[Any], second: Sequence[Any]) -> None:
    rows = compare_runs(first, second)
    for index, (a, b, same) in enumerate(rows):
        if not same:
            raise ReplayMismatchError(
                'replay_mismatch',
                f"Runs diverge at index {index}: {a!r} != {b!r}",
                index=index,
            )


__all__ = [
    "ReplayMismatchError",
    "assert_replay_equivalence",
    "compare_runs",
    "replay_signature",
]
