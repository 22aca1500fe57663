"""Parameter validation helpers shared by the example components."""

from __future__ import annotations

from typing import Any


class ValidationError(ValueError):
    """Raised when a component is configured with an invalid parameter."""

    def __init__(self, error_type: str, message: str, **details: Any) -> None:
        super().__init__(message)
        self.error_type = error_type
        self.message = message
        self.details = details

    def __str__(self) -> str:
        return f"[{self.error_type}] {self.message}"


def require_positive_int(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError('invalid_type', f"{name} must be an int, got {type(value).__name__}", name=name)
    if value < 1:
        raise ValidationError('out_of_range', f"{name} must be >= 1, got {value}", name=name, value=value)
    return value


def require_probability(name: str, value: Any, allow_zero: bool = True) -> float:
    """Validate a rate in [0, 1] (or (0, 1] when allow_zero is False)."""
    try:
        rate = float(value)
    except (TypeError, ValueError):
        raise ValidationError('invalid_type', f"{name} must be a number, got {value!r}", name=name) from None
    low_ok = rate >= 0.0 if allow_zero else rate > 0.0
    if not low_ok or rate > 1.0:
        bounds = '[0, 1]' if allow_zero else '(0, 1]'
        raise ValidationError('out_of_range', f"{name} must be in {bounds}, got {rate}", name=name, value=rate)
    return rate


__all__ = ["ValidationError", "require_positive_int", "require_probability"]
