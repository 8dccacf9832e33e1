"""
validators.py – Required-field checks for the predictor and purchase forms.

A value counts as missing when it is None, an empty/blank string, or zero;
a zero tree count or rainfall is an unfilled form field, not a measurement.
Checks run before any arithmetic, so a failed call computes nothing.
"""
from __future__ import annotations

from typing import Any, Iterable


class ValidationError(ValueError):
    """One or more required fields were not supplied."""

    def __init__(self, message: str, missing: Iterable[str] = ()) -> None:
        super().__init__(message)
        self.message = message
        self.missing: tuple[str, ...] = tuple(missing)

    def to_dict(self) -> dict[str, Any]:
        return {"detail": self.message, "missing": list(self.missing)}


def is_missing(value: Any) -> bool:
    """Return True when *value* would leave a form field blank."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (int, float)):
        return value == 0
    return False


def missing_fields(values: dict[str, Any]) -> list[str]:
    """Return the keys of *values* whose value is missing, in order."""
    return [name for name, value in values.items() if is_missing(value)]


def require(values: dict[str, Any], message: str) -> None:
    """
    Raise ValidationError listing every missing entry of *values*.

    Parameters
    ----------
    values:
        Field name → submitted value, in display order.
    message:
        Human-readable text shown to the user.
    """
    missing = missing_fields(values)
    if missing:
        raise ValidationError(message, missing)
