"""Typed, validated, and fully-encapsulated representation of a time of day.

A :class:`Time` is fixed at construction: the hour and minute are range-checked
once and can only be read afterwards, through properties. Rendering is the
unpadded ``"H:M"`` form (``Time(9, 5)`` renders as ``"9:5"``).
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Union

import pandas as pd  # type: ignore


class InvalidArgument(ValueError):
    """Raised when a :class:`Time` is built from out-of-range fields."""


class Time:
    """Immutable wall-clock time with whole-minute resolution.

    * hour: Integer in ``[0, 24)``.
    * minute: Integer in ``[0, 60)``.
    """

    HOURS_PER_DAY = 24
    MINUTES_PER_HOUR = 60

    __slots__ = ("_hour", "_minute")

    def __init__(self, hour: int, minute: int) -> None:
        """Validate both fields and freeze them; the hour is checked first."""
        self._validate_int(hour, "hour")
        if hour < 0 or hour >= self.HOURS_PER_DAY:
            raise InvalidArgument(f"Hour: {hour}")
        self._validate_int(minute, "minute")
        if minute < 0 or minute >= self.MINUTES_PER_HOUR:
            raise InvalidArgument(f"Min: {minute}")
        object.__setattr__(self, "_hour", hour)
        object.__setattr__(self, "_minute", minute)

    @classmethod
    def from_timestamp(cls, value: Union[pd.Timestamp, datetime, str]) -> Time:
        """Build a :class:`Time` from the wall-clock fields of a timestamp.

        The hour and minute are taken as-is (no timezone shift); seconds are dropped.
        """
        try:
            timestamp = pd.Timestamp(value)
        except (TypeError, ValueError) as exc:
            raise InvalidArgument(f"Timestamp: {value}") from exc
        if pd.isna(timestamp):
            raise InvalidArgument(f"Timestamp: {value}")
        return cls(int(timestamp.hour), int(timestamp.minute))

    @property
    def hour(self) -> int:
        """Return the hour of the day."""
        return self._hour

    @property
    def minute(self) -> int:
        """Return the minute of the hour."""
        return self._minute

    @staticmethod
    def _validate_int(value: Any, field: str) -> None:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"`{field}` must be an int")

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"`Time` is immutable; cannot set `{name}`")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"`Time` is immutable; cannot delete `{name}`")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return (self.hour, self.minute) == (other.hour, other.minute)

    def __hash__(self) -> int:
        return hash((self.hour, self.minute))

    def __reduce__(self) -> Any:
        return (type(self), (self.hour, self.minute))

    def __repr__(self) -> str:
        return f"Time(hour={self.hour}, minute={self.minute})"

    def __str__(self) -> str:
        return f"{self.hour}:{self.minute}"
