"""Accessor-based point versus a private, field-exposing representation.

:class:`Point` is the public aggregate, so its coordinates are reachable only
through properties whose setters validate input. The storage behind those
properties is :class:`_Coordinates`, a module-private dataclass that exposes its
fields directly; it never leaves this module, so it can be reshaped freely.
"""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Real
from typing import Any


@dataclass
class _Coordinates:
    x: float
    y: float


class Point:
    """Mutable 2-D point whose state is hidden behind validating accessors."""

    __slots__ = ("_coordinates",)

    def __init__(self, x: float, y: float) -> None:
        """Initialize the point after validating both coordinates."""
        self._coordinates = _Coordinates(
            self._validate_number(x, "x"), self._validate_number(y, "y")
        )

    @property
    def x(self) -> float:
        """Return the horizontal coordinate."""
        return self._coordinates.x

    @x.setter
    def x(self, value: float) -> None:
        self._coordinates.x = self._validate_number(value, "x")

    @property
    def y(self) -> float:
        """Return the vertical coordinate."""
        return self._coordinates.y

    @y.setter
    def y(self, value: float) -> None:
        self._coordinates.y = self._validate_number(value, "y")

    def moved(self, dx: float, dy: float) -> Point:
        """Return a new point shifted by ``(dx, dy)``; this one is left untouched."""
        return Point(
            self.x + self._validate_number(dx, "dx"),
            self.y + self._validate_number(dy, "dy"),
        )

    @staticmethod
    def _validate_number(value: Any, field: str) -> float:
        if isinstance(value, bool) or not isinstance(value, Real):
            raise TypeError(f"`{field}` must be a real number")
        return float(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return (self.x, self.y) == (other.x, other.y)

    def __repr__(self) -> str:
        return f"Point(x={self.x}, y={self.y})"
