"""Core data structures shared across gridgeom components."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Tuple, Union


class RoundingDirective(Enum):
    """Direction used when a double is rounded to an integer."""

    NEAREST = "nearest"
    UP = "up"
    DOWN = "down"
    TOWARD_ZERO = "toward_zero"


class WindowOrientation(Enum):
    """Which way a window center leans when the window has no exact middle."""

    UP_LEFT = 1
    UP_RIGHT = 2
    LOWER_LEFT = 3
    LOWER_RIGHT = 4


class CartesianPoint(NamedTuple):
    x: float
    y: float


@dataclass
class LinePoint:
    """Integer coordinate used by the line and triangle solvers.

    ``dist`` is only populated by :func:`gridgeom.geometry.midpoint`, where it
    holds half the distance between the two input points.
    """

    x: int
    y: int
    dist: float = 0.0

    def as_tuple(self) -> Tuple[int, int]:
        return self.x, self.y


@dataclass(frozen=True)
class PlotNode:
    """Absolute window coordinate handed to the rendering layer."""

    x: int
    y: int
    glyph: str = "*"
    state: int = 0


PointLike = Union[LinePoint, Tuple[int, int]]


__all__ = [
    "RoundingDirective",
    "WindowOrientation",
    "CartesianPoint",
    "LinePoint",
    "PlotNode",
    "PointLike",
]
