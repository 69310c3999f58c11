"""Process-wide tunables for the rasterizer and plot list builder."""

from __future__ import annotations

import copy
from dataclasses import dataclass

from .precision import DBL_PRECISION
from .types import RoundingDirective


@dataclass
class GeometryConfig:
    # Decimal places used when comparing semi-axes and ellipse coordinates.
    default_precision: int = DBL_PRECISION
    max_allocation_attempts: int = 3
    plot_glyph: str = "*"
    plot_state: int = 0
    plot_rounding: RoundingDirective = RoundingDirective.UP


_GEOMETRY_CONFIG = GeometryConfig()


def get_geometry_config() -> GeometryConfig:
    return copy.deepcopy(_GEOMETRY_CONFIG)


def set_geometry_config(config: GeometryConfig) -> None:
    global _GEOMETRY_CONFIG
    _GEOMETRY_CONFIG = copy.deepcopy(config)


__all__ = ["GeometryConfig", "get_geometry_config", "set_geometry_config"]
