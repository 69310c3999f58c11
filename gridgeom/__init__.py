from .errors import (
    GeometryError,
    InvalidArgumentError,
    DegenerateGeometryError,
    NumericRangeError,
    PrecisionUnavailableError,
    ResourceExhaustionError,
)
from .diagnostics import report, set_diagnostic_sink, get_diagnostic_sink
from .types import CartesianPoint, LinePoint, PlotNode, RoundingDirective, WindowOrientation
from .config import GeometryConfig, get_geometry_config, set_geometry_config
from .precision import DBL_PRECISION, MAX_DECIMAL_DIGITS, machine_precision, precision_mask, truncate
from .rounding import current_rounding_mode, round_double, rounding_mode
from .compare import equal, greater, greater_equal, less, less_equal, not_equal
from .geometry import (
    ellipse_x,
    ellipse_y,
    midpoint,
    point_distance,
    point_in_triangle,
    point_slope,
    solve_for_x,
    solve_for_y,
    triangle_area,
    triangle_centroid,
    verify_slope,
)
from .ellipse import ellipse_pairs, ellipse_points, rasterize
from .plot_list import build_plot_list, determine_center, plot_ellipse, translate_plot_point

__all__ = [
    'GeometryError',
    'InvalidArgumentError',
    'DegenerateGeometryError',
    'NumericRangeError',
    'PrecisionUnavailableError',
    'ResourceExhaustionError',
    'report',
    'set_diagnostic_sink',
    'get_diagnostic_sink',
    'CartesianPoint',
    'LinePoint',
    'PlotNode',
    'RoundingDirective',
    'WindowOrientation',
    'GeometryConfig',
    'get_geometry_config',
    'set_geometry_config',
    'DBL_PRECISION',
    'MAX_DECIMAL_DIGITS',
    'machine_precision',
    'precision_mask',
    'truncate',
    'current_rounding_mode',
    'round_double',
    'rounding_mode',
    'equal',
    'greater',
    'greater_equal',
    'less',
    'less_equal',
    'not_equal',
    'ellipse_x',
    'ellipse_y',
    'midpoint',
    'point_distance',
    'point_in_triangle',
    'point_slope',
    'solve_for_x',
    'solve_for_y',
    'triangle_area',
    'triangle_centroid',
    'verify_slope',
    'ellipse_pairs',
    'ellipse_points',
    'rasterize',
    'build_plot_list',
    'determine_center',
    'plot_ellipse',
    'translate_plot_point',
]
