import numpy as np
import pytest

from gridgeom import (
    GeometryConfig,
    InvalidArgumentError,
    NumericRangeError,
    PlotNode,
    WindowOrientation,
    build_plot_list,
    determine_center,
    plot_ellipse,
    rasterize,
    set_geometry_config,
    translate_plot_point,
)


@pytest.mark.parametrize(
    "width, height, orientation, expected",
    [
        (10, 10, WindowOrientation.UP_LEFT, (5, 5)),
        (10, 10, WindowOrientation.UP_RIGHT, (6, 5)),
        (10, 10, WindowOrientation.LOWER_LEFT, (5, 6)),
        (10, 10, WindowOrientation.LOWER_RIGHT, (6, 6)),
        (11, 11, WindowOrientation.LOWER_RIGHT, (6, 6)),
        (3, 3, WindowOrientation.UP_LEFT, (2, 2)),
        (80, 24, WindowOrientation.UP_LEFT, (40, 12)),
    ],
)
def test_determine_center(width, height, orientation, expected):
    assert determine_center(width, height, orientation) == expected


@pytest.mark.parametrize("orientation", ["sideways", 0, None])
def test_determine_center_defaults_to_upper_left(orientation):
    assert determine_center(10, 10, orientation) == (5, 5)


@pytest.mark.parametrize("width, height", [(2, 10), (10, 2), (0, 0)])
def test_determine_center_rejects_small_windows(width, height, diagnostics):
    with pytest.raises(InvalidArgumentError):
        determine_center(width, height)
    assert diagnostics[-1][:2] == ("plot_list", "determine_center")


def test_translate_plot_point_inverts_y():
    assert translate_plot_point(2, 3, 10, 10) == (12, 7)
    assert translate_plot_point(-2, -3, 10, 10) == (8, 13)
    assert translate_plot_point(-10, 10, 10, 10) == (0, 0)


@pytest.mark.parametrize(
    "rel_x, rel_y, center_x, center_y",
    [(0, 0, 0, 5), (0, 0, 5, 0), (-6, 0, 5, 5), (0, 6, 5, 5)],
)
def test_translate_plot_point_rejects_points_outside_window(rel_x, rel_y, center_x, center_y):
    with pytest.raises(InvalidArgumentError):
        translate_plot_point(rel_x, rel_y, center_x, center_y)


def test_build_plot_list_rounds_up_and_translates():
    nodes = build_plot_list([-2.0, 0.0, 0.5, -0.5, 1.2, 2.7], None, 5, 5)
    assert nodes == [
        PlotNode(3, 5, "*", 0),
        PlotNode(6, 5, "*", 0),
        PlotNode(7, 2, "*", 0),
    ]


def test_build_plot_list_respects_num_points():
    nodes = build_plot_list([1.0, 1.0, 2.0, 2.0, 3.0, 3.0], 4, 5, 5)
    assert [(node.x, node.y) for node in nodes] == [(6, 4), (7, 3)]


def test_build_plot_list_from_rasterized_ellipse():
    points = rasterize(2, 1)
    nodes = build_plot_list(points, len(points), 5, 5)
    assert len(nodes) == 8
    assert (nodes[0].x, nodes[0].y) == (3, 5)
    assert (nodes[2].x, nodes[2].y) == (5, 4)
    assert (nodes[4].x, nodes[4].y) == (7, 5)
    assert (nodes[6].x, nodes[6].y) == (5, 6)


@pytest.mark.parametrize(
    "points, num_points, center_x, center_y",
    [
        ([], None, 5, 5),
        ([1.0, 2.0, 3.0], None, 5, 5),
        ([1.0, 2.0], 0, 5, 5),
        ([1.0, 2.0], 4, 5, 5),
        ([1.0, 2.0], None, -1, 5),
        ([1.0, 2.0], None, 5, -1),
    ],
)
def test_build_plot_list_validates_input(points, num_points, center_x, center_y, diagnostics):
    with pytest.raises(InvalidArgumentError):
        build_plot_list(points, num_points, center_x, center_y)
    assert diagnostics[-1][:2] == ("plot_list", "build_plot_list")


def test_build_plot_list_returns_nothing_when_a_pair_fails(diagnostics):
    points = np.array([0.0, 0.0, 1.0, 1.0, -50.0, 0.0])
    with pytest.raises(InvalidArgumentError):
        build_plot_list(points, None, 5, 5)
    operations = [operation for _, operation, _ in diagnostics]
    assert operations[-2:] == ["translate_plot_point", "build_plot_list"]


def test_build_plot_list_reports_the_rounding_failure(diagnostics):
    points = np.array([1.0, 1.0, 1e12, 0.0])
    with pytest.raises(NumericRangeError):
        build_plot_list(points, None, 5, 5)
    operations = [operation for _, operation, _ in diagnostics]
    assert operations[-2:] == ["round_double", "build_plot_list"]
    message = diagnostics[-1][2]
    assert "pair 1" in message
    assert "exceeds the integer range" in message


def test_build_plot_list_zero_center_fails_on_translation():
    with pytest.raises(InvalidArgumentError):
        build_plot_list([1.0, 1.0], None, 0, 5)


def test_build_plot_list_uses_configured_glyph_and_state():
    set_geometry_config(GeometryConfig(plot_glyph="o", plot_state=1))
    nodes = build_plot_list([0.0, 0.0], None, 5, 5)
    assert nodes == [PlotNode(5, 5, "o", 1)]


def test_plot_ellipse_centers_in_window():
    nodes = plot_ellipse(2, 1, 10, 10)
    assert len(nodes) == 8
    assert (nodes[0].x, nodes[0].y) == (3, 5)
    assert all(node.glyph == "*" for node in nodes)


def test_plot_ellipse_too_large_for_window():
    with pytest.raises(InvalidArgumentError):
        plot_ellipse(20, 1, 10, 10)
