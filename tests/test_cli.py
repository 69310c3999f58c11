import json

import gridgeom.__main__ as cli


def test_ellipse_command_prints_json_nodes(capsys):
    assert cli.main(["ellipse", "2", "1", "--width", "10", "--height", "10", "--json"]) == 0
    nodes = json.loads(capsys.readouterr().out)
    assert len(nodes) == 8
    assert nodes[0] == {"x": 3, "y": 5, "glyph": "*", "state": 0}


def test_ellipse_command_prints_relative_points(capsys):
    assert cli.main(["ellipse", "2", "1", "--relative"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "(-2.000000, 0.000000)"
    assert len(lines) == 8


def test_ellipse_command_reports_geometry_errors(capsys):
    assert cli.main(["ellipse", "0", "1"]) == 2
    assert capsys.readouterr().out == ""


def test_triangle_command(capsys):
    assert cli.main(["triangle", "0", "0", "4", "0", "0", "3", "--point", "1", "1"]) == 0
    out = capsys.readouterr().out
    assert "Area: 6.000000" in out
    assert "Centroid: (1, 1)" in out
    assert "Point (1, 1) inside: True" in out


def test_triangle_command_degenerate(capsys):
    assert cli.main(["triangle", "0", "0", "0", "4", "0", "9"]) == 1
    assert "undefined" in capsys.readouterr().out
