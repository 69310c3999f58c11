"""Example pipeline: rasterize an ellipse and lay it out in a text window."""

from gridgeom import WindowOrientation, plot_ellipse

WIDTH = 41
HEIGHT = 17


def main() -> None:
    nodes = plot_ellipse(16, 6, WIDTH, HEIGHT, WindowOrientation.UP_LEFT)
    grid = [[" "] * (WIDTH + 1) for _ in range(HEIGHT + 1)]
    for node in nodes:
        grid[node.y][node.x] = node.glyph
    print("\n".join("".join(row).rstrip() for row in grid))
    print(f"{len(nodes)} plot node(s)")


if __name__ == "__main__":
    main()
