"""Example: area, centroid and containment checks on an integer triangle."""

from gridgeom import LinePoint, RoundingDirective, midpoint, point_in_triangle, triangle_area, triangle_centroid

A = LinePoint(0, 0)
B = LinePoint(12, 0)
C = LinePoint(3, 9)


def main() -> None:
    print("Area:", triangle_area(A, B, C))
    centroid = triangle_centroid(A, B, C, RoundingDirective.NEAREST)
    print(f"Centroid: ({centroid.x}, {centroid.y})")
    mid = midpoint(A, B)
    print(f"Midpoint of AB: ({mid.x}, {mid.y}), half length {mid.dist:.3f}")
    for probe in [(centroid.x, centroid.y), (11, 8), (6, 1)]:
        print(f"{probe} inside: {point_in_triangle(A, B, C, probe, 6)}")


if __name__ == "__main__":
    main()
