"""Geometric primitives over flat coordinate buffers.

This module provides the pure, stateless building blocks shared by the
hull and triangulation algorithms:
- Orientation tests (cross product, spanned-area sign)
- Polygon signed area, winding and centroid
- Triangle area, centroid, circumcenter and circumradius
- Point-in-triangle and point-in-polygon tests

Orientation follows the shoelace formula with the y-axis pointing up:
a positive cross product is a counter-clockwise turn.
"""

import math
from collections.abc import Sequence

from hullmesh.domain import WindingDirection
from hullmesh.exceptions import DegenerateTriangleError, InvalidInputSizeError

# Default tolerance for collinearity checks.
COLLINEAR_TOLERANCE = 1e-6


def cross(ax: float, ay: float, bx: float, by: float, cx: float, cy: float) -> float:
    """Cross product of (b - a) and (c - a).

    Returns:
        Positive for a counter-clockwise turn a -> b -> c, negative for a
        clockwise turn and 0 for collinear points. The magnitude is twice the
        area of the triangle.

    Examples:
        >>> cross(0.0, 0.0, 1.0, 0.0, 1.0, 1.0)
        1.0
        >>> cross(0.0, 0.0, 1.0, 1.0, 2.0, 2.0)
        0.0
    """
    return (bx - ax) * (cy - ay) - (by - ay) * (cx - ax)


def orientation(ax: float, ay: float, bx: float, by: float, cx: float, cy: float) -> int:
    """Sign of the turn a -> b -> c: 1 counter-clockwise, -1 clockwise, 0 collinear."""
    value = cross(ax, ay, bx, by, cx, cy)
    if value > 0:
        return 1
    if value < 0:
        return -1
    return 0


def spanned_area_sign(
    p1x: float, p1y: float, p2x: float, p2y: float, p3x: float, p3y: float
) -> int:
    """Sign of the area spanned by p1, p2, p3, positive for clockwise turns.

    This is the negated orientation. For a clockwise polygon a positive value
    marks a convex vertex, and a point is strictly inside a clockwise triangle
    when all three of its edge tests are positive.
    """
    area = p1x * (p3y - p2y)
    area += p2x * (p1y - p3y)
    area += p3x * (p2y - p1y)
    if area > 0:
        return 1
    if area < 0:
        return -1
    return 0


def squared_distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Squared Euclidean distance between two points."""
    dx = x2 - x1
    dy = y2 - y1
    return dx * dx + dy * dy


def is_collinear(
    x1: float,
    y1: float,
    x2: float,
    y2: float,
    x3: float,
    y3: float,
    tolerance: float = COLLINEAR_TOLERANCE,
) -> bool:
    """Check whether three points lie on one line within ``tolerance``."""
    return abs(cross(x1, y1, x2, y2, x3, y3)) < tolerance


def polygon_area(polygon: Sequence[float]) -> float:
    """Calculate the signed area of a polygon using the shoelace formula.

    The sign of the area indicates winding direction:
    - Positive area: counter-clockwise winding
    - Negative area: clockwise winding

    Args:
        polygon: Flat x/y buffer of the polygon outline

    Returns:
        Signed area. Returns 0.0 for fewer than three points.

    Examples:
        >>> polygon_area([0, 0, 1, 0, 1, 1, 0, 1])
        1.0
        >>> polygon_area([0, 0, 0, 1, 1, 1, 1, 0])
        -1.0
    """
    if len(polygon) < 6:
        return 0.0

    area = 0.0
    last = len(polygon) - 2
    x1, y1 = polygon[last], polygon[last + 1]
    for i in range(0, last + 1, 2):
        x2, y2 = polygon[i], polygon[i + 1]
        area += x1 * y2 - x2 * y1
        x1, y1 = x2, y2

    return area / 2.0


def winding_direction(polygon: Sequence[float]) -> WindingDirection:
    """Return the winding direction of a polygon."""
    return WindingDirection.from_area(polygon_area(polygon))


def is_clockwise(polygon: Sequence[float]) -> bool:
    """Check whether a polygon winds clockwise (negative signed area)."""
    return polygon_area(polygon) < 0


def ensure_ccw(polygon: Sequence[float]) -> list[float]:
    """Return a copy of the polygon in counter-clockwise order.

    Clockwise input is reversed point-wise; anything else is copied as is.
    """
    result = list(polygon)
    if not is_clockwise(polygon):
        return result

    reversed_coords: list[float] = []
    for i in range(len(result) - 2, -1, -2):
        reversed_coords.append(result[i])
        reversed_coords.append(result[i + 1])
    return reversed_coords


def polygon_centroid(polygon: Sequence[float]) -> tuple[float, float]:
    """Centroid of a non-self-intersecting polygon.

    Returns:
        (x, y) of the area centroid, or (0.0, 0.0) for zero-area polygons

    Raises:
        InvalidInputSizeError: If the polygon has fewer than three points
    """
    if len(polygon) < 6:
        raise InvalidInputSizeError(len(polygon) // 2, "a polygon needs at least 3 points")

    area = 0.0
    x = 0.0
    y = 0.0
    last = len(polygon) - 2
    x1, y1 = polygon[last], polygon[last + 1]
    for i in range(0, last + 1, 2):
        x2, y2 = polygon[i], polygon[i + 1]
        a = x1 * y2 - x2 * y1
        area += a
        x += (x1 + x2) * a
        y += (y1 + y2) * a
        x1, y1 = x2, y2

    if area == 0:
        return 0.0, 0.0

    area *= 0.5
    return x / (6 * area), y / (6 * area)


def triangle_area(x1: float, y1: float, x2: float, y2: float, x3: float, y3: float) -> float:
    """Unsigned area of a triangle."""
    return abs(cross(x1, y1, x2, y2, x3, y3)) * 0.5


def triangle_signed_area(
    x1: float, y1: float, x2: float, y2: float, x3: float, y3: float
) -> float:
    """Signed area of a triangle, negative when clockwise."""
    return cross(x1, y1, x2, y2, x3, y3) * 0.5


def triangle_centroid(
    x1: float, y1: float, x2: float, y2: float, x3: float, y3: float
) -> tuple[float, float]:
    """Centroid of a triangle."""
    return (x1 + x2 + x3) / 3, (y1 + y2 + y3) / 3


def triangle_circumcenter(
    x1: float,
    y1: float,
    x2: float,
    y2: float,
    x3: float,
    y3: float,
    tolerance: float = COLLINEAR_TOLERANCE,
) -> tuple[float, float]:
    """Circumcenter of a triangle.

    Raises:
        DegenerateTriangleError: If the points are collinear within ``tolerance``
    """
    dx21, dy21 = x2 - x1, y2 - y1
    dx32, dy32 = x3 - x2, y3 - y2
    dx13, dy13 = x1 - x3, y1 - y3
    det = dx32 * dy21 - dx21 * dy32

    if abs(det) < tolerance:
        raise DegenerateTriangleError("Triangle points must not be collinear")

    det *= 2
    sqr1 = x1 * x1 + y1 * y1
    sqr2 = x2 * x2 + y2 * y2
    sqr3 = x3 * x3 + y3 * y3

    return (
        (sqr1 * dy32 + sqr2 * dy13 + sqr3 * dy21) / det,
        -(sqr1 * dx32 + sqr2 * dx13 + sqr3 * dx21) / det,
    )


def triangle_circumradius(
    x1: float,
    y1: float,
    x2: float,
    y2: float,
    x3: float,
    y3: float,
    tolerance: float = COLLINEAR_TOLERANCE,
) -> float:
    """Circumradius of a triangle.

    Raises:
        DegenerateTriangleError: If the points are collinear within ``tolerance``
    """
    cx, cy = triangle_circumcenter(x1, y1, x2, y2, x3, y3, tolerance)
    return math.hypot(x1 - cx, y1 - cy)


def point_in_triangle(
    px: float,
    py: float,
    ax: float,
    ay: float,
    bx: float,
    by: float,
    cx: float,
    cy: float,
) -> bool:
    """Check whether a point lies inside or on the boundary of a triangle.

    Works for either winding of (a, b, c).

    Examples:
        >>> point_in_triangle(0.25, 0.25, 0, 0, 1, 0, 0, 1)
        True
        >>> point_in_triangle(1.0, 1.0, 0, 0, 1, 0, 0, 1)
        False
    """
    d1 = cross(ax, ay, bx, by, px, py)
    d2 = cross(bx, by, cx, cy, px, py)
    d3 = cross(cx, cy, ax, ay, px, py)

    has_negative = d1 < 0 or d2 < 0 or d3 < 0
    has_positive = d1 > 0 or d2 > 0 or d3 > 0
    return not (has_negative and has_positive)


def point_in_polygon(polygon: Sequence[float], x: float, y: float) -> bool:
    """Determine if a point is inside a polygon using ray casting.

    Casts a horizontal ray from the point to the right and counts intersections
    with polygon edges. Odd number of intersections = inside, even = outside.

    Args:
        polygon: Flat x/y buffer of the polygon outline
        x: X coordinate of the point
        y: Y coordinate of the point

    Returns:
        True if point is inside polygon, False otherwise
    """
    n = len(polygon) // 2
    if n < 3:
        return False

    inside = False
    j = n - 1
    for i in range(n):
        xi, yi = polygon[2 * i], polygon[2 * i + 1]
        xj, yj = polygon[2 * j], polygon[2 * j + 1]

        # Check if ray from point intersects edge (j, i)
        if ((yi > y) != (yj > y)) and (x < (xj - xi) * (y - yi) / (yj - yi) + xi):
            inside = not inside

        j = i

    return inside
