"""Polygon triangulation by ear clipping.

An ear is a convex vertex whose triangle with its two neighbours contains no
other remaining vertex. Clipping ears one at a time reduces a simple polygon
of n vertices to n - 2 triangles.

Cost is quadratic or worse in the vertex count, which suits paths of tens to
a few hundred points but not arbitrarily large input.
"""

import logging

from vecpath.core.geometry import cross, point_in_triangle, signed_area
from vecpath.domain import Point, Triangle

logger = logging.getLogger(__name__)


def _clean_vertices(points: list[Point]) -> list[Point]:
    """Drop consecutive duplicates, including a closing copy of the first point."""
    vertices: list[Point] = []
    for point in points:
        if not vertices or point != vertices[-1]:
            vertices.append(point)

    while len(vertices) > 1 and vertices[-1] == vertices[0]:
        vertices.pop()

    return vertices


def _is_ear(
    vertices: list[Point],
    indices: list[int],
    k: int,
    orientation: float,
    epsilon: float,
) -> bool:
    """Check whether the k-th remaining vertex is an ear."""
    m = len(indices)
    i_prev, i_cur, i_next = indices[k - 1], indices[k], indices[(k + 1) % m]
    a, b, c = vertices[i_prev], vertices[i_cur], vertices[i_next]

    if cross(a, b, c) * orientation <= epsilon:
        return False

    for j in indices:
        if j in (i_prev, i_cur, i_next):
            continue
        q = vertices[j]
        # Coincident vertices (touching rings) do not block the ear
        if q == a or q == b or q == c:
            continue
        if point_in_triangle(q, a, b, c):
            return False

    return True


def triangulate_polygon(
    points: list[Point],
    epsilon: float = 1e-9,
    large_polygon_threshold: int = 500,
) -> list[Triangle]:
    """Triangulate a simple polygon by ear clipping.

    The polygon may be given open or closed (last point repeating the first).
    Every emitted triangle has non-negative orientation (``cross(a, b, c) >= 0``)
    whatever the winding of the input.

    Args:
        points: Ordered polygon vertices
        epsilon: Cross products at or below this magnitude count as collinear
        large_polygon_threshold: Vertex count above which a cost diagnostic
            is logged

    Returns:
        Triangles covering the polygon. Empty for fewer than 3 distinct
        vertices, for a zero-area polygon, or when no ear can be found
        (self-intersecting input or accumulated rounding). An empty result
        means nothing is filled; it is not an error.

    Examples:
        >>> square = [Point(0, 0), Point(1, 0), Point(1, 1), Point(0, 1)]
        >>> len(triangulate_polygon(square))
        2
    """
    vertices = _clean_vertices(points)
    n = len(vertices)
    if n < 3:
        return []

    if n > large_polygon_threshold:
        logger.debug("Ear clipping a large polygon (%d vertices)", n)

    area = signed_area(vertices)
    if abs(area) <= epsilon:
        logger.debug("Skipping zero-area polygon (%d vertices)", n)
        return []
    orientation = 1.0 if area > 0 else -1.0

    indices = list(range(n))
    triangles: list[Triangle] = []
    k = 0

    while len(indices) > 3:
        m = len(indices)
        for step in range(m):
            candidate = (k + step) % m
            if _is_ear(vertices, indices, candidate, orientation, epsilon):
                a = vertices[indices[candidate - 1]]
                b = vertices[indices[candidate]]
                c = vertices[indices[(candidate + 1) % m]]
                triangles.append(Triangle(a, b, c).oriented())
                del indices[candidate]
                k = candidate % len(indices)
                break
        else:
            logger.warning(
                "Ear clipping found no ear; polygon left unfilled "
                "(%d of %d vertices remaining)",
                len(indices),
                n,
            )
            return []

    last = Triangle(vertices[indices[0]], vertices[indices[1]], vertices[indices[2]])
    if abs(last.orientation()) > epsilon:
        triangles.append(last.oriented())

    return triangles
