
from numbers import Real
from typing import List, Mapping, NamedTuple, Optional, Tuple

import numpy as np

from ssection.core.defaults import ARC_SEGMENTS, COLLINEAR_TOLERANCE
from ssection.core.utils import normalize_angle, rotation_matrix


class Point(NamedTuple):
    """
    Immutable point in the shared drawing coordinate system.

    The drawing convention has ``x`` increasing to the right and ``y``
    increasing downwards. Being a :any:`tuple`, a point can be used wherever
    a plain ``(x, y)`` pair is expected.

    Examples
    --------
    >>> from ssection.core.preprocessing.geometry import Point
    >>> p = Point(3, 4)
    >>> p.distance_to(Point(0, 0))
    5.0
    """
    x: float
    y: float

    def translate(self, dx: float, dy: float) -> 'Point':
        return Point(self.x + dx, self.y + dy)

    def distance_to(self, other) -> float:
        other = as_point(other)
        return float(np.hypot(self.x - other.x, self.y - other.y))


def as_point(value) -> Point:
    """Coerce a point-like value into a :any:`Point`.

    Parameters
    ----------
    value : Point, tuple, list or mapping
        Either an ``(x, y)`` pair or a mapping with the keys ``'x'`` and
        ``'y'``.

    Raises
    ------
    ValueError
        If a sequence does not hold exactly two entries or a mapping lacks
        one of the keys.
    TypeError
        If a coordinate is not a real number.
    """
    if isinstance(value, Point):
        return value
    if isinstance(value, Mapping):
        if 'x' not in value or 'y' not in value:
            raise ValueError(
                f"A point mapping needs the keys 'x' and 'y': {value}"
            )
        coords = (value['x'], value['y'])
    elif isinstance(value, (tuple, list, np.ndarray)):
        if len(value) != 2:
            raise ValueError(f"A point must be an (x, y) pair: {value}")
        coords = tuple(value)
    else:
        raise TypeError(f"Cannot interpret {value!r} as a point.")
    if not all(isinstance(c, Real) and not isinstance(c, bool)
               for c in coords):
        raise TypeError(f"Point coordinates must be numeric: {value}")
    return Point(float(coords[0]), float(coords[1]))


def circumcircle(p1, p2, p3, tolerance: float = COLLINEAR_TOLERANCE) \
        -> Optional[Tuple[Point, float]]:
    r"""Find the circle passing through three points.

    Parameters
    ----------
    p1, p2, p3 : Point
        The three points on the circle.
    tolerance : float, optional
        Determinant magnitude below which the points are treated as
        collinear.

    Returns
    -------
    tuple of (Point, float) or None
        Center and radius of the circle, or ``None`` if the points are
        collinear. Callers treat ``None`` as a straight edge.

    Notes
    -----
    With :math:`D = 2 (x_1 (y_2 - y_3) + x_2 (y_3 - y_1) + x_3 (y_1 - y_2))`
    the center is

    .. math::
        u_x = \frac{1}{D} \sum_i (x_i^2 + y_i^2)(y_{i+1} - y_{i+2}), \quad
        u_y = \frac{1}{D} \sum_i (x_i^2 + y_i^2)(x_{i+2} - x_{i+1})

    Examples
    --------
    >>> from ssection.core.preprocessing.geometry import circumcircle
    >>> circumcircle((1, 0), (0, 1), (-1, 0))
    (Point(x=0.0, y=0.0), 1.0)
    >>> circumcircle((0, 0), (1, 1), (2, 2)) is None
    True
    """
    (x1, y1), (x2, y2), (x3, y3) = as_point(p1), as_point(p2), as_point(p3)

    d = 2 * (x1 * (y2 - y3) + x2 * (y3 - y1) + x3 * (y1 - y2))
    if abs(d) < tolerance:
        return None

    s1, s2, s3 = x1 ** 2 + y1 ** 2, x2 ** 2 + y2 ** 2, x3 ** 2 + y3 ** 2
    ux = (s1 * (y2 - y3) + s2 * (y3 - y1) + s3 * (y1 - y2)) / d
    uy = (s1 * (x3 - x2) + s2 * (x1 - x3) + s3 * (x2 - x1)) / d
    r = float(np.hypot(x1 - ux, y1 - uy))
    return Point(ux, uy), r


def discretize_arc(p1, control, p2, segments: int = ARC_SEGMENTS) \
        -> List[Point]:
    r"""Sample the circular arc from ``p1`` through ``control`` to ``p2``.

    Parameters
    ----------
    p1 : Point
        Start of the arc.
    control : Point
        Point the arc has to pass through.
    p2 : Point
        End of the arc. It is not part of the result, it starts the next
        edge of the polygon chain.
    segments : int, optional
        Number of equal angular steps.

    Returns
    -------
    list of Point
        ``segments`` points starting with ``p1``. For collinear input the
        straight edge ``[p1, p2]`` is returned instead.

    Raises
    ------
    ValueError
        If ``segments`` is smaller than 1.

    Notes
    -----
    The sweep is the sum of the two signed angular deltas start → control
    and control → end, each wrapped into :math:`(-\pi, \pi]`. The path
    therefore always runs over the control point, also for arcs spanning
    more than 180°.
    """
    if segments < 1:
        raise ValueError(f"segments must be >= 1, got {segments}.")
    p1, control, p2 = as_point(p1), as_point(control), as_point(p2)

    circle = circumcircle(p1, control, p2)
    if circle is None:
        return [p1, p2]
    (cx, cy), r = circle

    start = np.arctan2(p1.y - cy, p1.x - cx)
    through = np.arctan2(control.y - cy, control.x - cx)
    end = np.arctan2(p2.y - cy, p2.x - cx)

    sweep = (normalize_angle(through - start)
             + normalize_angle(end - through))

    theta = start + sweep * np.arange(segments) / segments
    return [Point(float(x), float(y)) for x, y in
            zip(cx + r * np.cos(theta), cy + r * np.sin(theta))]


def rotate_point(point, angle: float) -> Point:
    """Rotate a point about the origin by ``angle`` degrees.

    Examples
    --------
    >>> from ssection.core.preprocessing.geometry import rotate_point
    >>> p = rotate_point((1, 0), 90)
    >>> round(p.x, 12), round(p.y, 12)
    (0.0, 1.0)
    """
    x, y = rotation_matrix(angle) @ np.array(as_point(point))
    return Point(float(x), float(y))


def closest_point_on_segment(p1, p2, cursor) -> Tuple[Point, float]:
    r"""Project ``cursor`` onto the segment ``p1``–``p2``.

    Parameters
    ----------
    p1, p2 : Point
        End points of the segment.
    cursor : Point
        The point to be projected.

    Returns
    -------
    tuple of (Point, float)
        The closest point on the segment and its Euclidean distance to
        ``cursor``.

    Notes
    -----
    The projection parameter

    .. math::
        t = \frac{(c - p_1) \cdot (p_2 - p_1)}{|p_2 - p_1|^2}

    is clamped to :math:`[0, 1]`. A zero-length segment projects onto
    ``p1``.
    """
    p1, p2, cursor = as_point(p1), as_point(p2), as_point(cursor)
    dx, dy = p2.x - p1.x, p2.y - p1.y
    length_sq = dx * dx + dy * dy
    if length_sq == 0:
        t = 0.0
    else:
        t = ((cursor.x - p1.x) * dx + (cursor.y - p1.y) * dy) / length_sq
        t = min(1.0, max(0.0, t))
    closest = Point(p1.x + t * dx, p1.y + t * dy)
    return closest, closest.distance_to(cursor)
