
from dataclasses import dataclass
from functools import cached_property

import numpy as np

from ssection.core.logger_mixin import LoggerMixin
from ssection.core.preprocessing.geometry import Point
from ssection.core.utils import safe_div


@dataclass(eq=False)
class PolygonIntegral(LoggerMixin):
    r"""
    Area, first and second moments of a single simple polygon by Green's
    theorem.

    Parameters
    ----------
    points : numpy.ndarray
        Vertex array of shape ``(n, 2)`` in drawing coordinates, closed
        implicitly. Either winding direction is accepted.
    debug : bool, optional
        Enables debug-level logging output.

    Notes
    -----
    With :math:`c_i = x_i y_{i+1} - x_{i+1} y_i` the edge integrals are

    .. math::
        A = \frac{1}{2} \sum c_i, \quad
        S_x = \frac{1}{6} \sum (y_i + y_{i+1}) c_i, \quad
        S_y = \frac{1}{6} \sum (x_i + x_{i+1}) c_i

    .. math::
        I_{xx} = \frac{1}{12} \sum (y_i^2 + y_i y_{i+1} + y_{i+1}^2) c_i,
        \quad
        I_{xy} = \frac{1}{24} \sum (x_i y_{i+1} + 2 x_i y_i +
        2 x_{i+1} y_{i+1} + x_{i+1} y_i) c_i

    and :math:`I_{yy}` analogous to :math:`I_{xx}`. All of them refer to
    the origin. A clockwise polygon yields a negative area; every quantity
    is then negated so the result does not depend on the winding.

    Overlapping solids and holes are not handled here, see
    :any:`ScanLineIntegrator`. Fewer than three vertices give zeros.

    Examples
    --------
    >>> import numpy as np
    >>> from ssection.core.solution.polygon_integral import PolygonIntegral
    >>> rect = PolygonIntegral(np.array([(0, 0), (4, 0), (4, 2), (0, 2)]))
    >>> rect.area, rect.centroid
    (8.0, Point(x=2.0, y=1.0))
    >>> round(rect.ixx, 6)
    2.666667
    """
    points: np.ndarray
    debug: bool = False

    def __post_init__(self):
        self.points = np.asarray(self.points, dtype=float).reshape(-1, 2)
        self.logger.debug("Polygon with %d vertices.", len(self.points))

    @cached_property
    def _origin_moments(self):
        if len(self.points) < 3:
            self.logger.debug("Fewer than 3 vertices, all moments are zero.")
            return 0.0, 0.0, 0.0, 0.0, 0.0, 0.0

        x, y = self.points[:, 0], self.points[:, 1]
        x1, y1 = np.roll(x, -1), np.roll(y, -1)
        common = x * y1 - x1 * y

        a = np.sum(common) / 2
        sx = np.sum((y + y1) * common) / 6
        sy = np.sum((x + x1) * common) / 6
        ixx = np.sum((y ** 2 + y * y1 + y1 ** 2) * common) / 12
        iyy = np.sum((x ** 2 + x * x1 + x1 ** 2) * common) / 12
        ixy = np.sum(
            (x * y1 + 2 * x * y + 2 * x1 * y1 + x1 * y) * common
        ) / 24

        values = (a, sx, sy, ixx, iyy, ixy)
        if a < 0:
            self.logger.debug("Clockwise winding, negating all integrals.")
            values = tuple(-v for v in values)
        return tuple(float(v) for v in values)

    @property
    def area(self) -> float:
        return self._origin_moments[0]

    @property
    def static_moment(self):
        """First moments ``(S_x, S_y)`` about the x- and y-axis."""
        return self._origin_moments[1], self._origin_moments[2]

    @property
    def centroid(self) -> Point:
        """Absolute centroid :math:`(S_y / A, S_x / A)`."""
        sx, sy = self.static_moment
        return Point(safe_div(sy, self.area), safe_div(sx, self.area))

    @property
    def ixx_origin(self) -> float:
        return self._origin_moments[3]

    @property
    def iyy_origin(self) -> float:
        return self._origin_moments[4]

    @property
    def ixy_origin(self) -> float:
        return self._origin_moments[5]

    @property
    def ixx(self) -> float:
        """Second moment about the horizontal centroidal axis."""
        return self.ixx_origin - self.area * self.centroid.y ** 2

    @property
    def iyy(self) -> float:
        """Second moment about the vertical centroidal axis."""
        return self.iyy_origin - self.area * self.centroid.x ** 2

    @property
    def ixy(self) -> float:
        """Product of inertia about the centroid, drawing orientation."""
        c = self.centroid
        return self.ixy_origin - self.area * c.x * c.y
