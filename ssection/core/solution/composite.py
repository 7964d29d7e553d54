
from dataclasses import dataclass
from functools import cached_property
from typing import List, Sequence, Tuple

import numpy as np

from ssection.core.utils import safe_div


@dataclass(frozen=True)
class Rectangle:
    r"""
    Axis-aligned rectangle placed in a section's local axis system.

    Parameters
    ----------
    width : float
        Horizontal extent :math:`b`.
    height : float
        Vertical extent :math:`h`.
    y : float
        Height of the rectangle's centroid above the section's bottom fibre.
    z : float
        Distance of the rectangle's centroid from the section's left fibre.
    positive : bool, optional
        ``False`` marks a hole that is subtracted. Default is ``True``.
    """
    width: float
    height: float
    y: float
    z: float
    positive: bool = True

    @property
    def sign(self) -> int:
        return 1 if self.positive else -1

    @property
    def area(self) -> float:
        return self.width * self.height

    @property
    def iz_local(self) -> float:
        r""":math:`b h^3 / 12` about the rectangle's own horizontal axis."""
        return self.width * self.height ** 3 / 12

    @property
    def iy_local(self) -> float:
        r""":math:`h b^3 / 12` about the rectangle's own vertical axis."""
        return self.height * self.width ** 3 / 12


def rectangle_moments(width: float, height: float, centroid_y: float,
                      centroid_z: float) -> Rectangle:
    """Area and local second moments of a ``width`` x ``height`` rectangle
    tagged with its centroid location.

    Examples
    --------
    >>> from ssection.core.solution.composite import rectangle_moments
    >>> r = rectangle_moments(100, 200, 100, 50)
    >>> r.area, round(r.iz_local), round(r.iy_local)
    (20000, 66666667, 16666667)
    """
    return Rectangle(width=width, height=height, y=centroid_y, z=centroid_z)


def _plastic_about_equal_area_axis(
        strips: Sequence[Tuple[float, float, float]]) -> Tuple[float, float]:
    r"""Exact plastic modulus of a piecewise-constant width profile.

    Parameters
    ----------
    strips : sequence of (lo, hi, density)
        Coordinate interval along the bending direction and the signed
        material width across it.

    Returns
    -------
    tuple of float
        Plastic neutral axis position and plastic modulus.

    Notes
    -----
    The area below :math:`p`, :math:`A(p) = \sum_i w_i \, \mathrm{clamp}(p -
    l_i, 0, h_i - l_i)`, is piecewise linear; the neutral axis is found by
    linear interpolation between break points. Each strip then contributes

    .. math::
        w_i \int_{l_i}^{h_i} |t - p| \, dt = \frac{w_i}{2} \left(
        (h_i - p) |h_i - p| - (l_i - p) |l_i - p| \right).
    """
    strips = [(lo, hi, w) for lo, hi, w in strips if hi > lo and w != 0]
    if not strips:
        return 0.0, 0.0
    lo, hi, w = (np.array(v, dtype=float) for v in zip(*strips))
    total = float(np.sum(w * (hi - lo)))
    if total <= 0:
        return 0.0, 0.0

    def area_below(p):
        return float(np.sum(w * np.clip(p - lo, 0, hi - lo)))

    breaks = np.unique(np.concatenate((lo, hi)))
    below = np.array([area_below(b) for b in breaks])
    half = total / 2
    k = int(np.searchsorted(below, half))
    k = min(max(k, 1), len(breaks) - 1)
    a0, a1 = below[k - 1], below[k]
    pna = breaks[k - 1] + (breaks[k] - breaks[k - 1]) * safe_div(
        half - a0, a1 - a0)

    modulus = float(np.sum(
        w * ((hi - pna) * np.abs(hi - pna) - (lo - pna) * np.abs(lo - pna))
    ) / 2)
    return float(pna), modulus


@dataclass(eq=False)
class RectangleComposite:
    r"""
    Section assembled from axis-aligned rectangles, solved in closed form.

    Parameters
    ----------
    rectangles : list of :any:`Rectangle`
        Constituent rectangles in the section's local axis system (origin
        at the bottom-left corner of the bounding box, ``y`` up, ``z``
        right). Holes carry ``positive=False``. Solid rectangles must not
        overlap each other.

    Notes
    -----
    Centroidal moments follow from the parallel axis (Steiner) theorem

    .. math::
        I_z = \sum_i s_i \left(I_{z,i} + A_i (y_i - \bar{y})^2\right), \quad
        I_{zy} = \sum_i s_i A_i (y_i - \bar{y})(z_i - \bar{z})

    with :math:`s_i = \pm 1` for solids and holes. Axis-aligned rectangles
    carry no local product of inertia.

    Examples
    --------
    An unequal angle 150 x 100 x 10:

    >>> from ssection.core.solution.composite import (
    >>>     RectangleComposite, rectangle_moments
    >>> )
    >>> c = RectangleComposite([
    >>>     rectangle_moments(10, 140, 80, 5),
    >>>     rectangle_moments(100, 10, 5, 50),
    >>> ])
    >>> c.area
    2400
    >>> c.izy < 0
    True
    """
    rectangles: List[Rectangle]

    @cached_property
    def area(self) -> float:
        return sum(r.sign * r.area for r in self.rectangles)

    @cached_property
    def centroid_y(self) -> float:
        return safe_div(
            sum(r.sign * r.area * r.y for r in self.rectangles), self.area)

    @cached_property
    def centroid_z(self) -> float:
        return safe_div(
            sum(r.sign * r.area * r.z for r in self.rectangles), self.area)

    @cached_property
    def iz(self) -> float:
        return sum(
            r.sign * (r.iz_local + r.area * (r.y - self.centroid_y) ** 2)
            for r in self.rectangles
        )

    @cached_property
    def iy(self) -> float:
        return sum(
            r.sign * (r.iy_local + r.area * (r.z - self.centroid_z) ** 2)
            for r in self.rectangles
        )

    @cached_property
    def izy(self) -> float:
        return sum(
            r.sign * r.area * (r.y - self.centroid_y)
            * (r.z - self.centroid_z)
            for r in self.rectangles
        )

    @cached_property
    def _plastic_z(self) -> Tuple[float, float]:
        return _plastic_about_equal_area_axis([
            (r.y - r.height / 2, r.y + r.height / 2, r.sign * r.width)
            for r in self.rectangles
        ])

    @cached_property
    def _plastic_y(self) -> Tuple[float, float]:
        return _plastic_about_equal_area_axis([
            (r.z - r.width / 2, r.z + r.width / 2, r.sign * r.height)
            for r in self.rectangles
        ])

    @property
    def neutral_axis_z(self) -> float:
        """Height of the horizontal plastic neutral axis above the bottom
        fibre."""
        return self._plastic_z[0]

    @property
    def neutral_axis_y(self) -> float:
        """Distance of the vertical plastic neutral axis from the left
        fibre."""
        return self._plastic_y[0]

    @property
    def zz(self) -> float:
        """Plastic modulus for bending about the horizontal axis."""
        return self._plastic_z[1]

    @property
    def zy(self) -> float:
        """Plastic modulus for bending about the vertical axis."""
        return self._plastic_y[1]
