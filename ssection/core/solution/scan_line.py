
from dataclasses import dataclass, field
from functools import cached_property
from typing import List, Optional, Sequence, Tuple

import numpy as np

from ssection.core.defaults import ARC_SEGMENTS, CIRCLE_SEGMENTS, SCAN_STEPS
from ssection.core.logger_mixin import LoggerMixin
from ssection.core.preprocessing.geometry import (
    CirclePart, Part, Point, PolygonPart, discretize_part
)
from ssection.core.utils import safe_div

Range = Tuple[float, float]


def union_ranges(ranges: Sequence[Range]) -> List[Range]:
    """Merge open intervals into a sorted list of disjoint intervals.

    Touching intervals are joined.

    Examples
    --------
    >>> from ssection.core.solution.scan_line import union_ranges
    >>> union_ranges([(4, 6), (0, 2), (1, 3), (3, 3.5)])
    [(0, 3.5), (4, 6)]
    """
    merged = []
    for start, end in sorted(ranges):
        if end <= start:
            continue
        if merged and start <= merged[-1][1]:
            if end > merged[-1][1]:
                merged[-1] = (merged[-1][0], end)
        else:
            merged.append((start, end))
    return merged


def subtract_ranges(base: Sequence[Range], cut: Sequence[Range]) \
        -> List[Range]:
    """Remove the intervals ``cut`` from the intervals ``base``.

    Both inputs are normalised with :func:`union_ranges` first. Parts of
    ``cut`` lying outside every ``base`` interval have no effect.

    Examples
    --------
    >>> from ssection.core.solution.scan_line import subtract_ranges
    >>> subtract_ranges([(0, 10)], [(2, 3), (5, 12), (-4, -1)])
    [(0, 2), (3, 5)]
    """
    result = []
    cut = union_ranges(cut)
    for start, end in union_ranges(base):
        current = start
        for c_start, c_end in cut:
            if c_end <= current:
                continue
            if c_start >= end:
                break
            if c_start > current:
                result.append((current, c_start))
            current = max(current, c_end)
            if current >= end:
                break
        if current < end:
            result.append((current, end))
    return result


def edge_crossings(polygon: np.ndarray, positions: np.ndarray,
                   axis: int = 1) -> Tuple[np.ndarray, np.ndarray]:
    r"""Crossings of a polygon's edges with parallel scan lines.

    Parameters
    ----------
    polygon : numpy.ndarray
        Vertex array of shape ``(n, 2)``, closed implicitly.
    positions : numpy.ndarray
        Scan line coordinates in ascending order.
    axis : int, optional
        ``1`` scans lines of constant ``y``, ``0`` lines of constant ``x``.

    Returns
    -------
    tuple of numpy.ndarray
        Index of the scan line and coordinate along it for every crossing,
        sorted by line and then by coordinate.

    Notes
    -----
    An edge :math:`(p_1, p_2)` crosses the line at :math:`v` when

    .. math::
        \min(v_1, v_2) \leq v < \max(v_1, v_2),

    a half-open test that counts every vertex for exactly one of its
    edges, so every line holds an even number of crossings. The lines an
    edge crosses form a contiguous block of ``positions``, found with a
    binary search; the work grows with the number of crossings, not with
    the number of lines.
    """
    positions = np.asarray(positions, dtype=float)
    pts = np.asarray(polygon, dtype=float).reshape(-1, 2)
    if len(pts) < 3 or not len(positions):
        return np.empty(0, dtype=np.intp), np.empty(0)

    v1, u1 = pts[:, axis], pts[:, 1 - axis]
    v2, u2 = np.roll(v1, -1), np.roll(u1, -1)
    first = np.searchsorted(positions, np.minimum(v1, v2), side='left')
    stop = np.searchsorted(positions, np.maximum(v1, v2), side='left')
    counts = stop - first
    total = int(counts.sum())
    if total == 0:
        return np.empty(0, dtype=np.intp), np.empty(0)

    edge = np.repeat(np.arange(len(pts)), counts)
    offset = np.arange(total) - np.repeat(np.cumsum(counts) - counts, counts)
    rows = (np.repeat(first, counts) + offset).astype(np.intp)

    t = (positions[rows] - v1[edge]) / (v2[edge] - v1[edge])
    cuts = u1[edge] + t * (u2[edge] - u1[edge])
    order = np.lexsort((cuts, rows))
    return rows[order], cuts[order]


def slice_ranges(polygon: np.ndarray, positions: np.ndarray,
                 axis: int = 1) -> List[List[Range]]:
    """Intersect a polygon with parallel scan lines.

    Parameters
    ----------
    polygon : numpy.ndarray
        Vertex array of shape ``(n, 2)``, closed implicitly.
    positions : numpy.ndarray
        Scan line coordinates in ascending order.
    axis : int, optional
        ``1`` scans lines of constant ``y`` and returns intervals in ``x``;
        ``0`` scans lines of constant ``x`` and returns intervals in ``y``.

    Returns
    -------
    list of list of tuple
        For every position the material intervals, built by pairing the
        sorted crossings of :func:`edge_crossings`.
    """
    rows, cuts = edge_crossings(polygon, positions, axis)
    result = [[] for _ in range(len(positions))]
    for row, start, end in zip(rows[0::2].tolist(), cuts[0::2].tolist(),
                               cuts[1::2].tolist()):
        result[row].append((start, end))
    return result


def solid_bounds(solids: Sequence[np.ndarray]) \
        -> Optional[Tuple[float, float, float, float]]:
    """``(min_x, min_y, max_x, max_y)`` of the solid polygons, ``None`` if
    there is no solid vertex. Holes never extend the box."""
    pts = [s for s in solids if len(s)]
    if not pts:
        return None
    stacked = np.vstack(pts)
    min_x, min_y = stacked.min(axis=0)
    max_x, max_y = stacked.max(axis=0)
    return float(min_x), float(min_y), float(max_x), float(max_y)


@dataclass(eq=False)
class SlicedSection(LoggerMixin):
    """
    Solid and hole polygons prepared for slicing with parallel scan lines.

    Parameters
    ----------
    solids : list of numpy.ndarray
        Discretized solid polygons, each of shape ``(n, 2)``.
    holes : list of numpy.ndarray, optional
        Discretized hole polygons.
    steps : int, optional
        Number of slices across the solid bounding box per direction.
    debug : bool, optional
        Enables debug-level logging output.

    Raises
    ------
    ValueError
        If ``steps`` is smaller than 1.

    Notes
    -----
    The scan of each direction runs once and is kept; sections built with
    :meth:`from_section` share it.
    """
    solids: List[np.ndarray]
    holes: List[np.ndarray] = field(default_factory=list)
    steps: int = SCAN_STEPS
    debug: bool = False

    def __post_init__(self):
        if not isinstance(self.steps, (int, np.integer)) or self.steps < 1:
            self.logger.error("Invalid number of scan steps: %r", self.steps)
            raise ValueError(f"steps must be an integer >= 1: {self.steps}")

        def prepare(polygons):
            arrays = [np.asarray(p, dtype=float).reshape(-1, 2)
                      for p in polygons]
            return [a for a in arrays if len(a) >= 3]

        self.solids = prepare(self.solids)
        self.holes = prepare(self.holes)
        self._strips = {}
        self.logger.debug(
            "Sliced section with %d solid and %d hole polygons, %d steps.",
            len(self.solids), len(self.holes), self.steps
        )

    @classmethod
    def from_parts(cls, parts: Sequence[Part],
                   arc_segments: int = ARC_SEGMENTS,
                   circle_segments: int = CIRCLE_SEGMENTS, **kwargs):
        """Discretize parts and sort them into solids and holes.

        Raises
        ------
        TypeError
            If an element of ``parts`` is not a part.
        """
        solids, holes = [], []
        for part in parts:
            if not isinstance(part, (PolygonPart, CirclePart)):
                raise TypeError(
                    f"Expected PolygonPart or CirclePart, got "
                    f"{type(part).__name__}."
                )
            coords = discretize_part(part, arc_segments, circle_segments)
            (solids if part.positive else holes).append(coords)
        return cls(solids, holes, **kwargs)

    @classmethod
    def from_section(cls, section: 'SlicedSection', **kwargs):
        """A section of this class on the polygons of ``section`` that
        reuses its scans."""
        kwargs.setdefault('debug', section.debug)
        new = cls(section.solids, section.holes, steps=section.steps,
                  **kwargs)
        new._strips = section._strips
        return new

    @cached_property
    def bounds(self) -> Optional[Tuple[float, float, float, float]]:
        return solid_bounds(self.solids)

    def _scan(self, axis: int):
        empty = (np.empty(0), 0.0, np.empty(0, dtype=np.intp),
                 np.empty(0), np.empty(0))
        if self.bounds is None:
            return empty
        lo, hi = self.bounds[axis], self.bounds[axis + 2]
        if hi <= lo:
            return empty

        step = (hi - lo) / self.steps
        positions = lo + (np.arange(self.steps) + 0.5) * step

        rows, coords, d_solid, d_hole = [], [], [], []
        for polygons, is_hole in ((self.solids, False), (self.holes, True)):
            for polygon in polygons:
                r, c = edge_crossings(polygon, positions, axis)
                # crossings alternate between entering and leaving
                delta = np.tile([1, -1], len(r) // 2)
                zero = np.zeros_like(delta)
                rows.append(r)
                coords.append(c)
                d_solid.append(zero if is_hole else delta)
                d_hole.append(delta if is_hole else zero)

        rows = np.concatenate(rows)
        coords = np.concatenate(coords)
        order = np.lexsort((coords, rows))
        rows, coords = rows[order], coords[order]
        # every line sums to zero, so the running counts restart per line
        solid = np.cumsum(np.concatenate(d_solid)[order])
        hole = np.cumsum(np.concatenate(d_hole)[order])

        net = ((rows[:-1] == rows[1:]) & (solid[:-1] > 0) & (hole[:-1] == 0)
               & (coords[1:] > coords[:-1]))
        self.logger.debug("Axis %d: %d crossings, %d net strips.",
                          axis, len(rows), int(net.sum()))
        return positions, step, rows[:-1][net], coords[:-1][net], \
            coords[1:][net]

    def strips(self, axis: int = 1):
        """Net material strips on mid-slice scan lines.

        On every line the solid intervals are united, the hole intervals
        are united and subtracted. Both unions are read off running
        crossing counts, so overlapping parts are counted once.

        Parameters
        ----------
        axis : int, optional
            ``1`` for horizontal scan lines stepping through ``y``, ``0``
            for vertical scan lines stepping through ``x``.

        Returns
        -------
        tuple
            ``(positions, step, rows, starts, ends)``: scan positions,
            slice thickness, and for every strip the index of its scan line
            and its interval. Touching strips are not joined. All arrays
            are empty when the bounding box has no extent in the scan
            direction.
        """
        if axis not in self._strips:
            self._strips[axis] = self._scan(axis)
        return self._strips[axis]

    def slices(self, axis: int = 1):
        """Net material intervals per scan line.

        Returns
        -------
        tuple of (numpy.ndarray, float, list of list of tuple)
            Scan positions, slice thickness and, per position, the solid
            intervals minus the hole intervals, touching strips joined.
        """
        positions, step, rows, starts, ends = self.strips(axis)
        ranges = [[] for _ in range(len(positions))]
        for row, start, end in zip(rows.tolist(), starts.tolist(),
                                   ends.tolist()):
            ranges[row].append((start, end))
        return positions, step, [union_ranges(r) for r in ranges]


class ScanLineIntegrator(SlicedSection):
    r"""
    Area and moments of overlapping solid and hole polygons by scan-line
    integration.

    Horizontal scan lines are placed at the mid-points of ``steps`` equal
    slices across the solid bounding box. On each line the solid intervals
    are united, the hole intervals are united and subtracted, and every
    remaining interval :math:`[x_1, x_2]` contributes a strip of area
    :math:`dA = (x_2 - x_1) \Delta y`:

    .. math::
        I_{xx} \mathrel{+}= y^2 dA, \quad
        I_{yy} \mathrel{+}= \frac{x_2^3 - x_1^3}{3} \Delta y, \quad
        I_{xy} \mathrel{+}= \frac{x_1 + x_2}{2} \, y \, dA

    The cross-axis moment is integrated exactly across the strip. Holes
    outside every solid are ignored. Centroidal values follow from
    :math:`I_c = I_0 - A d^2`.

    Examples
    --------
    >>> import numpy as np
    >>> from ssection.core.solution.scan_line import ScanLineIntegrator
    >>> outer = np.array([(0, 0), (4, 0), (4, 2), (0, 2)])
    >>> hole = np.array([(1, 0.5), (3, 0.5), (3, 1.5), (1, 1.5)])
    >>> round(ScanLineIntegrator([outer], [hole]).area, 6)
    6.0
    """

    @cached_property
    def _origin_moments(self):
        positions, step, rows, x1, x2 = self.strips(axis=1)
        if not len(rows):
            self.logger.debug("No solid material or zero height, "
                              "all moments are zero.")
            return 0.0, 0.0, 0.0, 0.0, 0.0, 0.0

        self.logger.debug("Integrating %d strips of thickness %g.",
                          len(rows), step)
        y = positions[rows]
        da = (x2 - x1) * step
        x_mid = (x1 + x2) / 2
        area = float(da.sum())
        sx = float(np.dot(y, da))
        sy = float(np.dot(x_mid, da))
        ixx = float(np.dot(y * y, da))
        iyy = float(np.sum(x2 ** 3 - x1 ** 3) / 3 * step)
        ixy = float(np.dot(x_mid * y, da))

        self.logger.debug("Scan-line area: %g", area)
        return area, sx, sy, ixx, iyy, ixy

    @property
    def area(self) -> float:
        return self._origin_moments[0]

    @property
    def static_moment(self):
        """First moments ``(S_x, S_y)`` about the x- and y-axis."""
        return self._origin_moments[1], self._origin_moments[2]

    @property
    def centroid(self) -> Point:
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
        return self.ixx_origin - self.area * self.centroid.y ** 2

    @property
    def iyy(self) -> float:
        return self.iyy_origin - self.area * self.centroid.x ** 2

    @property
    def ixy(self) -> float:
        c = self.centroid
        return self.ixy_origin - self.area * c.x * c.y
