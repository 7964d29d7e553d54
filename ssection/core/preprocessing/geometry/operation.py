
from typing import List, Sequence

from shapely.geometry import Polygon as ShapelyPolygon
from shapely.geometry.base import BaseGeometry
from shapely.ops import unary_union
from shapely.validation import make_valid

from ssection.core.defaults import ARC_SEGMENTS, CIRCLE_SEGMENTS
from ssection.core.logger_mixin import LoggerMixin
from ssection.core.preprocessing.geometry.objects import (
    CirclePart, Part, PolygonPart
)
from ssection.core.preprocessing.geometry.primitives import (
    Point, rotate_point
)


def rotate_part(part: Part, angle: float) -> Part:
    """Rotate a part about the origin by ``angle`` degrees.

    Vertices, curve control points and circle centers are rotated; radii
    and the solid/hole tag are kept. A new part is returned.

    Examples
    --------
    >>> from ssection.core.preprocessing.geometry import (
    >>>     PolygonPart, rotate_part
    >>> )
    >>> part = rotate_part(PolygonPart([(0, 0), (2, 0), (2, 1)]), 180)
    >>> [(round(x, 9), round(y, 9)) for x, y in part.points]
    [(0.0, 0.0), (-2.0, 0.0), (-2.0, -1.0)]
    """
    if isinstance(part, CirclePart):
        return CirclePart(rotate_point(part.center, angle), part.radius,
                          part.positive)
    return PolygonPart(
        points=[rotate_point(p, angle) for p in part.points],
        positive=part.positive,
        curves={i: rotate_point(c, angle) for i, c in part.curves.items()},
    )


def translate_part(part: Part, dx: float, dy: float) -> Part:
    """Shift a part by ``(dx, dy)``; returns a new part."""
    if isinstance(part, CirclePart):
        return CirclePart(part.center.translate(dx, dy), part.radius,
                          part.positive)
    return PolygonPart(
        points=[p.translate(dx, dy) for p in part.points],
        positive=part.positive,
        curves={i: c.translate(dx, dy) for i, c in part.curves.items()},
    )


def discretize_part(part: Part, arc_segments: int = ARC_SEGMENTS,
                    circle_segments: int = CIRCLE_SEGMENTS):
    """Discretize a part with the resolution matching its kind."""
    if isinstance(part, CirclePart):
        return part.discretize(circle_segments)
    return part.discretize(arc_segments)


class PartMerge(LoggerMixin):
    r"""
    Exact boolean composition of solid and hole parts.

    The discretized solids are united, the discretized holes are united,
    and the hole union is subtracted from the solid union. The resulting
    region serves as an independent reference for the scan-line
    integrator, e.g. when validating area and centroid of overlapping
    compositions.

    Parameters
    ----------
    parts : list of :any:`PolygonPart` or :any:`CirclePart`
        The parts of the cross-section.
    arc_segments, circle_segments : int, optional
        Discretization resolution.

    Raises
    ------
    TypeError
        If an element of ``parts`` is not a part.

    Attributes
    ----------
    unary_pos : shapely geometry or None
        Union of all solids, or None if there is none.
    unary_neg : shapely geometry or None
        Union of all holes, or None if there is none.

    Examples
    --------
    >>> from ssection.core.preprocessing.geometry import (
    >>>     PartMerge, PolygonPart
    >>> )
    >>> outer = PolygonPart([(0, 0), (4, 0), (4, 2), (0, 2)])
    >>> hole = PolygonPart([(1, 0.5), (3, 0.5), (3, 1.5), (1, 1.5)],
    >>>                    positive=False)
    >>> PartMerge([outer, hole]).area
    6.0
    """

    # noinspection PyMissingConstructor
    def __init__(self,
                 parts: Sequence[Part],
                 arc_segments: int = ARC_SEGMENTS,
                 circle_segments: int = CIRCLE_SEGMENTS,
                 debug: bool = False):
        _ = debug  # consumed by LoggerMixin

        parts = list(parts)
        if not all(isinstance(p, (PolygonPart, CirclePart)) for p in parts):
            self.logger.error(
                "Invalid part types: %s", [type(p).__name__ for p in parts]
            )
            raise TypeError(
                "All elements in 'parts' must be PolygonPart or CirclePart "
                "instances."
            )

        self.positive = [p for p in parts if p.positive]
        self.negative = [p for p in parts if not p.positive]
        self.logger.debug(
            "Input contains %d solid and %d hole parts.",
            len(self.positive), len(self.negative)
        )

        self.unary_pos = self._union(self.positive, arc_segments,
                                     circle_segments)
        self.unary_neg = self._union(self.negative, arc_segments,
                                     circle_segments)

    def _union(self, parts, arc_segments, circle_segments):
        shapes = []
        for part in parts:
            coords = discretize_part(part, arc_segments, circle_segments)
            if len(coords) < 3:
                self.logger.debug("Skipping degenerate part %r.", part)
                continue
            shapes.append(make_valid(ShapelyPolygon(coords)))
        if not shapes:
            return None
        union = unary_union(shapes)
        self.logger.debug("Union created with geometry type: %s",
                          union.geom_type)
        return union

    def difference(self) -> BaseGeometry:
        """
        Returns the solid union minus the hole union.

        Returns
        -------
        shapely.geometry.base.BaseGeometry
            The net material region; an empty polygon if there are no
            solids. Holes outside every solid have no effect.
        """
        if self.unary_pos is None:
            self.logger.debug("No solid parts, net region is empty.")
            return ShapelyPolygon()
        if self.unary_neg is None:
            return self.unary_pos
        return self.unary_pos.difference(self.unary_neg)

    def __call__(self) -> BaseGeometry:
        return self.difference()

    @property
    def area(self) -> float:
        """Net material area."""
        return float(self.difference().area)

    @property
    def centroid(self) -> Point:
        """Absolute centroid of the net material, origin if it is empty."""
        region = self.difference()
        if region.is_empty or region.area == 0:
            return Point(0.0, 0.0)
        c = region.centroid
        return Point(float(c.x), float(c.y))

    @property
    def bounds(self) -> List[float]:
        """``[min_x, min_y, max_x, max_y]`` of the solid union."""
        if self.unary_pos is None:
            return [0.0, 0.0, 0.0, 0.0]
        return list(self.unary_pos.bounds)
