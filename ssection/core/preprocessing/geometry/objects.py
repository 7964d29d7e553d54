
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping, Union

import numpy as np

from ssection.core.defaults import ARC_SEGMENTS, CIRCLE_SEGMENTS
from ssection.core.preprocessing.geometry.primitives import (
    Point, as_point, discretize_arc
)


def _check_positive_flag(positive):
    if not isinstance(positive, bool):
        raise ValueError("The 'positive' attribute must be a boolean.")


def _drop_repeated(points: List[Point]) -> List[Point]:
    """Remove consecutive duplicates, including a closing duplicate."""
    chain = []
    for p in points:
        if not chain or p != chain[-1]:
            chain.append(p)
    if len(chain) > 1 and chain[0] == chain[-1]:
        chain.pop()
    return chain


@dataclass(eq=False)
class PolygonPart:
    """
    A polygonal region of a composite cross-section, optionally with curved
    edges.

    Parameters
    ----------
    points : list of Point
        Vertices in drawing coordinates. The polygon is closed implicitly,
        the last vertex connects back to the first. Winding direction has no
        meaning, solid and hole are distinguished by ``positive``.
    positive : bool, optional
        ``True`` for solid material, ``False`` for a hole that is cut out of
        the solids it overlaps. Default is ``True``.
    curves : dict of int to Point, optional
        Sparse map from edge index to control point. Edge ``i`` runs from
        vertex ``i`` to vertex ``(i + 1) % n``; with a control point it
        becomes the circular arc through that point.

    Raises
    ------
    ValueError
        If a vertex is not an ``(x, y)`` pair, a curve key is not an
        integer or ``positive`` is not a boolean.
    TypeError
        If a coordinate is not numeric.

    Notes
    -----
    Fewer than three vertices are accepted; such a part is degenerate and
    contributes nothing to any property.

    Examples
    --------
    A 100 x 40 rectangle whose top edge bulges upwards by 10:

    >>> from ssection.core.preprocessing.geometry import PolygonPart
    >>> part = PolygonPart(
    >>>     [(0, 0), (100, 0), (100, 40), (0, 40)],
    >>>     curves={0: (50, -10)}
    >>> )
    >>> part.discretize(segments=8).shape
    (11, 2)
    """
    points: List[Point]
    positive: bool = True
    curves: Dict[int, Point] = field(default_factory=dict)

    def __post_init__(self):
        self.points = [as_point(p) for p in self.points]
        _check_positive_flag(self.positive)

        curves = {}
        for key, control in dict(self.curves or {}).items():
            if isinstance(key, bool) or not isinstance(key, (int, np.integer)):
                raise ValueError(
                    f"Curve keys must be edge indices (int), got {key!r}."
                )
            curves[int(key)] = as_point(control)
        self.curves = curves

    def edges(self):
        """Yield ``(start, end, control)`` for every edge; ``control`` is
        ``None`` for straight edges."""
        n = len(self.points)
        for i in range(n):
            yield (self.points[i], self.points[(i + 1) % n],
                   self.curves.get(i))

    def discretize(self, segments: int = ARC_SEGMENTS) -> np.ndarray:
        """Replace every curved edge by ``segments`` straight segments.

        Parameters
        ----------
        segments : int, optional
            Resolution of each arc.

        Returns
        -------
        numpy.ndarray
            Vertex array of shape ``(n, 2)`` without closing duplicate. An
            empty ``(0, 2)`` array is returned for fewer than three
            vertices.
        """
        if len(self.points) < 3:
            return np.empty((0, 2))
        chain = []
        for start, end, control in self.edges():
            if control is None:
                chain.append(start)
            else:
                chain.extend(discretize_arc(start, control, end, segments))
        return np.array(_drop_repeated(chain), dtype=float).reshape(-1, 2)


@dataclass(eq=False)
class CirclePart:
    """
    A full circular region of a composite cross-section.

    Parameters
    ----------
    center : Point
        Circle center in drawing coordinates.
    radius : float
        Circle radius. A radius of zero or less yields an empty part.
    positive : bool, optional
        ``True`` for solid material, ``False`` for a hole.

    Examples
    --------
    >>> from ssection.core.preprocessing.geometry import CirclePart
    >>> CirclePart((0, 0), 10).discretize(segments=16).shape
    (16, 2)
    """
    center: Point
    radius: float
    positive: bool = True

    def __post_init__(self):
        self.center = as_point(self.center)
        if isinstance(self.radius, bool) or not isinstance(
                self.radius, (int, float, np.floating, np.integer)):
            raise TypeError(f"Radius must be numeric: {self.radius!r}")
        self.radius = float(self.radius)
        _check_positive_flag(self.positive)

    def discretize(self, segments: int = CIRCLE_SEGMENTS) -> np.ndarray:
        r"""Approximate the circle by a regular polygon.

        Vertex :math:`i` sits at angle :math:`2 \pi i / n`. Returns an
        empty ``(0, 2)`` array for a non-positive radius.
        """
        if segments < 3:
            raise ValueError(f"A circle needs >= 3 segments, got {segments}.")
        if self.radius <= 0:
            return np.empty((0, 2))
        theta = 2 * np.pi * np.arange(segments) / segments
        return np.column_stack((
            self.center.x + self.radius * np.cos(theta),
            self.center.y + self.radius * np.sin(theta),
        ))


Part = Union[PolygonPart, CirclePart]


def parts_from_records(records: Iterable[Mapping]) -> List[Part]:
    """Build parts from the editor's part records.

    Parameters
    ----------
    records : iterable of mapping
        Each record has a ``'type'`` of ``'solid'`` or ``'hole'`` and either
        ``'points'`` (list of ``{'x', 'y'}``) with optional ``'curves'``
        (``{index: {'controlPoint': {'x', 'y'}}}``), or ``'isCircle': True``
        with ``'circleParams'`` (``{'x', 'y', 'r'}``). Extra keys such as
        ``'id'`` are ignored.

    Returns
    -------
    list of PolygonPart or CirclePart

    Raises
    ------
    ValueError
        If a record's type is unknown or a curve index is not an integer.

    Examples
    --------
    >>> from ssection.core.preprocessing.geometry import parts_from_records
    >>> parts = parts_from_records([
    >>>     {'type': 'solid', 'isCircle': True,
    >>>      'circleParams': {'x': 0, 'y': 0, 'r': 50}},
    >>>     {'type': 'hole', 'points': [{'x': -10, 'y': -10},
    >>>                                 {'x': 10, 'y': -10},
    >>>                                 {'x': 0, 'y': 10}]},
    >>> ])
    >>> [type(p).__name__ for p in parts]
    ['CirclePart', 'PolygonPart']
    """
    parts = []
    for i, record in enumerate(records):
        kind = record.get('type', 'solid')
        if kind not in ('solid', 'hole'):
            raise ValueError(
                f"Record #{i} has type {kind!r}, expected 'solid' or 'hole'."
            )
        positive = kind == 'solid'

        circle = record.get('circleParams')
        if record.get('isCircle') and circle:
            parts.append(CirclePart(
                center=as_point(circle), radius=circle['r'],
                positive=positive
            ))
            continue

        curves = {}
        for key, value in (record.get('curves') or {}).items():
            try:
                index = int(key)
            except (TypeError, ValueError):
                raise ValueError(
                    f"Record #{i} has a non-integer curve index {key!r}."
                ) from None
            curves[index] = as_point(value['controlPoint'])

        parts.append(PolygonPart(
            points=record.get('points', []), positive=positive,
            curves=curves
        ))
    return parts
