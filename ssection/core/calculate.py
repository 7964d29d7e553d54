
from typing import Optional, Sequence, Union

from ssection.core.defaults import ARC_SEGMENTS, CIRCLE_SEGMENTS, SCAN_STEPS
from ssection.core.postprocessing.results import GeometricProperties
from ssection.core.preprocessing.dimensions import Dimensions, as_dimensions
from ssection.core.preprocessing.geometry import (
    Part, Point, rotate_part, translate_part
)
from ssection.core.shapes import ShapeType, get_shape
from ssection.core.solution.solver import SectionSolver


def initial_dimensions(shape_type: Union[ShapeType, str]) -> Dimensions:
    """Default dimensions of a shape family."""
    return get_shape(shape_type).initial_dimensions


def section_centroid(parts: Sequence[Part], steps: int = SCAN_STEPS,
                     arc_segments: int = ARC_SEGMENTS,
                     circle_segments: int = CIRCLE_SEGMENTS) -> Point:
    """Absolute centroid of the net region of ``parts`` in drawing
    coordinates; the origin for a section without material.

    Examples
    --------
    >>> from ssection.core.calculate import section_centroid
    >>> from ssection.core.preprocessing.geometry import PolygonPart
    >>> section_centroid([PolygonPart([(0, 0), (4, 0), (4, 2), (0, 2)])])
    Point(x=2.0, y=1.0)
    """
    return SectionSolver(
        parts, steps=steps, arc_segments=arc_segments,
        circle_segments=circle_segments
    ).centroid


def calculate_properties(shape_type: Union[ShapeType, str],
                         dimensions: Union[Dimensions, dict, None] = None,
                         parts: Sequence[Part] = (), rotation: float = 0.0,
                         steps: Optional[int] = None,
                         arc_segments: Optional[int] = None,
                         circle_segments: Optional[int] = None,
                         debug: bool = False) -> GeometricProperties:
    r"""Compute the geometric properties of a cross-section.

    Parameters
    ----------
    shape_type : :any:`ShapeType` or str
        Shape family.
    dimensions : :any:`Dimensions` or dict, optional
        Family parameters; camelCase keys are accepted. Defaults to the
        family's initial dimensions.
    parts : sequence of :any:`PolygonPart` or :any:`CirclePart`, optional
        Parts of a custom section in drawing coordinates (``y`` down).
        Ignored for the standard families.
    rotation : float, optional
        Rotation in degrees about the section's own centroid.
    steps, arc_segments, circle_segments : int, optional
        Resolution overrides for the numeric pipeline.
    debug : bool, optional
        Enables debug-level logging of the numeric pipeline.

    Returns
    -------
    :any:`GeometricProperties`

    Raises
    ------
    ValueError
        If ``shape_type`` is unknown.

    Notes
    -----
    Standard families without rotation are solved in closed form. A custom
    section, and any rotated section, is converted into parts, shifted so
    that its centroid lies in the origin, rotated and solved numerically.
    Pivoting on the centroid keeps the reported centroid of unsymmetric
    sections in place while they turn.

    Examples
    --------
    >>> from ssection.core import calculate_properties
    >>> props = calculate_properties('Rectangular',
    >>>                              {'depth': 200, 'width': 100})
    >>> round(props.radius_gyration.rz, 2), round(props.radius_gyration.ry, 2)
    (57.74, 28.87)
    """
    shape_type = ShapeType(shape_type)
    family = get_shape(shape_type)
    dimensions = as_dimensions(dimensions, family.initial_dimensions)

    if shape_type is not ShapeType.CUSTOM and rotation == 0:
        return family.calculate(dimensions)

    resolution = dict(
        steps=SCAN_STEPS if steps is None else steps,
        arc_segments=ARC_SEGMENTS if arc_segments is None else arc_segments,
        circle_segments=(CIRCLE_SEGMENTS if circle_segments is None
                         else circle_segments),
    )
    if shape_type is ShapeType.CUSTOM:
        parts = list(parts)
    else:
        parts = family.to_parts(dimensions)

    solver = SectionSolver(parts, debug=debug, **resolution)
    if rotation != 0 and parts:
        pivot = solver.centroid
        parts = [rotate_part(translate_part(p, -pivot.x, -pivot.y), rotation)
                 for p in parts]
        solver = SectionSolver(parts, debug=debug, **resolution)
    return solver.properties
