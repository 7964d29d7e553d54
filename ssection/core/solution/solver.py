
from dataclasses import dataclass
from functools import cached_property
from typing import List, Union

from shapely.geometry import LinearRing

from ssection.core.defaults import ARC_SEGMENTS, CIRCLE_SEGMENTS, SCAN_STEPS
from ssection.core.logger_mixin import LoggerMixin
from ssection.core.postprocessing.results import GeometricProperties
from ssection.core.preprocessing.geometry import (
    CirclePart, Part, Point, PolygonPart
)
from ssection.core.solution.plastic import PlasticModulusSolver
from ssection.core.solution.polygon_integral import PolygonIntegral
from ssection.core.solution.properties import section_properties
from ssection.core.solution.scan_line import ScanLineIntegrator


@dataclass(eq=False)
class SectionSolver(LoggerMixin):
    r"""
    Numeric property calculation for an arbitrary list of solid and hole
    parts.

    Every part is discretized (arcs and circles included). Area, centroid
    and second moments come from the :any:`ScanLineIntegrator`, or from
    :any:`PolygonIntegral` when the section is a single solid part whose
    boundary is a simple ring. Plastic moduli always come from
    :any:`PlasticModulusSolver`, which reuses the integrator's scans.

    Parameters
    ----------
    parts : list of :any:`PolygonPart` or :any:`CirclePart`
        Parts in drawing coordinates (``y`` pointing down).
    steps : int, optional
        Number of scan-line slices per direction.
    arc_segments : int, optional
        Segments per curved polygon edge.
    circle_segments : int, optional
        Vertices per circle part.
    debug : bool, optional
        Enables debug-level logging output, including the result table.

    Raises
    ------
    TypeError
        If an element of ``parts`` is not a part.

    Notes
    -----
    The reported centroid is measured from the bottom (largest drawing
    ``y``) and left (smallest drawing ``x``) fibre of the solid bounding
    box, while :py:attr:`centroid` keeps the absolute drawing position.
    The product of inertia is negated once to convert from the drawing's
    y-down orientation to the y-up engineering convention.

    Examples
    --------
    >>> from ssection.core.preprocessing.geometry import PolygonPart
    >>> from ssection.core.solution.solver import SectionSolver
    >>> rect = PolygonPart([(-50, -100), (50, -100), (50, 100), (-50, 100)])
    >>> props = SectionSolver([rect]).properties
    >>> round(props.area), round(props.moment_inertia.iz)
    (20000, 66666667)
    """
    parts: List[Part]
    steps: int = SCAN_STEPS
    arc_segments: int = ARC_SEGMENTS
    circle_segments: int = CIRCLE_SEGMENTS
    debug: bool = False

    def __post_init__(self):
        self.parts = list(self.parts)
        if not all(isinstance(p, (PolygonPart, CirclePart))
                   for p in self.parts):
            self.logger.error(
                "Invalid part types: %s",
                [type(p).__name__ for p in self.parts]
            )
            raise TypeError(
                "All elements in 'parts' must be PolygonPart or CirclePart "
                "instances."
            )
        self.logger.debug("Section with %d parts.", len(self.parts))

        self.integrator = ScanLineIntegrator.from_parts(
            self.parts, arc_segments=self.arc_segments,
            circle_segments=self.circle_segments, steps=self.steps,
            debug=self.debug
        )

    @cached_property
    def is_simple_polygon(self) -> bool:
        """True for exactly one solid part with a simple boundary ring."""
        if len(self.parts) != 1 or not self.parts[0].positive:
            return False
        if len(self.integrator.solids) != 1:
            return False
        return LinearRing(self.integrator.solids[0]).is_simple

    @cached_property
    def moments(self) -> Union[PolygonIntegral, ScanLineIntegrator]:
        """The integrator supplying area, centroid and second moments."""
        if self.is_simple_polygon:
            self.logger.debug("Single simple polygon, using Green's theorem.")
            return PolygonIntegral(self.integrator.solids[0],
                                   debug=self.debug)
        self.logger.debug("Composite section, using scan-line integration.")
        return self.integrator

    @property
    def centroid(self) -> Point:
        """Absolute centroid in drawing coordinates."""
        return self.moments.centroid

    @cached_property
    def plastic(self) -> PlasticModulusSolver:
        return PlasticModulusSolver.from_section(self.integrator)

    @cached_property
    def properties(self) -> GeometricProperties:
        """The complete property record."""
        bounds = self.integrator.bounds
        area = self.moments.area
        if bounds is None or area <= 0:
            self.logger.info("Section has no material, returning zeros.")
            return GeometricProperties()

        min_x, min_y, max_x, max_y = bounds
        c = self.moments.centroid
        self.logger.debug(
            "Bounding box x=[%g, %g], y=[%g, %g], centroid (%g, %g).",
            min_x, max_x, min_y, max_y, c.x, c.y
        )

        props = section_properties(
            area=area,
            centroid_y=max_y - c.y,
            centroid_z=c.x - min_x,
            iz=self.moments.ixx,
            iy=self.moments.iyy,
            izy=-self.moments.ixy,
            top=abs(c.y - min_y),
            bottom=abs(max_y - c.y),
            right=abs(max_x - c.x),
            left=abs(c.x - min_x),
            zz=self.plastic.zz,
            zy=self.plastic.zy,
        )
        self.logger.info("Section properties computed, A = %g.", area)
        self.debug_table("Results", props.rows(),
                         ['Property', 'Value', 'Unit'])
        return props

    def __call__(self) -> GeometricProperties:
        return self.properties
