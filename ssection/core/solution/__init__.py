
from ssection.core.solution.composite import (
    Rectangle, RectangleComposite, rectangle_moments
)
from ssection.core.solution.plastic import PlasticModulusSolver
from ssection.core.solution.polygon_integral import PolygonIntegral
from ssection.core.solution.principal import principal_moments
from ssection.core.solution.properties import section_properties
from ssection.core.solution.scan_line import (
    ScanLineIntegrator, SlicedSection, edge_crossings, slice_ranges,
    subtract_ranges, union_ranges
)
from ssection.core.solution.solver import SectionSolver


__all__ = [
    'edge_crossings',
    'PlasticModulusSolver',
    'PolygonIntegral',
    'principal_moments',
    'Rectangle',
    'RectangleComposite',
    'rectangle_moments',
    'ScanLineIntegrator',
    'section_properties',
    'SectionSolver',
    'slice_ranges',
    'SlicedSection',
    'subtract_ranges',
    'union_ranges',
]
