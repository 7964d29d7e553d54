
from ssection.core import (
    CirclePart, Dimensions, GeometricProperties, PartMerge, PolygonPart,
    SectionSolver, ShapeType, calculate_properties, get_shape,
    initial_dimensions, parts_from_records, section_centroid
)

__all__ = [
    'calculate_properties',
    'CirclePart',
    'Dimensions',
    'GeometricProperties',
    'get_shape',
    'initial_dimensions',
    'PartMerge',
    'parts_from_records',
    'PolygonPart',
    'section_centroid',
    'SectionSolver',
    'ShapeType',
]
