
from ssection.core.preprocessing.geometry.primitives import (
    Point, as_point, circumcircle, closest_point_on_segment, discretize_arc,
    rotate_point
)
from ssection.core.preprocessing.geometry.objects import (
    CirclePart, Part, PolygonPart, parts_from_records
)
from ssection.core.preprocessing.geometry.operation import (
    PartMerge, discretize_part, rotate_part, translate_part
)


__all__ = [
    'as_point',
    'CirclePart',
    'circumcircle',
    'closest_point_on_segment',
    'discretize_arc',
    'discretize_part',
    'Part',
    'PartMerge',
    'parts_from_records',
    'Point',
    'PolygonPart',
    'rotate_part',
    'rotate_point',
    'translate_part',
]
