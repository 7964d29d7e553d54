
from ssection.core import postprocessing, preprocessing, shapes, solution
from ssection.core.calculate import (
    calculate_properties, initial_dimensions, section_centroid
)
from ssection.core.postprocessing import *  # noqa: F401, F403
from ssection.core.preprocessing import *  # noqa: F401, F403
from ssection.core.shapes import *  # noqa: F401, F403
from ssection.core.solution import *  # noqa: F401, F403

__all__ = [
    'calculate_properties',
    'initial_dimensions',
    'postprocessing',
    'preprocessing',
    'section_centroid',
    'shapes',
    'solution',
]
