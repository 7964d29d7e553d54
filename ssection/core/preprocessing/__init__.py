
from ssection.core.preprocessing import geometry
from ssection.core.preprocessing.dimensions import Dimensions, as_dimensions
from ssection.core.preprocessing.geometry import *  # noqa: F401, F403


__all__ = [
    'as_dimensions',
    'Dimensions',
    'geometry',
] + geometry.__all__
