
from ssection.core.postprocessing.results import (
    Centroid, GeometricProperties, MomentsOfInertia, PlasticModulus,
    PrincipalMoments, RadiiOfGyration, SectionModulus
)


__all__ = [
    'Centroid',
    'GeometricProperties',
    'MomentsOfInertia',
    'PlasticModulus',
    'PrincipalMoments',
    'RadiiOfGyration',
    'SectionModulus',
]
