
import numpy as np

from ssection.core.postprocessing.results import (
    Centroid, GeometricProperties, MomentsOfInertia, PlasticModulus,
    RadiiOfGyration, SectionModulus
)
from ssection.core.solution.principal import principal_moments
from ssection.core.utils import safe_div


def section_properties(area: float, centroid_y: float, centroid_z: float,
                       iz: float, iy: float, izy: float,
                       top: float, bottom: float, right: float, left: float,
                       zz: float = 0.0, zy: float = 0.0) \
        -> GeometricProperties:
    r"""Assemble the property record from the basic section quantities.

    Parameters
    ----------
    area : float
        Net area.
    centroid_y, centroid_z : float
        Centroid distances from the bottom and left fibres.
    iz, iy, izy : float
        Centroidal second moments and product of inertia (y-up).
    top, bottom, right, left : float
        Distances from the centroid to the extreme fibres.
    zz, zy : float, optional
        Plastic section moduli.

    Returns
    -------
    :any:`GeometricProperties`

    Notes
    -----
    Section moduli :math:`S = I / c` and radii of gyration
    :math:`r = \sqrt{|I| / A}` evaluate to zero instead of failing for a
    zero fibre distance or area. All values are stored as Python floats.
    """
    area, centroid_y, centroid_z, iz, iy, izy, zz, zy = (
        float(v) for v in (area, centroid_y, centroid_z, iz, iy, izy, zz, zy)
    )
    if area > 0:
        rz = float(np.sqrt(abs(iz) / area))
        ry = float(np.sqrt(abs(iy) / area))
    else:
        rz = ry = 0.0
    return GeometricProperties(
        area=area,
        centroid=Centroid(y=centroid_y, z=centroid_z),
        moment_inertia=MomentsOfInertia(iz=iz, iy=iy, izy=izy),
        principal_moments=principal_moments(iz, iy, izy),
        section_modulus=SectionModulus(
            szt=safe_div(iz, top),
            szb=safe_div(iz, bottom),
            syt=safe_div(iy, right),
            syb=safe_div(iy, left),
        ),
        radius_gyration=RadiiOfGyration(rz=rz, ry=ry),
        plastic_modulus=PlasticModulus(zz=zz, zy=zy),
    )
