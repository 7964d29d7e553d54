
import numpy as np

from ssection.core.preprocessing.dimensions import Dimensions, as_dimensions
from ssection.core.preprocessing.geometry import CirclePart
from ssection.core.shapes.base import ShapeFamily, ShapeInput, ShapeType
from ssection.core.solution.properties import section_properties


class CircularShape(ShapeFamily):
    r"""
    Solid circle of radius :math:`r` (10 when missing or not positive).

    Notes
    -----
    .. math::
        A = \pi r^2, \quad I = \frac{\pi r^4}{4}, \quad
        S = \frac{I}{r}, \quad Z = \frac{4}{3} r^3

    The centroid lies at :math:`(r, r)` from the bottom-left fibres.
    """

    type = ShapeType.CIRCULAR
    label = 'Circular'
    initial_dimensions = Dimensions(radius=50)
    inputs = (ShapeInput('Radius (r)', 'radius'),)

    def calculate(self, dimensions=None, parts=None):
        r = as_dimensions(dimensions, self.initial_dimensions).get(
            'radius', 10)
        area = np.pi * r ** 2
        inertia = np.pi * r ** 4 / 4
        plastic = 4 / 3 * r ** 3
        return section_properties(
            area=area, centroid_y=r, centroid_z=r,
            iz=inertia, iy=inertia, izy=0.0,
            top=r, bottom=r, right=r, left=r,
            zz=plastic, zy=plastic,
        )

    def to_parts(self, dimensions=None):
        r = as_dimensions(dimensions, self.initial_dimensions).get(
            'radius', 10)
        return [CirclePart((0.0, 0.0), r)]
