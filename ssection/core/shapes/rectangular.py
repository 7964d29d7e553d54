
from ssection.core.preprocessing.dimensions import Dimensions, as_dimensions
from ssection.core.preprocessing.geometry import PolygonPart
from ssection.core.shapes.base import (
    ShapeFamily, ShapeInput, ShapeType, composite_properties
)
from ssection.core.solution.composite import Rectangle


class RectangularShape(ShapeFamily):
    r"""
    Solid rectangle :math:`b \times d`.

    Examples
    --------
    >>> from ssection.core.shapes import RectangularShape
    >>> props = RectangularShape().calculate({'depth': 200, 'width': 100})
    >>> props.area, round(props.plastic_modulus.zz)
    (20000.0, 1000000)
    """

    type = ShapeType.RECTANGULAR
    label = 'Rectangular'
    initial_dimensions = Dimensions(depth=200, width=100)
    inputs = (
        ShapeInput('Depth (d)', 'depth'),
        ShapeInput('Width (b)', 'width'),
    )

    def calculate(self, dimensions=None, parts=None):
        d = as_dimensions(dimensions, self.initial_dimensions)
        return composite_properties(
            [Rectangle(d.width, d.depth, d.depth / 2, d.width / 2)],
            depth=d.depth, width=d.width
        )

    def to_parts(self, dimensions=None):
        d = as_dimensions(dimensions, self.initial_dimensions)
        w, h = d.width / 2, d.depth / 2
        return [PolygonPart([(-w, -h), (w, -h), (w, h), (-w, h)])]
