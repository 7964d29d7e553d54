
from typing import Tuple

from ssection.core.preprocessing.dimensions import Dimensions, as_dimensions
from ssection.core.preprocessing.geometry import PolygonPart
from ssection.core.shapes.base import (
    ShapeFamily, ShapeInput, ShapeType, composite_properties
)
from ssection.core.solution.composite import Rectangle


class HollowRectangularShape(ShapeFamily):
    r"""
    Rectangular hollow section: outer rectangle :math:`b \times d` minus a
    concentric opening.

    The wall thickness is clamped to :math:`\min(t, b/2, d/2)`. A wall of
    zero or less leaves the section solid, a wall of half the width or
    depth leaves no opening.

    Examples
    --------
    >>> from ssection.core.shapes import HollowRectangularShape
    >>> HollowRectangularShape().calculate(
    >>>     {'depth': 200, 'width': 100, 'thickness': 10}).area
    5600.0
    """

    type = ShapeType.HOLLOW_RECTANGULAR
    label = 'Hollow Rectangular'
    initial_dimensions = Dimensions(depth=200, width=100, thickness=10)
    inputs = (
        ShapeInput('Depth (d)', 'depth'),
        ShapeInput('Width (b)', 'width'),
        ShapeInput('Thickness (t)', 'thickness'),
    )

    @staticmethod
    def opening(d: Dimensions) -> Tuple[float, float]:
        """Width and depth of the opening."""
        wall = min(d.get('thickness'), d.width / 2, d.depth / 2)
        if wall <= 0:
            return 0.0, 0.0
        return d.width - 2 * wall, d.depth - 2 * wall

    def calculate(self, dimensions=None, parts=None):
        d = as_dimensions(dimensions, self.initial_dimensions)
        inner_w, inner_h = self.opening(d)
        return composite_properties(
            [
                Rectangle(d.width, d.depth, d.depth / 2, d.width / 2),
                Rectangle(inner_w, inner_h, d.depth / 2, d.width / 2,
                          positive=False),
            ],
            depth=d.depth, width=d.width
        )

    def to_parts(self, dimensions=None):
        d = as_dimensions(dimensions, self.initial_dimensions)
        w, h = d.width / 2, d.depth / 2
        parts = [PolygonPart([(-w, -h), (w, -h), (w, h), (-w, h)])]
        inner_w, inner_h = self.opening(d)
        if inner_w > 0 and inner_h > 0:
            iw, ih = inner_w / 2, inner_h / 2
            parts.append(PolygonPart(
                [(-iw, -ih), (-iw, ih), (iw, ih), (iw, -ih)], positive=False
            ))
        return parts
