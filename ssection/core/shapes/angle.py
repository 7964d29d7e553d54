
from ssection.core.preprocessing.dimensions import Dimensions, as_dimensions
from ssection.core.preprocessing.geometry import PolygonPart
from ssection.core.shapes.base import (
    ShapeFamily, ShapeInput, ShapeType, composite_properties
)
from ssection.core.solution.composite import Rectangle


class AngleShape(ShapeFamily):
    r"""
    Equal or unequal angle with the heel at the bottom-left corner.

    The vertical leg :math:`t \times (d - t)` stands on the full-width
    horizontal leg :math:`b \times t`. The section is unsymmetric, so the
    product of inertia :math:`I_{zy}` does not vanish and the principal
    axes are inclined. The thickness defaults to 10.

    Examples
    --------
    >>> from ssection.core.shapes import AngleShape
    >>> props = AngleShape().calculate(
    >>>     {'depth': 150, 'width': 100, 'thickness': 10})
    >>> props.area, props.moment_inertia.izy < 0
    (2400.0, True)
    """

    type = ShapeType.ANGLE
    label = 'Angle (L-Shape)'
    initial_dimensions = Dimensions(depth=150, width=100, thickness=10)
    inputs = (
        ShapeInput('Leg A Length (d)', 'depth'),
        ShapeInput('Leg B Length (b)', 'width'),
        ShapeInput('Thickness (t)', 'thickness'),
    )

    def calculate(self, dimensions=None, parts=None):
        d = as_dimensions(dimensions, self.initial_dimensions)
        h, b, t = d.depth, d.width, d.get('thickness', 10)
        return composite_properties(
            [
                Rectangle(t, h - t, t + (h - t) / 2, t / 2),
                Rectangle(b, t, t / 2, b / 2),
            ],
            depth=h, width=max(b, t)
        )

    def to_parts(self, dimensions=None):
        d = as_dimensions(dimensions, self.initial_dimensions)
        t = d.get('thickness', 10)
        b, h = d.width / 2, d.depth / 2
        return [PolygonPart([
            (-b, h), (b, h), (b, h - t), (-b + t, h - t), (-b + t, -h),
            (-b, -h),
        ])]
