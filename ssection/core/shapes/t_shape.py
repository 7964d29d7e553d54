
from ssection.core.preprocessing.dimensions import Dimensions, as_dimensions
from ssection.core.preprocessing.geometry import PolygonPart
from ssection.core.shapes.base import (
    ShapeFamily, ShapeInput, ShapeType, composite_properties
)
from ssection.core.solution.composite import Rectangle


class TShape(ShapeFamily):
    """T-section with the flange on top and the web centred below it.
    Flange and web thickness default to 20."""

    type = ShapeType.T_SHAPE
    label = 'T-Shape'
    initial_dimensions = Dimensions(
        depth=200, width=200, thickness=20, thickness_web=20
    )
    inputs = (
        ShapeInput('Depth (d)', 'depth'),
        ShapeInput('Flange Width (b)', 'width'),
        ShapeInput('Flange Thickness (tf)', 'thickness'),
        ShapeInput('Web Thickness (tw)', 'thickness_web'),
    )

    def calculate(self, dimensions=None, parts=None):
        d = as_dimensions(dimensions, self.initial_dimensions)
        tf, tw = d.get('thickness', 20), d.get('thickness_web', 20)
        h_web = d.depth - tf
        z = max(d.width, tw) / 2
        return composite_properties(
            [
                Rectangle(tw, h_web, h_web / 2, z),
                Rectangle(d.width, tf, h_web + tf / 2, z),
            ],
            depth=d.depth, width=2 * z
        )

    def to_parts(self, dimensions=None):
        d = as_dimensions(dimensions, self.initial_dimensions)
        tf, tw = d.get('thickness', 20), d.get('thickness_web', 20)
        b, w, h = d.width / 2, tw / 2, d.depth / 2
        return [PolygonPart([
            (-b, -h), (b, -h), (b, -h + tf), (w, -h + tf),
            (w, h), (-w, h), (-w, -h + tf), (-b, -h + tf),
        ])]
