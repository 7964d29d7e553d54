
from ssection.core.preprocessing.dimensions import Dimensions, as_dimensions
from ssection.core.preprocessing.geometry import PolygonPart
from ssection.core.shapes.base import (
    ShapeFamily, ShapeInput, ShapeType, composite_properties
)
from ssection.core.solution.composite import Rectangle


class ChannelShape(ShapeFamily):
    r"""
    Channel (C-section) with the web on the left.

    Decomposed into the full-depth web :math:`t_w \times d` and two flanges
    :math:`(b - t_w) \times t_f`. Flange and web thickness default to 10.
    """

    type = ShapeType.CHANNEL
    label = 'Channel'
    initial_dimensions = Dimensions(
        depth=200, width=100, thickness=10, thickness_web=10
    )
    inputs = (
        ShapeInput('Depth (d)', 'depth'),
        ShapeInput('Flange Width (bf)', 'width'),
        ShapeInput('Flange Thickness (tf)', 'thickness'),
        ShapeInput('Web Thickness (tw)', 'thickness_web'),
    )

    def calculate(self, dimensions=None, parts=None):
        d = as_dimensions(dimensions, self.initial_dimensions)
        h = d.depth
        tf, tw = d.get('thickness', 10), d.get('thickness_web', 10)
        flange_w = d.width - tw
        z_flange = tw + flange_w / 2
        return composite_properties(
            [
                Rectangle(tw, h, h / 2, tw / 2),
                Rectangle(flange_w, tf, h - tf / 2, z_flange),
                Rectangle(flange_w, tf, tf / 2, z_flange),
            ],
            depth=h, width=max(d.width, tw)
        )

    def to_parts(self, dimensions=None):
        d = as_dimensions(dimensions, self.initial_dimensions)
        tf, tw = d.get('thickness', 10), d.get('thickness_web', 10)
        b, h = d.width / 2, d.depth / 2
        return [PolygonPart([
            (b, -h), (-b, -h), (-b, h), (b, h),
            (b, h - tf), (-b + tw, h - tf), (-b + tw, -h + tf), (b, -h + tf),
        ])]
