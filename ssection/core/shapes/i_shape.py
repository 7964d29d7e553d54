
from ssection.core.preprocessing.dimensions import Dimensions, as_dimensions
from ssection.core.preprocessing.geometry import PolygonPart
from ssection.core.shapes.base import (
    ShapeFamily, ShapeInput, ShapeType, composite_properties
)
from ssection.core.solution.composite import Rectangle


class IShape(ShapeFamily):
    r"""
    Doubly or singly symmetric I-section built from three rectangles.

    Both flanges and the web are centred on the widest flange. Missing
    flange thicknesses default to 10, a missing web thickness to 6 and a
    missing bottom width to the top width. The root fillet radius is only
    carried for display.

    Examples
    --------
    >>> from ssection.core.shapes import IShape
    >>> props = IShape().calculate({
    >>>     'depth': 300, 'width': 150, 'thicknessFlangeTop': 10,
    >>>     'thicknessFlangeBottom': 10, 'thicknessWeb': 6})
    >>> props.area
    4680.0
    """

    type = ShapeType.I_SHAPE
    label = 'I-Shape'
    initial_dimensions = Dimensions(
        depth=203.2, width=203.2, width_bottom=203.2, thickness_web=7.32,
        thickness_flange_top=11, thickness_flange_bottom=11,
        fillet_radius=10.2
    )
    inputs = (
        ShapeInput('Depth (d)', 'depth'),
        ShapeInput('Top Width (b_top)', 'width'),
        ShapeInput('Top Thickness (t_top)', 'thickness_flange_top'),
        ShapeInput('Bottom Width (b_bot)', 'width_bottom'),
        ShapeInput('Bottom Thickness (t_bot)', 'thickness_flange_bottom'),
        ShapeInput('Web Thickness (t_w)', 'thickness_web'),
        ShapeInput('Fillet Radius (r)', 'fillet_radius'),
    )

    @staticmethod
    def _plates(d: Dimensions):
        return (
            d.width,
            d.get('width_bottom', d.width),
            d.get('thickness_flange_top', 10),
            d.get('thickness_flange_bottom', 10),
            d.get('thickness_web', 6),
        )

    def calculate(self, dimensions=None, parts=None):
        d = as_dimensions(dimensions, self.initial_dimensions)
        w_top, w_bot, tf_top, tf_bot, tw = self._plates(d)
        h_web = d.depth - tf_top - tf_bot
        z = max(w_top, w_bot, tw) / 2
        return composite_properties(
            [
                Rectangle(w_bot, tf_bot, tf_bot / 2, z),
                Rectangle(tw, h_web, tf_bot + h_web / 2, z),
                Rectangle(w_top, tf_top, d.depth - tf_top / 2, z),
            ],
            depth=d.depth, width=2 * z
        )

    def to_parts(self, dimensions=None):
        d = as_dimensions(dimensions, self.initial_dimensions)
        w_top, w_bot, tf_top, tf_bot, tw = self._plates(d)
        wt, wb, w, h = w_top / 2, w_bot / 2, tw / 2, d.depth / 2
        return [PolygonPart([
            (wb, h), (wb, h - tf_bot), (w, h - tf_bot),
            (w, -h + tf_top), (wt, -h + tf_top), (wt, -h),
            (-wt, -h), (-wt, -h + tf_top), (-w, -h + tf_top),
            (-w, h - tf_bot), (-wb, h - tf_bot), (-wb, h),
        ])]
