
from ssection.core.defaults import ARC_SEGMENTS, CIRCLE_SEGMENTS, SCAN_STEPS
from ssection.core.preprocessing.dimensions import Dimensions
from ssection.core.shapes.base import ShapeFamily, ShapeType
from ssection.core.solution.solver import SectionSolver


class CustomShape(ShapeFamily):
    """Free-form section drawn from solid and hole parts. There is no
    closed form, every calculation runs through :any:`SectionSolver`."""

    type = ShapeType.CUSTOM
    label = 'Custom Shape'
    initial_dimensions = Dimensions(depth=100, width=100)

    def calculate(self, dimensions=None, parts=None, steps=SCAN_STEPS,
                  arc_segments=ARC_SEGMENTS, circle_segments=CIRCLE_SEGMENTS,
                  debug=False):
        return SectionSolver(
            list(parts or []), steps=steps, arc_segments=arc_segments,
            circle_segments=circle_segments, debug=debug
        ).properties

    def to_parts(self, dimensions=None):
        return []
