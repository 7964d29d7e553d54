
import abc
from enum import Enum
from typing import List, NamedTuple, Optional, Sequence, Tuple

from ssection.core.postprocessing.results import GeometricProperties
from ssection.core.preprocessing.dimensions import Dimensions
from ssection.core.preprocessing.geometry import Part
from ssection.core.solution.composite import Rectangle, RectangleComposite
from ssection.core.solution.properties import section_properties


class ShapeType(str, Enum):
    """Identifiers of the shape families, as used by the editor."""
    RECTANGULAR = 'Rectangular'
    HOLLOW_RECTANGULAR = 'Hollow Rectangular'
    CIRCULAR = 'Circular'
    I_SHAPE = 'I-Shape'
    T_SHAPE = 'T-Shape'
    CHANNEL = 'Channel'
    ANGLE = 'Angle'
    CUSTOM = 'Custom Shape'


class ShapeInput(NamedTuple):
    """One entry of a family's parameter form."""
    label: str
    key: str
    unit: str = 'mm'


class ShapeFamily(abc.ABC):
    """
    A parametric cross-section family.

    Standard families compute their properties in closed form from a
    :any:`Dimensions` record and export their outline as parts, so the
    numeric pipeline can take over when the section is rotated.

    Attributes
    ----------
    type : :any:`ShapeType`
        Identifier of the family.
    label : str
        Display name.
    initial_dimensions : :any:`Dimensions`
        Dimensions used when a family is selected, and when
        :py:meth:`calculate` or :py:meth:`to_parts` receive ``None``.
    inputs : tuple of :any:`ShapeInput`
        The dimension fields the family reads.
    """

    type: ShapeType
    label: str
    initial_dimensions: Dimensions = Dimensions()
    inputs: Tuple[ShapeInput, ...] = ()

    @abc.abstractmethod
    def calculate(self, dimensions=None, parts: Optional[List[Part]] = None) \
            -> GeometricProperties:
        """Return the property record for ``dimensions``."""

    @abc.abstractmethod
    def to_parts(self, dimensions=None) -> List[Part]:
        """Return the outline as parts in drawing coordinates (``y`` down),
        centred on the bounding box."""

    def __repr__(self):
        return f"{self.__class__.__name__}(type={self.type.value!r})"


def composite_properties(rectangles: Sequence[Rectangle], depth: float,
                         width: float) -> GeometricProperties:
    """Closed-form properties of an axis-aligned rectangle assembly.

    Rectangles without extent are dropped. The fibre distances refer to
    the ``width`` x ``depth`` bounding box with its origin at the
    bottom-left corner.
    """
    composite = RectangleComposite(
        [r for r in rectangles if r.width > 0 and r.height > 0]
    )
    if composite.area <= 0:
        return GeometricProperties()
    cy, cz = composite.centroid_y, composite.centroid_z
    return section_properties(
        area=composite.area,
        centroid_y=cy,
        centroid_z=cz,
        iz=composite.iz,
        iy=composite.iy,
        izy=composite.izy,
        top=depth - cy,
        bottom=cy,
        right=width - cz,
        left=cz,
        zz=composite.zz,
        zy=composite.zy,
    )
