
from typing import Dict, Union

from ssection.core.shapes.angle import AngleShape
from ssection.core.shapes.base import ShapeFamily, ShapeType
from ssection.core.shapes.channel import ChannelShape
from ssection.core.shapes.circular import CircularShape
from ssection.core.shapes.custom import CustomShape
from ssection.core.shapes.hollow_rectangular import HollowRectangularShape
from ssection.core.shapes.i_shape import IShape
from ssection.core.shapes.rectangular import RectangularShape
from ssection.core.shapes.t_shape import TShape


SHAPE_REGISTRY: Dict[ShapeType, ShapeFamily] = {
    family.type: family for family in (
        RectangularShape(),
        HollowRectangularShape(),
        CircularShape(),
        IShape(),
        TShape(),
        ChannelShape(),
        AngleShape(),
        CustomShape(),
    )
}


def get_shape(shape_type: Union[ShapeType, str]) -> ShapeFamily:
    """Look up the family for ``shape_type``.

    Parameters
    ----------
    shape_type : :any:`ShapeType` or str
        Enum member or its value, e.g. ``'I-Shape'``.

    Returns
    -------
    :any:`ShapeFamily`
        The registered family, or the rectangular family for a valid
        identifier without one.

    Raises
    ------
    ValueError
        If ``shape_type`` is not a known identifier.
    """
    return SHAPE_REGISTRY.get(
        ShapeType(shape_type), SHAPE_REGISTRY[ShapeType.RECTANGULAR]
    )
