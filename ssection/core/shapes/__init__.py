
from ssection.core.shapes.angle import AngleShape
from ssection.core.shapes.base import (
    ShapeFamily, ShapeInput, ShapeType, composite_properties
)
from ssection.core.shapes.channel import ChannelShape
from ssection.core.shapes.circular import CircularShape
from ssection.core.shapes.custom import CustomShape
from ssection.core.shapes.hollow_rectangular import HollowRectangularShape
from ssection.core.shapes.i_shape import IShape
from ssection.core.shapes.rectangular import RectangularShape
from ssection.core.shapes.registry import SHAPE_REGISTRY, get_shape
from ssection.core.shapes.t_shape import TShape


__all__ = [
    'AngleShape',
    'ChannelShape',
    'CircularShape',
    'composite_properties',
    'CustomShape',
    'get_shape',
    'HollowRectangularShape',
    'IShape',
    'RectangularShape',
    'SHAPE_REGISTRY',
    'ShapeFamily',
    'ShapeInput',
    'ShapeType',
    'TShape',
]
