
from dataclasses import asdict, dataclass, fields
from numbers import Real
from typing import Mapping, Optional


_CAMEL_CASE = {
    'widthBottom': 'width_bottom',
    'thicknessWeb': 'thickness_web',
    'thicknessFlangeTop': 'thickness_flange_top',
    'thicknessFlangeBottom': 'thickness_flange_bottom',
    'filletRadius': 'fillet_radius',
}


@dataclass(frozen=True)
class Dimensions:
    """
    Scalar parameters of a standard shape family.

    Each family reads its own subset of the fields; the remaining ones are
    ignored. Optional fields left at ``None`` (or set to a value of zero or
    less) are replaced by the family's documented fall-back.

    Parameters
    ----------
    depth : float
        Overall depth (vertical extent).
    width : float
        Overall width, the top flange width of an I-shape, the flange width
        of a T-shape or channel, or the horizontal leg of an angle.
    width_bottom : float, optional
        Bottom flange width of an I-shape.
    thickness : float, optional
        Wall thickness (hollow rectangle, angle) or flange thickness
        (T-shape, channel).
    thickness_web : float, optional
        Web thickness (I-shape, T-shape, channel).
    thickness_flange_top, thickness_flange_bottom : float, optional
        Flange thicknesses of an I-shape.
    radius : float, optional
        Radius of a circle.
    fillet_radius : float, optional
        Root fillet radius. Only kept for display, the properties are
        computed without fillets.

    Examples
    --------
    >>> from ssection.core.preprocessing.dimensions import Dimensions
    >>> Dimensions.from_dict({'depth': 200, 'width': 100,
    >>>                       'thicknessWeb': 8}).thickness_web
    8.0
    """
    depth: float = 0.0
    width: float = 0.0
    width_bottom: Optional[float] = None
    thickness: Optional[float] = None
    thickness_web: Optional[float] = None
    thickness_flange_top: Optional[float] = None
    thickness_flange_bottom: Optional[float] = None
    radius: Optional[float] = None
    fillet_radius: Optional[float] = None

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            if isinstance(value, bool) or not isinstance(value, Real):
                raise TypeError(
                    f"Dimension '{f.name}' must be numeric, got {value!r}."
                )
            object.__setattr__(self, f.name, float(value))

    @classmethod
    def from_dict(cls, data: Mapping) -> 'Dimensions':
        """Build dimensions from snake_case or camelCase keys; unknown keys
        are ignored."""
        known = {f.name for f in fields(cls)}
        kwargs = {}
        for key, value in data.items():
            name = _CAMEL_CASE.get(key, key)
            if name in known:
                kwargs[name] = value
        return cls(**kwargs)

    def to_dict(self) -> dict:
        return {k: v for k, v in asdict(self).items() if v is not None}

    def get(self, name: str, fallback: float = 0.0) -> float:
        """Return the field ``name`` or ``fallback`` when it is missing or
        not positive."""
        value = getattr(self, name)
        if value is None or value <= 0:
            return fallback
        return value


def as_dimensions(value, default: Optional[Dimensions] = None) \
        -> Dimensions:
    """Coerce ``value`` into :any:`Dimensions`.

    Accepts an existing record, a mapping with snake_case or camelCase
    keys, or ``None`` (which yields ``default`` or an all-zero record).

    Raises
    ------
    TypeError
        If ``value`` is of any other type.
    """
    if value is None:
        return default if default is not None else Dimensions()
    if isinstance(value, Dimensions):
        return value
    if isinstance(value, Mapping):
        return Dimensions.from_dict(value)
    raise TypeError(
        f"dimensions must be a Dimensions instance or a mapping, got "
        f"{type(value).__name__}."
    )
