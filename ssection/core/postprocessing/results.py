
from dataclasses import dataclass, field

from ssection.core.logger_mixin import table_rows


@dataclass(frozen=True)
class Centroid:
    """Centroid as distances from the bottom (``y``) and left (``z``)
    extreme fibres of the solid material."""
    y: float = 0.0
    z: float = 0.0


@dataclass(frozen=True)
class MomentsOfInertia:
    """Second moments of area about the centroidal axes.

    ``iz`` is taken about the horizontal axis, ``iy`` about the vertical
    axis and ``izy`` is the product of inertia for a y-up axis system.
    """
    iz: float = 0.0
    iy: float = 0.0
    izy: float = 0.0


@dataclass(frozen=True)
class PrincipalMoments:
    """Major and minor principal moments and the angle in degrees from the
    horizontal axis to the major axis."""
    i1: float = 0.0
    i2: float = 0.0
    angle: float = 0.0


@dataclass(frozen=True)
class SectionModulus:
    """Elastic section moduli for the top, bottom, right and left extreme
    fibres."""
    szt: float = 0.0
    szb: float = 0.0
    syt: float = 0.0
    syb: float = 0.0


@dataclass(frozen=True)
class RadiiOfGyration:
    rz: float = 0.0
    ry: float = 0.0


@dataclass(frozen=True)
class PlasticModulus:
    """Plastic section moduli for bending about the horizontal (``zz``) and
    vertical (``zy``) axis."""
    zz: float = 0.0
    zy: float = 0.0


@dataclass(frozen=True)
class GeometricProperties:
    r"""
    Complete set of cross-section properties.

    All fields are always present. Degenerate sections (no material,
    zero-extent bounding box) carry zeros.

    Parameters
    ----------
    area : float
        Net material area.
    centroid : :any:`Centroid`
        Distances of the centroid from the bottom and left fibres.
    moment_inertia : :any:`MomentsOfInertia`
        Centroidal second moments and product of inertia.
    principal_moments : :any:`PrincipalMoments`
        Principal moments and orientation.
    section_modulus : :any:`SectionModulus`
        Elastic section moduli.
    radius_gyration : :any:`RadiiOfGyration`
        :math:`r = \sqrt{I / A}` for both axes.
    plastic_modulus : :any:`PlasticModulus`
        First moments of area about the plastic neutral axes.

    Examples
    --------
    >>> from ssection.core import calculate_properties, ShapeType
    >>> props = calculate_properties(ShapeType.RECTANGULAR,
    >>>                              {'depth': 200, 'width': 100})
    >>> round(props.to_dict()['momentInertia']['Iz'], 2)
    66666666.67
    """
    area: float = 0.0
    centroid: Centroid = field(default_factory=Centroid)
    moment_inertia: MomentsOfInertia = field(default_factory=MomentsOfInertia)
    principal_moments: PrincipalMoments = field(
        default_factory=PrincipalMoments)
    section_modulus: SectionModulus = field(default_factory=SectionModulus)
    radius_gyration: RadiiOfGyration = field(default_factory=RadiiOfGyration)
    plastic_modulus: PlasticModulus = field(default_factory=PlasticModulus)

    def to_dict(self) -> dict:
        """Return the record in the camelCase layout consumed by the
        editor."""
        mi, pm = self.moment_inertia, self.principal_moments
        sm, rg, pl = (self.section_modulus, self.radius_gyration,
                      self.plastic_modulus)
        return {
            'area': self.area,
            'centroid': {'y': self.centroid.y, 'z': self.centroid.z},
            'momentInertia': {'Iz': mi.iz, 'Iy': mi.iy, 'Izy': mi.izy},
            'principalMoments': {'I1': pm.i1, 'I2': pm.i2,
                                 'angle': pm.angle},
            'sectionModulus': {'Szt': sm.szt, 'Szb': sm.szb,
                               'Syt': sm.syt, 'Syb': sm.syb},
            'radiusGyration': {'rz': rg.rz, 'ry': rg.ry},
            'plasticModulus': {'Zz': pl.zz, 'Zy': pl.zy},
        }

    def rows(self):
        """Yield ``(symbol, value, unit)`` for every quantity."""
        yield 'A', self.area, 'mm²'
        yield 'y_c', self.centroid.y, 'mm'
        yield 'z_c', self.centroid.z, 'mm'
        yield 'Iz', self.moment_inertia.iz, 'mm⁴'
        yield 'Iy', self.moment_inertia.iy, 'mm⁴'
        yield 'Izy', self.moment_inertia.izy, 'mm⁴'
        yield 'I1', self.principal_moments.i1, 'mm⁴'
        yield 'I2', self.principal_moments.i2, 'mm⁴'
        yield 'α', self.principal_moments.angle, 'deg'
        yield 'Szt', self.section_modulus.szt, 'mm³'
        yield 'Szb', self.section_modulus.szb, 'mm³'
        yield 'Syt', self.section_modulus.syt, 'mm³'
        yield 'Syb', self.section_modulus.syb, 'mm³'
        yield 'rz', self.radius_gyration.rz, 'mm'
        yield 'ry', self.radius_gyration.ry, 'mm'
        yield 'Zz', self.plastic_modulus.zz, 'mm³'
        yield 'Zy', self.plastic_modulus.zy, 'mm³'

    def table(self, decimals: int = 3) -> str:
        """Grid table of all quantities, units assume millimetres."""
        return table_rows(self.rows(), ['Property', 'Value', 'Unit'],
                          decimals=decimals)
