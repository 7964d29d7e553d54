
import numpy as np

from ssection.core.postprocessing.results import PrincipalMoments


def principal_moments(iz: float, iy: float, izy: float) -> PrincipalMoments:
    r"""Eigen-decomposition of the centroidal inertia tensor.

    Parameters
    ----------
    iz : float
        Second moment about the horizontal centroidal axis.
    iy : float
        Second moment about the vertical centroidal axis.
    izy : float
        Product of inertia (y-up convention).

    Returns
    -------
    :any:`PrincipalMoments`
        Major moment ``i1``, minor moment ``i2`` and the angle in degrees
        from the horizontal axis to the major axis.

    Notes
    -----
    .. math::
        I_{1,2} = \frac{I_z + I_y}{2} \pm
        \sqrt{\left(\frac{I_z - I_y}{2}\right)^2 + I_{zy}^2}, \quad
        \alpha = \frac{1}{2} \operatorname{atan2}(-2 I_{zy}, I_z - I_y)

    The trace is preserved, :math:`I_1 + I_2 = I_z + I_y`, and
    :math:`I_1 \geq \max(I_z, I_y)`, :math:`I_2 \leq \min(I_z, I_y)`. An
    isotropic section (:math:`I_z = I_y`, :math:`I_{zy} = 0`) has the
    angle 0.

    Examples
    --------
    >>> from ssection.core.solution.principal import principal_moments
    >>> principal_moments(3.0, 1.0, 0.0)
    PrincipalMoments(i1=3.0, i2=1.0, angle=0.0)
    """
    avg = (iz + iy) / 2
    diff = (iz - iy) / 2
    r = float(np.hypot(diff, izy))
    if diff == 0 and izy == 0:
        angle = 0.0
    else:
        # adding 0.0 turns -0.0 into 0.0, which atan2 would map to -pi
        angle = float(np.degrees(
            0.5 * np.arctan2(-2 * izy + 0.0, iz - iy)
        ))
    return PrincipalMoments(i1=avg + r, i2=avg - r, angle=angle)
