import numpy as np


def rotation_matrix(angle: float):
    r"""Create a 2x2 rotation matrix.

    Parameters
    ----------
    angle : :any:`float`
        Rotation angle in degrees, counter-clockwise for a y-up axis system.

    Returns
    -------
    :any:`numpy.array`
        A 2x2 matrix rotating column vectors ``(x, y)`` about the origin.

    Notes
    -----
    The resulting matrix has the form

    .. math::
        \left(\begin{array}{cc}
        \cos(\alpha) & -\sin(\alpha) \\
        \sin(\alpha) & \cos(\alpha)
        \end{array}\right).

    Examples
    --------
    >>> import numpy
    >>> from ssection.core.utils import rotation_matrix
    >>> rotation_matrix(90) @ numpy.array([1, 0])
    array([6.123234e-17, 1.000000e+00])
    """
    alpha = np.radians(angle)
    return np.array([
        [np.cos(alpha), -np.sin(alpha)],
        [np.sin(alpha), np.cos(alpha)],
    ])


def normalize_angle(angle: float) -> float:
    r"""Wrap an angle in radians into the half-open interval
    :math:`(-\pi, \pi]`.

    Examples
    --------
    >>> import numpy
    >>> from ssection.core.utils import normalize_angle
    >>> round(normalize_angle(3 * numpy.pi / 2), 6)
    -1.570796
    >>> round(normalize_angle(-numpy.pi), 6)
    3.141593
    """
    while angle <= -np.pi:
        angle += 2 * np.pi
    while angle > np.pi:
        angle -= 2 * np.pi
    return angle


def safe_div(numerator: float, denominator: float) -> float:
    """Divide, returning ``0.0`` instead of failing for a zero denominator."""
    if denominator == 0:
        return 0.0
    return float(numerator / denominator)
