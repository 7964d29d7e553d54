
from functools import cached_property
from typing import Tuple

import numpy as np

from ssection.core.solution.scan_line import SlicedSection


class PlasticModulusSolver(SlicedSection):
    r"""
    Plastic section moduli of solid and hole polygons by slicing.

    For each bending direction the section is cut into ``steps`` slices
    across the solid bounding box, using the same interval algebra as
    :any:`ScanLineIntegrator`:

    1. the net material width on the slice's mid-line times the slice
       thickness gives the slice area :math:`A_i`;
    2. accumulating :math:`A_i` in scan order, the position where the
       running total reaches :math:`A / 2` is the plastic neutral axis
       :math:`p` (interpolated linearly inside the slice that crosses it);
    3. :math:`Z = \sum_i |v_i - p| \, A_i`.

    Bending about the horizontal axis (``zz``) scans horizontal lines
    through ``y``; bending about the vertical axis (``zy``) scans vertical
    lines through ``x``.

    Examples
    --------
    >>> import numpy as np
    >>> from ssection.core.solution.plastic import PlasticModulusSolver
    >>> rect = np.array([(0, 0), (100, 0), (100, 200), (0, 200)])
    >>> round(PlasticModulusSolver([rect]).zz)
    1000000
    """

    def _equal_area_axis(self, axis: int) -> Tuple[float, float]:
        positions, step, rows, starts, ends = self.strips(axis)
        if not len(rows):
            return 0.0, 0.0

        slice_area = np.bincount(rows, weights=ends - starts,
                                 minlength=len(positions)) * step
        total = float(slice_area.sum())
        if total <= 0:
            self.logger.debug("No material in scan direction %d.", axis)
            return 0.0, 0.0

        cumulative = np.cumsum(slice_area)
        k = int(np.searchsorted(cumulative, total / 2))
        k = min(k, len(positions) - 1)
        before = cumulative[k] - slice_area[k]
        fraction = ((total / 2 - before) / slice_area[k]
                    if slice_area[k] > 0 else 0.5)
        pna = float(positions[k] - step / 2 + fraction * step)

        modulus = float(np.sum(np.abs(positions - pna) * slice_area))
        self.logger.debug(
            "Plastic neutral axis at %g (scan axis %d), Z = %g.",
            pna, axis, modulus
        )
        return pna, modulus

    @cached_property
    def _horizontal(self) -> Tuple[float, float]:
        return self._equal_area_axis(axis=1)

    @cached_property
    def _vertical(self) -> Tuple[float, float]:
        return self._equal_area_axis(axis=0)

    @property
    def neutral_axis_z(self) -> float:
        """Drawing ``y`` coordinate of the horizontal plastic neutral
        axis."""
        return self._horizontal[0]

    @property
    def neutral_axis_y(self) -> float:
        """Drawing ``x`` coordinate of the vertical plastic neutral axis."""
        return self._vertical[0]

    @property
    def zz(self) -> float:
        """Plastic modulus for bending about the horizontal axis."""
        return self._horizontal[1]

    @property
    def zy(self) -> float:
        """Plastic modulus for bending about the vertical axis."""
        return self._vertical[1]
