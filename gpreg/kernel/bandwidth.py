# gpreg/kernel/bandwidth.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Bandwidth heuristics for the squared-exponential kernel.
"""
import gpreg.num as gnp
from gpreg.config import get_logger
from gpreg.errors import DegenerateBandwidthError
from .squared_exponential import sqdist

_logger = get_logger()


def median_heuristic(xi):
    """Median of the full (n, n) matrix of squared distances.

    .. math::
        \\sigma^2 = \\mathrm{median}_{i, j} \\|x_i - x_j\\|^2,
        \\quad 1 \\le i, j \\le n

    Parameters
    ----------
    xi : array_like, shape (n, d)
        Training points.

    Returns
    -------
    sigmasq : float

    Raises
    ------
    DegenerateBandwidthError
        If xi is empty or the median is not positive, e.g. when all
        points are identical.

    Notes
    -----
    The n zeros of the diagonal enter the median, which shifts it
    towards smaller distances compared with the median over distinct
    pairs (see :func:`upper_triangle_median_heuristic`). This is
    probably not intended, but it is the convention kept here so that
    bandwidths are reproducible.
    """
    D = sqdist(xi)
    if D.size == 0:
        raise DegenerateBandwidthError("Cannot compute a bandwidth from no points")
    sigmasq = float(gnp.median(D))
    _logger.debug("median heuristic: n=%d, sigma^2=%g", D.shape[0], sigmasq)
    if not sigmasq > 0.0:
        raise DegenerateBandwidthError(
            f"Median heuristic gave sigma^2={sigmasq}; "
            "the training points are (mostly) identical"
        )
    return sigmasq


def upper_triangle_median_heuristic(xi):
    """Median of the squared distances over distinct pairs i < j."""
    D = sqdist(xi)
    iu = gnp.triu_indices(D.shape[0], k=1)
    if iu[0].size == 0:
        raise DegenerateBandwidthError("At least two points are needed")
    sigmasq = float(gnp.median(D[iu]))
    if not sigmasq > 0.0:
        raise DegenerateBandwidthError(
            f"Median heuristic gave sigma^2={sigmasq}; "
            "the training points are (mostly) identical"
        )
    return sigmasq
