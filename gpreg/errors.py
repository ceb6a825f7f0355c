# gpreg/errors.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Exceptions raised by gpreg.

All of them are unrecoverable for the regression call that raised
them: no partial result is returned.
"""
from numpy.linalg import LinAlgError


class GPRegError(Exception):
    """Base class for gpreg errors."""


class DegenerateBandwidthError(GPRegError, ValueError):
    """The bandwidth sigma^2 is not strictly positive.

    Typically raised by the median heuristic when (most of) the
    training points are identical.
    """


class NumericalError(GPRegError, LinAlgError):
    """A factorization failed or produced an inconsistent result.

    Raised when the regularized kernel matrix is not positive definite
    (duplicate points with zero noise variance), or when a posterior
    variance is negative beyond tolerance.
    """


class DimensionMismatchError(GPRegError, ValueError):
    """Inputs with incompatible shapes."""
