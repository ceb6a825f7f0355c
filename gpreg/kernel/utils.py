# gpreg/kernel/utils.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
import math
import gpreg.num as gnp
from gpreg.errors import DegenerateBandwidthError, DimensionMismatchError


def as_points(x, name="x"):
    """Convert x to a 2D (n, d) backend array of points."""
    x_ = gnp.asdouble(x)
    if x_.ndim != 2:
        raise DimensionMismatchError(
            f"{name} should be a 2D array of shape (n, d), got shape {x_.shape}"
        )
    return x_


def check_same_dim(x, y, xname="x", yname="y"):
    if x.shape[1] != y.shape[1]:
        raise DimensionMismatchError(
            f"{xname} and {yname} must have the same number of columns "
            f"({x.shape[1]} != {y.shape[1]})"
        )


def check_sigmasq(sigmasq):
    """Return sigmasq as a float; raise if it is not a positive finite number."""
    s = float(sigmasq)
    if not s > 0.0 or not math.isfinite(s):
        raise DegenerateBandwidthError(
            f"Bandwidth sigma^2 must be positive and finite, got {s}"
        )
    return s
