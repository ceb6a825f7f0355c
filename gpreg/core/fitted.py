# gpreg/core/fitted.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Training-side state of a GP regression.
"""
import gpreg.num as gnp
from gpreg.config import get_config, get_logger
from gpreg.errors import DimensionMismatchError
from gpreg.kernel import median_heuristic, squared_exponential_covariance
from gpreg.kernel.utils import as_points, check_same_dim, check_sigmasq
from . import linalg

_logger = get_logger()


class FittedGP:
    """Factorization of a GP conditioned on training data.

    Holds everything a predictor needs, computed once per training
    set: the training points, the bandwidth, the noise variance, the
    upper Cholesky factor C of K + noise_variance * I and the vector
    alpha = (K + noise_variance * I)^{-1} zi.

    Instances are built with :meth:`fit` and are not modified
    afterwards. The training data are stored as read-only copies, so
    later changes to the arrays passed to :meth:`fit` have no effect.

    Attributes
    ----------
    xi : ndarray, shape (n, d)
    zi : ndarray, shape (n,)
    sigmasq : float
    noise_variance : float
    method : {'direct', 'vectorized'}
    C : ndarray, shape (n, n)
    alpha : ndarray, shape (n,)
    """

    def __init__(self, xi, zi, sigmasq, noise_variance, method, C, alpha):
        self.xi = xi
        self.zi = zi
        self.sigmasq = sigmasq
        self.noise_variance = noise_variance
        self.method = method
        self.C = C
        self.alpha = alpha

    @classmethod
    def fit(cls, xi, zi, noise_variance, sigmasq=None, method=None):
        """Factorize the regularized kernel matrix of (xi, zi).

        Parameters
        ----------
        xi : array_like, shape (n, d)
            Training points.
        zi : array_like, shape (n,) or (n, 1)
            Training outputs.
        noise_variance : float
            Noise variance sigma_n^2, must be non-negative.
        sigmasq : float, optional
            Bandwidth. If None, the median heuristic is applied to xi.
        method : {'direct', 'vectorized'}, optional
            Kernel computation strategy (default from the config).

        Returns
        -------
        FittedGP

        Raises
        ------
        DimensionMismatchError, DegenerateBandwidthError, NumericalError
        """
        if method is None:
            method = get_config().kernel_method
        xi_, zi_ = _check_training_data(xi, zi)
        noise_variance = float(noise_variance)
        if noise_variance < 0.0:
            raise ValueError(f"noise_variance must be non-negative, got {noise_variance}")

        if sigmasq is None:
            sigmasq = median_heuristic(xi_)
        sigmasq = check_sigmasq(sigmasq)

        K = squared_exponential_covariance(xi_, None, sigmasq, method=method)
        C = linalg.cholesky_upper(linalg.regularized_kernel(K, noise_variance))
        alpha = linalg.solve_from_cholesky(C, zi_)
        _logger.debug(
            "fitted GP: n=%d, d=%d, sigma^2=%g, noise variance=%g, method=%s",
            xi_.shape[0], xi_.shape[1], sigmasq, noise_variance, method,
        )
        return cls(xi_, zi_, sigmasq, noise_variance, method, C, alpha)

    def __repr__(self):
        return (
            f"<gpreg.core.FittedGP n={self.xi.shape[0]} d={self.xi.shape[1]} "
            f"sigmasq={self.sigmasq!r} noise_variance={self.noise_variance!r}>"
        )

    @property
    def n(self):
        return self.xi.shape[0]

    def check_test_points(self, xt):
        """Return xt as a (m, d) array with the dimension of the training points."""
        xt_ = as_points(xt, "xt")
        check_same_dim(self.xi, xt_, "xi", "xt")
        return xt_

    def cross_covariance(self, xt, method=None):
        """Kernel matrix K(xt, xi), shape (m, n)."""
        return squared_exponential_covariance(
            xt, self.xi, self.sigmasq, method=method or self.method
        )

    def prior_covariance(self, xt, method=None):
        """Kernel matrix K(xt, xt), shape (m, m)."""
        return squared_exponential_covariance(
            xt, None, self.sigmasq, method=method or self.method
        )


def _check_training_data(xi, zi):
    # private read-only copies, C and alpha are only valid for these values
    xi_ = gnp.array(as_points(xi, "xi"), dtype=gnp.float64)
    zi_ = gnp.array(zi, dtype=gnp.float64)
    if zi_.ndim == 2:
        if zi_.shape[1] != 1:
            raise DimensionMismatchError("zi should only have one column if it's a 2D array")
        zi_ = zi_.reshape(-1)
    elif zi_.ndim != 1:
        raise DimensionMismatchError("zi should be 1D or a 2D column array")
    if xi_.shape[0] != zi_.shape[0]:
        raise DimensionMismatchError(
            f"xi and zi must have the same number of rows ({xi_.shape[0]} != {zi_.shape[0]})"
        )
    if xi_.shape[0] == 0:
        raise DimensionMismatchError("At least one training point is needed")
    xi_.flags.writeable = False
    zi_.flags.writeable = False
    return xi_, zi_
