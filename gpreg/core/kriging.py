# gpreg/core/kriging.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
GP posterior predictors.

All predictors share the interface ``predict(xt) -> (zpm, zpv)`` and
work from a :class:`gpreg.core.fitted.FittedGP`.

Classes
-------
BatchPredictor
    All test points at once; mean and full covariance (or variances)
    through triangular solves against K(xt, xi)ᵀ.
OnlinePredictor
    One test point at a time, reusing the Cholesky factor and alpha.
NaivePredictor
    Explicit inverse of K + noise_variance * I. Reference baseline.

Functions
---------
gp_batch, gp_completely_vectorized_noisy, gp_naive, gp_online, gp_online_vect
    Fit-and-predict in one call, with signature
    ``(xi, zi, xt, noise_variance, sigmasq=None)``.
"""
import gpreg.num as gnp
from gpreg.config import get_config, get_logger
from gpreg.errors import NumericalError
from . import linalg
from .fitted import FittedGP

_logger = get_logger()


class Predictor:
    """Base class of GP predictors.

    Parameters
    ----------
    fitted : FittedGP
    noisy : bool, optional
        If True, the noise variance is added to the posterior
        variance, which gives the predictive distribution of a noisy
        observation instead of the latent function.
    """

    def __init__(self, fitted, noisy=False):
        self.fitted = fitted
        self.noisy = noisy

    def __repr__(self):
        return f"<gpreg.core.{type(self).__name__} {self.fitted!r} noisy={self.noisy}>"

    def predict(self, xt):
        """Return the posterior mean and (co)variance at xt."""
        raise NotImplementedError

    def _noise_term(self):
        return self.fitted.noise_variance if self.noisy else 0.0


class BatchPredictor(Predictor):
    """Posterior mean and covariance for a batch of test points.

    .. math::
        m(x_t) = K_{t i} \\alpha, \\qquad
        V(x_t) = K_{t t} - K_{t i} (K_{i i} + \\sigma_n^2 I)^{-1} K_{t i}^T

    Parameters
    ----------
    fitted : FittedGP
    noisy : bool, optional
    return_type : int, optional
        Indicator for posterior variance:
          -1: return None,
           0: return variances,
           1: return full covariance (default).
    """

    def __init__(self, fitted, noisy=False, return_type=1):
        if return_type not in (-1, 0, 1):
            raise ValueError("return_type must be in {-1, 0, 1}")
        super().__init__(fitted, noisy)
        self.return_type = return_type

    def predict(self, xt):
        f = self.fitted
        xt_ = f.check_test_points(xt)
        Kti = f.cross_covariance(xt_)
        zpm = gnp.matmul(Kti, f.alpha)

        if self.return_type == -1:
            return zpm, None

        # (K + sigma_n^2 I)^{-1} K_tiᵀ, by forward then back substitution
        lambda_t = linalg.solve_from_cholesky(f.C, Kti.T)

        if self.return_type == 0:
            # k(x, x) = 1 for the squared-exponential kernel
            zpv = 1.0 - gnp.einsum("ij,ji->i", Kti, lambda_t) + self._noise_term()
            check_posterior_variance(zpv)
            return zpm, zpv

        Ktt = f.prior_covariance(xt_)
        zpv = Ktt - gnp.matmul(Kti, lambda_t)
        if self.noisy:
            zpv = linalg.regularized_kernel(zpv, f.noise_variance)
        check_posterior_variance(gnp.diagonal(zpv))
        return zpm, zpv


class OnlinePredictor(Predictor):
    """Posterior mean and variance, one test point at a time.

    For each test point x*, with k* = K(x*, xi):

    .. math::
        m(x_*) = k_*^T \\alpha, \\qquad
        v(x_*) = 1 - \\|C^{-T} k_*\\|^2

    where C is the upper Cholesky factor of K + sigma_n^2 I.

    Parameters
    ----------
    fitted : FittedGP
    noisy : bool, optional
    method : {'direct', 'vectorized'}, optional
        Kernel strategy for k*. Defaults to the one of `fitted`.
    """

    def __init__(self, fitted, noisy=False, method=None):
        super().__init__(fitted, noisy)
        self.method = method or fitted.method

    def predict_one(self, x):
        """Return (mean, variance) at a single point x of shape (d,) or (1, d)."""
        f = self.fitted
        x_ = gnp.asdouble(x).reshape(1, -1)
        x_ = f.check_test_points(x_)
        kstar = f.cross_covariance(x_, method=self.method).reshape(-1)
        mean = float(gnp.matmul(kstar, f.alpha))
        w = linalg.forward_substitution(f.C, kstar)
        variance = 1.0 - float(gnp.matmul(w, w)) + self._noise_term()
        return mean, variance

    def iter_predict(self, xt):
        """Yield (mean, variance) for each row of xt, in order."""
        xt_ = self.fitted.check_test_points(xt)
        for row_ix in range(xt_.shape[0]):
            yield self.predict_one(xt_[row_ix])

    def predict(self, xt):
        xt_ = self.fitted.check_test_points(xt)
        nt = xt_.shape[0]
        zpm = gnp.zeros(nt)
        zpv = gnp.zeros(nt)
        for row_ix, (mean, variance) in enumerate(self.iter_predict(xt_)):
            zpm[row_ix] = mean
            zpv[row_ix] = variance
        check_posterior_variance(zpv)
        return zpm, zpv


class NaivePredictor(Predictor):
    """Posterior mean and covariance through an explicit matrix inverse.

    Slower and less stable than :class:`BatchPredictor`; it is kept
    to compare against the Cholesky route.
    """

    def predict(self, xt):
        f = self.fitted
        xt_ = f.check_test_points(xt)
        Kii = f.prior_covariance(f.xi)
        Kti = f.cross_covariance(xt_)
        Ktt = f.prior_covariance(xt_)

        inverse = gnp.inv(linalg.regularized_kernel(Kii, f.noise_variance))
        zpm = gnp.matmul(Kti, gnp.matmul(inverse, f.zi))
        zpv = Ktt - gnp.matmul(Kti, gnp.matmul(inverse, Kti.T))
        if self.noisy:
            zpv = linalg.regularized_kernel(zpv, f.noise_variance)
        check_posterior_variance(gnp.diagonal(zpv))
        return zpm, zpv


def check_posterior_variance(zpv, tolerance=None):
    """Raise NumericalError if a posterior variance is below -tolerance or
    is not finite.

    Parameters
    ----------
    zpv : ndarray, shape (m,)
        Posterior variances (diagonal of the posterior covariance).
    tolerance : float, optional
        Defaults to ``get_config().variance_tolerance``.
    """
    if tolerance is None:
        tolerance = get_config().variance_tolerance
    if zpv.size == 0:
        return
    finite = gnp.isfinite(zpv)
    if not finite.all():
        _logger.warning(
            "Non-finite posterior variance at %d point(s)", int(gnp.sum(~finite))
        )
        raise NumericalError("Posterior variance is not finite")
    vmin = float(gnp.min(zpv))
    if vmin < -tolerance:
        _logger.warning(
            "Negative posterior variance %g (tolerance %g) at %d point(s)",
            vmin, tolerance, int(gnp.sum(zpv < -tolerance)),
        )
        raise NumericalError(
            f"Posterior variance {vmin} is negative beyond tolerance {tolerance}; "
            "the factorization is numerically unstable"
        )


# --------------------------------------------------------------------------
# Fit-and-predict entry points
# --------------------------------------------------------------------------
def gp_batch(xi, zi, xt, noise_variance, sigmasq=None, noisy=False,
             return_type=1, method=None):
    """Batch GP regression: posterior mean and covariance at xt.

    Parameters
    ----------
    xi : array_like, shape (n, d)
    zi : array_like, shape (n,)
    xt : array_like, shape (m, d)
    noise_variance : float
    sigmasq : float, optional
        Bandwidth; median heuristic on xi if None.
    noisy : bool, optional
    return_type : int, optional
        See :class:`BatchPredictor`.
    method : {'direct', 'vectorized'}, optional
        Defaults to the configured kernel method.

    Returns
    -------
    zpm : ndarray, shape (m,)
    zpv : ndarray, shape (m, m), (m,) or None
    """
    fitted = FittedGP.fit(xi, zi, noise_variance, sigmasq, method=method)
    return BatchPredictor(fitted, noisy=noisy, return_type=return_type).predict(xt)


def gp_completely_vectorized_noisy(xi, zi, xt, noise_variance, sigmasq=None):
    """Vectorized kernels, Cholesky solves, noisy predictive covariance."""
    return gp_batch(xi, zi, xt, noise_variance, sigmasq, noisy=True,
                    return_type=1, method="vectorized")


def gp_naive(xi, zi, xt, noise_variance, sigmasq=None):
    """Direct kernels and an explicit inverse."""
    fitted = FittedGP.fit(xi, zi, noise_variance, sigmasq, method="direct")
    return NaivePredictor(fitted).predict(xt)


def gp_online(xi, zi, xt, noise_variance, sigmasq=None):
    """Online prediction with direct kernels: returns means and variances."""
    fitted = FittedGP.fit(xi, zi, noise_variance, sigmasq, method="direct")
    return OnlinePredictor(fitted).predict(xt)


def gp_online_vect(xi, zi, xt, noise_variance, sigmasq=None):
    """Online prediction with vectorized kernels."""
    fitted = FittedGP.fit(xi, zi, noise_variance, sigmasq, method="vectorized")
    return OnlinePredictor(fitted).predict(xt)
