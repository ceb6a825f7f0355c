# gpreg/core/sample_paths.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Sampling routines for squared-exponential GP models.

This module provides:
- Multivariate normal draws N(m, V) from a Cholesky factor of V.
- Unconditional sampling of GP paths on a set of points `xt`.
- Posterior sampling of GP paths given a fitted model.

The random source is always a ``numpy.random.Generator`` passed by
the caller (see :func:`gpreg.num.make_rng`).
"""
import gpreg.num as gnp
from gpreg.config import get_config
from gpreg.errors import DimensionMismatchError
from gpreg.kernel import squared_exponential_covariance
from gpreg.kernel.utils import as_points
from . import linalg
from .kriging import BatchPredictor


def multivariate_normal_rvs(mean, cov, nb_paths, rng, jitter=None):
    """Draw ``nb_paths`` samples from N(mean, cov).

    Parameters
    ----------
    mean : array_like, shape (m,)
    cov : array_like, shape (m, m)
        Symmetric positive semi-definite covariance.
    nb_paths : int
    rng : numpy.random.Generator
    jitter : float, optional
        Added to the diagonal of cov before factorization, scaled by
        max(diag(cov)). Defaults to ``get_config().jitter``.

    Returns
    -------
    ndarray, shape (m, nb_paths)

    Notes
    -----
    cov + jitter I = Cᵀ C with C upper-triangular; samples are drawn as
    mean + Cᵀ N(0, I).
    """
    if jitter is None:
        jitter = get_config().jitter
    mean_ = gnp.asdouble(mean).reshape(-1, 1)
    cov_ = gnp.asdouble(cov)
    if cov_.ndim != 2 or cov_.shape[0] != cov_.shape[1] or cov_.shape[0] != mean_.shape[0]:
        raise DimensionMismatchError(
            f"cov must be a square matrix matching mean, got {cov_.shape} and {mean_.shape}"
        )
    m = cov_.shape[0]
    if m == 0:
        return gnp.zeros((0, nb_paths))
    # symmetrize against rounding before factorizing
    cov_ = 0.5 * (cov_ + cov_.T)
    scale = float(gnp.max(gnp.abs(gnp.diagonal(cov_))))
    C = linalg.cholesky_upper(linalg.regularized_kernel(cov_, jitter * max(scale, 1.0)))
    return mean_ + gnp.matmul(C.T, gnp.randn(rng, m, nb_paths))


def sample_paths(xt, sigmasq, nb_paths, rng, method="vectorized"):
    """Generate ``nb_paths`` sample paths on ``xt`` from the prior GP(0, k).

    Parameters
    ----------
    xt : array_like, shape (nt, d)
    sigmasq : float
        Bandwidth of the squared-exponential kernel.
    nb_paths : int
    rng : numpy.random.Generator
    method : {'direct', 'vectorized'}, optional

    Returns
    -------
    ndarray, shape (nt, nb_paths)
    """
    xt_ = as_points(xt, "xt")
    K = squared_exponential_covariance(xt_, None, sigmasq, method=method)
    return multivariate_normal_rvs(gnp.zeros(xt_.shape[0]), K, nb_paths, rng)


def posterior_sample_paths(fitted, xt, nb_paths, rng, noisy=False):
    """Generate ``nb_paths`` sample paths on ``xt`` from the posterior GP.

    Parameters
    ----------
    fitted : gpreg.core.FittedGP
    xt : array_like, shape (nt, d)
    nb_paths : int
    rng : numpy.random.Generator
    noisy : bool, optional
        Sample noisy observations instead of the latent function.

    Returns
    -------
    ndarray, shape (nt, nb_paths)
    """
    zpm, zpv = BatchPredictor(fitted, noisy=noisy, return_type=1).predict(xt)
    return multivariate_normal_rvs(zpm, zpv, nb_paths, rng)
