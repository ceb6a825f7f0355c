# gpreg/core/model.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Gaussian Process regression model class.
"""
import gpreg.num as gnp
from gpreg.config import get_config
from gpreg.kernel import median_heuristic
from . import kriging
from . import sample_paths as sample_paths
from .fitted import FittedGP


class Model:
    """Gaussian Process (GP) regression model with a squared-exponential kernel.

    The model is zero-mean with covariance

    .. math::
        k(x, y) = \\exp(-\\|x - y\\|^2 / \\sigma^2)

    and observations corrupted by a Gaussian noise of variance
    :math:`\\sigma_n^2`.

    Attributes
    ----------
    noise_variance : float
        Noise variance sigma_n^2.
    sigmasq : float or None
        Bandwidth sigma^2. If None, it is derived from the training
        points with the median heuristic at each fit.
    method : {'direct', 'vectorized'}
        Kernel matrix computation strategy.

    Public API (methods)
    --------------------
    fit
        Factorize the training data, returns a FittedGP.
    predictor
        Build a batch, online or naive predictor from training data.
    predict
        Posterior mean and (co)variance at target points.
    sample_paths
        Unconditional GP sample paths on xt.
    posterior_sample_paths
        GP sample paths on xt conditioned on (xi, zi).

    Examples
    --------
    >>> import gpreg as gp
    >>> import gpreg.num as gnp
    >>> model = gp.core.Model(noise_variance=0.01, sigmasq=1.0)
    >>> xi = gnp.array([[-5.0], [0.0], [5.0]])
    >>> zi = gnp.array([1.0, -1.0, 1.0])
    >>> xt = gnp.linspace(-6.0, 6.0, 25).reshape(-1, 1)
    >>> zpm, zpv = model.predict(xi, zi, xt, return_type=0)
    """

    _predictors = {
        "batch": kriging.BatchPredictor,
        "online": kriging.OnlinePredictor,
        "naive": kriging.NaivePredictor,
    }

    def __init__(self, noise_variance, sigmasq=None, method=None):
        """
        Parameters
        ----------
        noise_variance : float
            Noise variance sigma_n^2.
        sigmasq : float, optional
            Bandwidth sigma^2 (median heuristic if None).
        method : {'direct', 'vectorized'}, optional
            Kernel computation strategy (default from the config).
        """
        if method is None:
            method = get_config().kernel_method
        if method not in ("direct", "vectorized"):
            raise ValueError("method must be 'direct' or 'vectorized'")
        self.noise_variance = noise_variance
        self.sigmasq = sigmasq
        self.method = method

    def __repr__(self):
        output = str("<gpreg.core.Model object> " + hex(id(self)))
        return output

    def __str__(self):
        sigmasq_desc = "median heuristic" if self.sigmasq is None else self.sigmasq
        return (
            f"GP Model:\n"
            f"  Kernel: squared exponential ({self.method})\n"
            f"  Bandwidth sigma^2: {sigmasq_desc}\n"
            f"  Noise variance: {self.noise_variance}"
        )

    def fit(self, xi, zi):
        """Return the FittedGP of the training data (xi, zi)."""
        return FittedGP.fit(
            xi, zi, self.noise_variance, sigmasq=self.sigmasq, method=self.method
        )

    def predictor(self, xi, zi, kind="batch", **kwargs):
        """Build a predictor for the training data (xi, zi).

        Parameters
        ----------
        xi : array_like, shape (n, d)
        zi : array_like, shape (n,)
        kind : {'batch', 'online', 'naive'}
        **kwargs
            Passed to the predictor (``noisy``, ``return_type``, ...).

        Returns
        -------
        gpreg.core.kriging.Predictor
        """
        try:
            cls = self._predictors[kind]
        except KeyError:
            raise ValueError(
                f"Invalid predictor {kind}. "
                "Supported predictors are 'batch', 'online', and 'naive'."
            ) from None
        return cls(self.fit(xi, zi), **kwargs)

    def predict(self, xi, zi, xt, predictor="batch", return_type=0, noisy=False):
        """Posterior mean and variance at xt.

        Parameters
        ----------
        xi : array_like, shape (n, d)
        zi : array_like, shape (n,)
        xt : array_like, shape (m, d)
        predictor : {'batch', 'online', 'naive'}, optional
        return_type : int, optional
            -1: no variance, 0: variances (default), 1: full covariance.
            The online predictor only returns variances.
        noisy : bool, optional
            Add the noise variance to the posterior variance.

        Returns
        -------
        zpm : ndarray, shape (m,)
        zpv : ndarray, shape (m,) or (m, m), or None
        """
        if return_type not in (-1, 0, 1):
            raise ValueError("return_type must be in {-1, 0, 1}")
        if predictor == "batch":
            p = self.predictor(xi, zi, "batch", noisy=noisy, return_type=return_type)
            return p.predict(xt)

        if predictor == "online" and return_type == 1:
            raise ValueError("The online predictor does not compute covariances")
        p = self.predictor(xi, zi, predictor, noisy=noisy)
        zpm, zpv = p.predict(xt)
        if return_type == -1:
            return zpm, None
        if return_type == 0 and zpv.ndim == 2:
            zpv = gnp.diagonal(zpv).copy()
        return zpm, zpv

    def sample_paths(self, xt, nb_paths, rng=None, xi=None):
        """Unconditional sample paths on xt, shape (nt, nb_paths).

        If the bandwidth is not set, it is derived from ``xi`` (or from
        ``xt`` when ``xi`` is None) with the median heuristic.
        """
        rng = gnp.make_rng() if rng is None else rng
        sigmasq = self.sigmasq
        if sigmasq is None:
            sigmasq = median_heuristic(xt if xi is None else xi)
        return sample_paths.sample_paths(xt, sigmasq, nb_paths, rng, method=self.method)

    def posterior_sample_paths(self, xi, zi, xt, nb_paths, rng=None, noisy=False):
        """Sample paths on xt conditioned on (xi, zi), shape (nt, nb_paths)."""
        rng = gnp.make_rng() if rng is None else rng
        return sample_paths.posterior_sample_paths(
            self.fit(xi, zi), xt, nb_paths, rng, noisy=noisy
        )
