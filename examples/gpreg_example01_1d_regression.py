'''
Gaussian process regression in 1D with noisy evaluations.

The bandwidth of the squared-exponential kernel is chosen with the
median heuristic on the training points. Predictions are computed with
the batch predictor (full posterior covariance) and with the online
predictor (one test point at a time), and both are compared with the
naive predictor based on an explicit matrix inverse.

----
Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
Copyright (c) 2022-2026, CentraleSupelec
License: GPLv3 (see LICENSE)
'''
import numpy as np
import matplotlib.pyplot as plt
import gpreg.num as gnp
import gpreg as gp


def generate_data(noise_std, rng):
    """Create a 1D dataset with noisy observed values."""
    dim = 1
    box = [[-5], [5]]
    xt = gp.misc.designs.regulargrid(dim, 200, box)
    zt = np.sin(xt).reshape(-1)

    xi = gp.misc.designs.randunif(dim, 15, box, rng)
    zi = np.sin(xi).reshape(-1) + noise_std * gnp.randn(rng, xi.shape[0])
    return xt, zt, xi, zi


def main():
    """Fit the GP and predict on a grid with the batch and online predictors."""
    rng = gnp.make_rng(0)
    noise_std = 1e-1
    xt, zt, xi, zi = generate_data(noise_std, rng)

    model = gp.core.Model(noise_variance=noise_std**2)
    zpm, zpv = model.predict(xi, zi, xt, predictor="batch", return_type=1)
    zpm_online, zpv_online = model.predict(xi, zi, xt, predictor="online")
    zpm_naive, _ = model.predict(xi, zi, xt, predictor="naive")

    gp.config.get_logger().info(
        "max |batch - online| mean: %.3e, variance: %.3e; max |batch - naive| mean: %.3e",
        np.max(np.abs(zpm - zpm_online)),
        np.max(np.abs(np.diag(zpv) - zpv_online)),
        np.max(np.abs(zpm - zpm_naive)),
    )

    zsim = model.posterior_sample_paths(xi, zi, xt, nb_paths=5, rng=rng)
    return xt, zt, xi, zi, zpm, np.diag(zpv).copy(), zsim


def visualize(xt, zt, xi, zi, zpm, zpv, zsim):
    """Plot reference function, observations, and GP posterior."""
    x = xt.reshape(-1)
    delta = 1.959964 * np.sqrt(np.maximum(zpv, 0.0))

    fig, ax = plt.subplots()
    ax.plot(x, zt, 'C0', linestyle=(0, (5, 5)), linewidth=1, label='truth')
    ax.plot(xi.reshape(-1), zi, 'rs', label='data')
    ax.plot(x, zsim, 'C1', linewidth=0.5, alpha=0.6)
    ax.plot(x, zpm, 'C2', linewidth=1.5, label='posterior mean')
    ax.fill_between(x, zpm - delta, zpm + delta, color='C2', alpha=0.2, label='CI 95%')
    ax.set_xlabel('x')
    ax.set_ylabel('z')
    ax.set_title('GP regression, squared-exponential kernel')
    ax.legend()
    plt.show()


if __name__ == "__main__":
    xt, zt, xi, zi, zpm, zpv, zsim = main()
    visualize(xt, zt, xi, zi, zpm, zpv, zsim)
