# gpreg/kernel/squared_exponential.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Squared-exponential kernel matrices.

Two strategies compute the same matrix

.. math::
    K_{ij} = \\exp(-\\|a_i - b_j\\|^2 / \\sigma^2)

- direct: pairwise squared distances, O(n m d);
- vectorized: expansion :math:`a^T a - 2 a^T b + b^T b` with a single
  matrix product for the cross term.

Both give a diagonal of exactly 1.0 on a self-kernel.
"""
import gpreg.num as gnp
from .utils import as_points, check_same_dim, check_sigmasq


def sqdist(x, y=None):
    """Squared Euclidean distances, computed pair by pair.

    Parameters
    ----------
    x : array_like, shape (n, d)
    y : array_like, shape (m, d), optional
        Defaults to x.

    Returns
    -------
    D : ndarray, shape (n, m)
    """
    x_ = as_points(x, "x")
    if y is None or y is x:
        return gnp.cdist(x_, x_, "sqeuclidean")
    y_ = as_points(y, "y")
    check_same_dim(x_, y_)
    return gnp.cdist(x_, y_, "sqeuclidean")


def sqdist_vectorized(x, y=None):
    """Squared Euclidean distances from the expansion a'a - 2a'b + b'b.

    Parameters
    ----------
    x : array_like, shape (n, d)
    y : array_like, shape (m, d), optional
        Defaults to x, in which case D is made exactly symmetric with a
        zero diagonal.

    Returns
    -------
    D : ndarray, shape (n, m)
    """
    x_ = as_points(x, "x")
    self_distance = y is None or y is x
    y_ = x_ if self_distance else as_points(y, "y")
    check_same_dim(x_, y_)

    # common shift, distances are unchanged but the expansion cancels less
    center = x_.mean(axis=0)
    x_ = x_ - center
    y_ = x_ if self_distance else y_ - center

    xx = gnp.sum(x_ * x_, axis=1).reshape(-1, 1)
    yy = gnp.sum(y_ * y_, axis=1).reshape(1, -1)
    D = xx - 2.0 * gnp.matmul(x_, y_.T) + yy

    # rounding may leave tiny negative residues
    D = gnp.maximum(D, 0.0)
    if self_distance:
        D = 0.5 * (D + D.T)
        gnp.fill_diagonal(D, 0.0)
    return D


def kernel_matrix(x, y, sigmasq):
    """Squared-exponential kernel matrix, direct strategy.

    Parameters
    ----------
    x : array_like, shape (n, d)
    y : array_like, shape (m, d)
        Use ``y=x`` (or None) for the symmetric self-kernel.
    sigmasq : float
        Bandwidth, must be positive.

    Returns
    -------
    K : ndarray, shape (n, m)
    """
    sigmasq = check_sigmasq(sigmasq)
    return gnp.exp(-sqdist(x, y) / sigmasq)


def kernel_matrix_vectorized(x, sigmasq, y=None):
    """Squared-exponential kernel matrix, vectorized strategy.

    Parameters
    ----------
    x : array_like, shape (n, d)
    sigmasq : float
        Bandwidth, must be positive.
    y : array_like, shape (m, d), optional
        Defaults to x (symmetric self-kernel).

    Returns
    -------
    K : ndarray, shape (n, m)
    """
    sigmasq = check_sigmasq(sigmasq)
    return gnp.exp(-sqdist_vectorized(x, y) / sigmasq)


def squared_exponential_covariance(x, y, sigmasq, method="vectorized"):
    """Squared-exponential covariance. Wrapper.

    Parameters
    ----------
    x : array_like, shape (n, d)
    y : array_like or None
        None means y := x.
    sigmasq : float
    method : {'direct', 'vectorized'}

    Returns
    -------
    ndarray, shape (n, m)
    """
    if method == "direct":
        return kernel_matrix(x, y, sigmasq)
    elif method == "vectorized":
        return kernel_matrix_vectorized(x, sigmasq, y)
    else:
        raise ValueError("method must be 'direct' or 'vectorized'")
