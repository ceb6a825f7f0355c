# gpreg/core/linalg.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Cholesky-based linear solves.

Convention: the Cholesky factor C is upper-triangular, M = Cᵀ C. A
system M X = Y is solved by a forward substitution Cᵀ W = Y followed
by a back substitution C X = W; M^{-1} is never formed.
"""
import gpreg.num as gnp
from gpreg.config import get_logger
from gpreg.errors import DimensionMismatchError, NumericalError

_logger = get_logger()


def cholesky_upper(M):
    """Return the upper-triangular factor C such that Cᵀ C = M.

    Parameters
    ----------
    M : array_like, shape (n, n)
        Symmetric positive definite matrix.

    Returns
    -------
    C : ndarray, shape (n, n)

    Raises
    ------
    NumericalError
        If M is not positive definite or contains non-finite values.
    """
    M_ = gnp.asarray(M)
    if M_.ndim != 2 or M_.shape[0] != M_.shape[1]:
        raise DimensionMismatchError(f"M must be a square matrix, got shape {M_.shape}")
    try:
        C = gnp.cholesky(M_, lower=False)
    except gnp.LinAlgError as exc:
        _logger.warning("Cholesky factorization failed (n=%d): %s", M_.shape[0], exc)
        raise NumericalError(
            "Cholesky factorization failed: the matrix is not positive definite. "
            "Duplicate points with a zero noise variance are a common cause."
        ) from exc
    except ValueError as exc:
        # scipy rejects infs and nans before calling LAPACK
        raise NumericalError(f"Cholesky factorization failed: {exc}") from exc
    return C


def forward_substitution(C, Y):
    """Solve Cᵀ W = Y, C upper-triangular."""
    return gnp.solve_triangular(C, Y, trans="T", lower=False)


def back_substitution(C, W):
    """Solve C X = W, C upper-triangular."""
    return gnp.solve_triangular(C, W, lower=False)


def solve_from_cholesky(C, Y):
    """Solve (Cᵀ C) X = Y given the upper Cholesky factor C.

    Parameters
    ----------
    C : ndarray, shape (n, n)
    Y : array_like, shape (n,) or (n, k)

    Returns
    -------
    X : ndarray, same shape as Y
    """
    Y_ = gnp.asarray(Y)
    if Y_.shape[0] != C.shape[0]:
        raise DimensionMismatchError(
            f"Right-hand side has {Y_.shape[0]} rows, expected {C.shape[0]}"
        )
    return back_substitution(C, forward_substitution(C, Y_))


def cholesky_solve(M, Y):
    """Solve M X = Y for symmetric positive definite M.

    Parameters
    ----------
    M : array_like, shape (n, n)
    Y : array_like, shape (n,) or (n, k)

    Returns
    -------
    X : ndarray, same shape as Y
    C : ndarray, shape (n, n)
        Upper Cholesky factor of M, for reuse.
    """
    C = cholesky_upper(M)
    return solve_from_cholesky(C, Y), C


def regularized_kernel(K, noise_variance):
    """Return K + noise_variance * I."""
    return K + noise_variance * gnp.eye(K.shape[0])
