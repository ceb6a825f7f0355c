## --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
## --------------------------------------------------------------
import numpy as np
from scipy.stats import qmc


def scale(sample_standard, box):
    """
    Scale a sample from the unit hypercube to the specified box.

    Parameters
    ----------
    sample_standard : numpy.ndarray
        Sample in [0, 1]^dim, shape (n, dim).
    box : list of lists
        List of lists containing the lower and upper bounds of the box.

    Returns
    -------
    numpy.ndarray
        Scaled sample.
    """
    return qmc.scale(sample_standard, box[0], box[1])


def regulargrid(dim, n, box):
    """
    Build a regular grid in the dim-dimensional hyperrectangle.

    If n is an integer, a grid of size n^dim is built;

    If n is a list of length dim, a grid of size prod(n) is built,
    with n_i points on coordinate i.

    Parameters
    ----------
    dim : int
        Number of dimensions.
    n : int or list
        Number of points per dimension or a list with the number of points per dimension.
    box : list of lists
        List of lists containing the lower and upper bounds of the box.

    Returns
    -------
    x : numpy.ndarray
        Regular grid of shape (prod(n), dim).
    """
    if not isinstance(n, list):
        n = [n for i in range(dim)]

    xmin, xmax = box[0], box[1]
    levels = [np.linspace(xmin[i], xmax[i], n[i]) for i in range(dim)]

    # full factorial design
    Xv = np.meshgrid(*levels, indexing="ij")
    return np.stack([v.reshape(-1) for v in Xv], axis=1)


def randunif(dim, n, box, rng):
    """
    Generate a random uniform sample in the specified box.

    Parameters
    ----------
    dim : int
        Number of dimensions.
    n : int
        Number of points in the sample.
    box : list of lists
        List of lists containing the lower and upper bounds of the box.
    rng : numpy.random.Generator
        Random source.

    Returns
    -------
    numpy.ndarray
        Random uniform sample of shape (n, dim).
    """
    return scale(rng.random((n, dim)), box)
