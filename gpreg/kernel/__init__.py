# gpreg/kernel/__init__.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Squared-exponential kernel and bandwidth selection.

Modules
-------
squared_exponential
    Kernel matrices (direct and vectorized strategies).
bandwidth
    Median heuristics for the bandwidth sigma^2.
utils
    Internal helper functions for input validation.

Public API
-----------
- Distances and kernels:
    sqdist, sqdist_vectorized, kernel_matrix, kernel_matrix_vectorized,
    squared_exponential_covariance
- Bandwidth:
    median_heuristic, upper_triangle_median_heuristic
"""

from .squared_exponential import (
    sqdist,
    sqdist_vectorized,
    kernel_matrix,
    kernel_matrix_vectorized,
    squared_exponential_covariance,
)
from .bandwidth import median_heuristic, upper_triangle_median_heuristic

__all__ = [
    # Kernels
    "sqdist",
    "sqdist_vectorized",
    "kernel_matrix",
    "kernel_matrix_vectorized",
    "squared_exponential_covariance",
    # Bandwidth
    "median_heuristic",
    "upper_triangle_median_heuristic",
]
