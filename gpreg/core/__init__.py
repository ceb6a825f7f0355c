# gpreg/core/__init__.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------

"""
Core components of the gpreg package.

This subpackage contains the numerical routines for Gaussian Process
regression: Cholesky solves, the fitted training state, batch and
online predictors, and sampling of GP paths.

Public API
----------
Model : class
    GP regression model façade.
FittedGP : class
    Training-side factorization shared by the predictors.
BatchPredictor, OnlinePredictor, NaivePredictor : classes
    Implementations of the predictor interface.
gp_batch, gp_completely_vectorized_noisy, gp_naive, gp_online, gp_online_vect
    Fit-and-predict functions.
"""

from .fitted import FittedGP
from .kriging import (
    Predictor,
    BatchPredictor,
    OnlinePredictor,
    NaivePredictor,
    check_posterior_variance,
    gp_batch,
    gp_completely_vectorized_noisy,
    gp_naive,
    gp_online,
    gp_online_vect,
)
from .model import Model

__all__ = [
    "Model",
    "FittedGP",
    "Predictor",
    "BatchPredictor",
    "OnlinePredictor",
    "NaivePredictor",
    "check_posterior_variance",
    "gp_batch",
    "gp_completely_vectorized_noisy",
    "gp_naive",
    "gp_online",
    "gp_online_vect",
]
