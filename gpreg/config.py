# gpreg/config.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
import os
import logging

# Read version from VERSION file
_version_file = os.path.join(os.path.dirname(__file__), "..", "VERSION")
try:
    with open(os.path.abspath(_version_file), "r") as f:
        __version__ = f.read().strip()
except FileNotFoundError:
    __version__ = "0.0.0"


class _GPRegConfig:
    def __init__(self):
        self.version = __version__
        self.dtype = float
        self.seed = 1234
        # tolerance below which a negative posterior variance is an error
        self.variance_tolerance = 1e-9
        # diagonal jitter for sampling from (near) singular covariances
        self.jitter = 1e-8
        self.kernel_method = "vectorized"
        # logger lives in config
        self.logger = logging.getLogger("gpreg")
        if not self.logger.handlers:
            h = logging.StreamHandler()
            h.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
            self.logger.addHandler(h)
        self.logger.setLevel(os.environ.get("GPREG_LOG_LEVEL", "INFO").upper())

    def __str__(self):
        return (
            f"GPRegConfig("
            f"version={self.version}, "
            f"dtype={self.dtype}, "
            f"seed={self.seed}, "
            f"variance_tolerance={self.variance_tolerance}, "
            f"jitter={self.jitter}, "
            f"kernel_method={self.kernel_method})"
        )

    def __repr__(self):
        return (
            f"<GPRegConfig "
            f"version={self.version!r}, "
            f"dtype={self.dtype!r}, "
            f"seed={self.seed!r}, "
            f"variance_tolerance={self.variance_tolerance!r}, "
            f"jitter={self.jitter!r}, "
            f"kernel_method={self.kernel_method!r}>"
        )

    def update(self, **kwargs):
        for k, v in kwargs.items():
            if not hasattr(self, k):
                raise AttributeError(f"Unknown configuration entry '{k}'")
            setattr(self, k, v)
        return self


_config = _GPRegConfig()


def get_config():
    return _config


def get_logger():
    return _config.logger


def set_log_level(level):
    _config.logger.setLevel(level)


def set_kernel_method(method: str):
    """Select the default kernel computation strategy ('direct'|'vectorized')."""
    if method not in ("direct", "vectorized"):
        raise ValueError("method must be 'direct' or 'vectorized'")
    _config.kernel_method = method
