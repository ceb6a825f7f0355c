# gpreg/__init__.py

from . import config
from . import errors
from . import num
from . import kernel
from . import core
from . import misc
from .core import Model
from .errors import (
    GPRegError,
    DegenerateBandwidthError,
    NumericalError,
    DimensionMismatchError,
)

__all__ = [
    "num",
    "kernel",
    "core",
    "Model",
    "GPRegError",
    "DegenerateBandwidthError",
    "NumericalError",
    "DimensionMismatchError",
    "__version__",
]

__version__ = config.__version__
