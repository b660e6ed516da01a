"""
Convert polar coordinates (r, θ) to Cartesian coordinates (x, y), from python
or the command line.
"""

# std
from importlib.metadata import version

# third-party
from loguru import logger

# silence logging by default
logger.disable('pol2cart')

# relative
from .math import field_width, order_of_magnitude
from .convert import Cartesian, Polar, convert, pol2cart
from .pprint import Format, Mode, format


# ---------------------------------------------------------------------------- #

# version
__version__ = version('pol2cart')
