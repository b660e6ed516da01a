"""
Polar to Cartesian coordinate conversion.
"""

# std
from collections import namedtuple

# third-party
import numpy as np
from loguru import logger


# ---------------------------------------------------------------------------- #

class Cartesian(namedtuple('Cartesian', 'x y')):
    """Cartesian coordinates (x, y)."""

    __slots__ = ()

    def __format__(self, spec):
        # '.3f' -> '(0.707, 0.707)'
        return f'({self.x:{spec}}, {self.y:{spec}})'


class Polar(namedtuple('Polar', 'radius angle radians', defaults=(False, ))):
    """
    Polar coordinates (r, θ). The `radians` flag says how `angle` is measured;
    degrees unless set.
    """

    __slots__ = ()

    def to_cartesian(self):
        return pol2cart(*self)


# ---------------------------------------------------------------------------- #

def pol2cart(radius, angle, radians=False):
    """
    Polar to Cartesian transformation. The angle is measured counterclockwise
    from the positive x-axis.

    Parameters
    ----------
    radius: float
        Distance from the origin.
    angle: float
        The angle (azimuth) of the point.
    radians: bool
        Whether `angle` is in radians. Degrees are assumed by default.

    Returns
    -------
    Cartesian
        Named tuple with fields x and y.

    Examples
    --------
    >>> pol2cart(5, 0)
    Cartesian(x=5.0, y=0.0)
    """
    theta = angle if radians else angle * np.pi / 180

    # nan and inf propagate without warnings
    with np.errstate(invalid='ignore', over='ignore'):
        x = radius * np.cos(theta)
        y = radius * np.sin(theta)

    logger.trace('({}, {}{}) -> ({}, {})',
                 radius, angle, ('°', ' rad')[bool(radians)], x, y)
    return Cartesian(float(x), float(y))


def convert(point):
    """Convert a `Polar` point (or any (r, θ[, radians]) sequence)."""
    return pol2cart(*point)
