"""
Pretty formatting of Cartesian coordinates for the terminal. Field widths adapt
to the order of magnitude of each number so that output stays aligned.
"""

# std
import numbers
from enum import IntEnum
from collections import namedtuple

# relative
from .math import field_width


# ---------------------------------------------------------------------------- #

class Mode(IntEnum):
    """Output layout."""

    PLAIN = DEFAULT = 0
    NICE = 1
    INTERACTIVE = 2

    @classmethod
    def _missing_(cls, mode):

        if mode is None:
            return cls.PLAIN

        if isinstance(mode, str):
            return cls.__members__.get(mode.upper())


TEMPLATES = {
    # tab separated, for piping to other programs
    Mode.PLAIN: '{x}\t{y}\n',
    # one coordinate per line
    Mode.NICE: 'X Coord = {x}\nY Coord = {y}\n',
    # (x,y) pair
    Mode.INTERACTIVE: 'Cartesian Coordinates (x,y): ({x},{y})\n\n',
}


class Format(namedtuple('Format', 'precision mode', defaults=(3, Mode.PLAIN))):
    """
    Output preferences: number of decimal places and layout mode.
    """

    __slots__ = ()

    def __new__(cls, precision=3, mode=Mode.PLAIN):
        return super().__new__(cls, check_precision(precision), Mode(mode))

    def __call__(self, point):
        return format(point, *self)


# ---------------------------------------------------------------------------- #

def check_precision(precision):
    if isinstance(precision, bool) or not isinstance(precision, numbers.Integral):
        raise TypeError(f'Precision should be an integer, not '
                        f'{type(precision).__name__!r}.')

    if precision < 0:
        raise ValueError(f'Precision should be non-negative, not {precision}.')

    return int(precision)


def decimal(n, precision=3):
    """
    Fixed point representation of `n` with `precision` decimals, right
    justified in a field wide enough for its order of magnitude.

    Examples
    --------
    >>> decimal(5.0)
    ' 5.000'
    >>> decimal(-12.3456, 1)
    '-12.3'
    """
    # widths smaller than the number (including negative ones) do not truncate
    return f'{n:.{precision}f}'.rjust(field_width(n, precision))


def format(point, precision=3, mode=Mode.PLAIN):
    """
    Render the Cartesian coordinates `point` as a string.

    Parameters
    ----------
    point: Cartesian or tuple
        The (x, y) coordinates.
    precision: int or Format
        Number of decimal places, by default 3. A `Format` instance can be
        passed here instead, in which case `mode` is ignored.
    mode: Mode or str
        One of 'plain', 'nice', 'interactive'.

    Returns
    -------
    str
        Newline terminated text.

    Examples
    --------
    >>> format((5.0, 0.0))
    ' 5.000\\t 0.000\\n'
    """
    if isinstance(precision, Format):
        precision, mode = precision

    precision = check_precision(precision)
    x, y = point
    return TEMPLATES[Mode(mode)].format(x=decimal(x, precision),
                                  y=decimal(y, precision))
