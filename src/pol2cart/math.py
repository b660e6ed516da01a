"""
Order of magnitude and the output field widths derived from it.
"""

# std
import math
import numbers


# ---------------------------------------------------------------------------- #

def order_of_magnitude(n):
    """
    Base 10 order of magnitude for a scalar, used to size output fields.

    Parameters
    ----------
    n: numbers.Real

    Returns
    -------
    int
        `floor(log10(|n|))`. Zero is treated as having magnitude 1 so the result
        is 0 instead of `-inf`. Non-finite numbers also give 0.
    """
    if not isinstance(n, numbers.Real):
        raise TypeError(f'Only real scalars are accepted by this function, '
                        f'not {type(n).__name__!r}.')

    if n == 0 or not math.isfinite(n):
        n = 1

    return math.floor(math.log10(abs(n)))


def field_width(n, precision=3):
    """
    Width of the output field for `n` at `precision` decimal places: the order
    of magnitude (floored to 1 when exactly 0), plus the precision, plus 2 for
    the sign and the decimal point.

    Examples
    --------
    >>> field_width(5.0)
    6
    >>> field_width(1234.5, 2)
    7
    """
    magnitude = order_of_magnitude(n)
    return (magnitude or 1) + precision + 2
