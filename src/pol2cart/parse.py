"""
Parse user input (command line values and interactive lines) into typed values
for the converter.
"""

# std
import re

# third-party
from loguru import logger


# ---------------------------------------------------------------------------- #
REGEX_NUMBER = re.compile(r'''(?x)
    \s*
    [+-]?
    (?: \d+ (?:\.\d*)? | \.\d+ )
    (?: [eE][+-]?\d+ )?
    ''')

# angle post-fix indicating radians
REGEX_RADIANS = re.compile(r'(?:[rc]|rad(?:ians?)?)$')

EXIT_WORDS = ('exit', 'quit')
BRACKETS = ' \t\n\r\0\x0b()'


# ---------------------------------------------------------------------------- #

def parse_number(text):
    """
    Read the leading number in `text`, ignoring any trailing characters.

    Examples
    --------
    >>> parse_number('1.5707rad')
    1.5707
    >>> parse_number(' -2e3 ')
    -2000.0

    Raises
    ------
    ValueError
        If `text` does not start with a number.
    """
    if isinstance(text, (int, float)) and not isinstance(text, bool):
        return float(text)

    if not isinstance(text, str):
        raise TypeError(f'Cannot parse number from object of type '
                        f'{type(text).__name__!r}.')

    if mo := REGEX_NUMBER.match(text):
        return float(mo[0])

    raise ValueError(f'Could not parse a number from {text!r}.')


def is_radians(text):
    """
    Check whether the angle string `text` is post-fixed with one of 'r', 'c',
    'rad', 'radian' or 'radians'.
    """
    return bool(REGEX_RADIANS.search(text.rstrip()))


def parse_angle(text, radians=None):
    """
    Parse an angle string into a number and a unit flag. An explicit `radians`
    (True / False) takes precedence over the post-fix in `text`.

    Examples
    --------
    >>> parse_angle('3.14159r')
    (3.14159, True)
    >>> parse_angle('3.14159r', radians=False)
    (3.14159, False)
    """
    angle = parse_number(text)
    if radians is None:
        radians = is_radians(text)
        logger.debug('Angle {!r} interpreted as {}.', text,
                     ('degrees', 'radians')[radians])

    return angle, bool(radians)


def parse_pair(line):
    """
    Split an interactive input line of the form "(r, θ)" into its two fields.
    Parentheses and surrounding whitespace are optional. A missing angle field
    is returned as an empty string.

    Examples
    --------
    >>> parse_pair('(5, 45)')
    ('5', '45')
    """
    fields = [_.strip() for _ in line.strip(BRACKETS).split(',')]
    if len(fields) > 2:
        raise ValueError(f'Expected two comma separated values, received '
                         f'{len(fields)}: {line!r}.')

    radius, angle = (*fields, '')[:2]
    return radius, angle


def is_exit(text):
    return text.strip() in EXIT_WORDS


def parse_precision(text):
    """Parse a non-negative integer number of decimal places."""
    try:
        precision = int(text)
    except (TypeError, ValueError) as err:
        raise ValueError(f'Invalid precision: {text!r}.') from err

    if precision < 0:
        raise ValueError(f'Precision should be non-negative, not {precision}.')

    return precision
