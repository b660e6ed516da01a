"""
Command line interface.

Examples
--------
$ pol2cart -r 5 -a 30
 4.330	 2.500
$ pol2cart -n -r 2 -a 1.5708rad -p 2
X Coord = -0.00
Y Coord =  2.00
$ pol2cart -i
"""

# std
import sys
from collections import namedtuple

# third-party
import click
from loguru import logger

# relative
from . import parse
from .config import get_format
from .convert import pol2cart
from .pprint import Mode, format


# ---------------------------------------------------------------------------- #
PROMPT_RADIUS = 'Please provide Radius (r)'
PROMPT_ANGLE = 'Please provide Angle (θ)'
PROMPT_PAIR = 'Polar coordinates (r,θ)'

GREETING = '''
Polar to Cartesian coordinates converter interactive mode!
Type 'exit' or 'quit' at any time to exit interactive mode.
Angle default units are degrees. Post-fix angle with either r, c, rad, radian,
    or radians to set angle measurement to radians.

Remember:
    0°/0rad (zero degrees/radians) is on the right.
    Degrees/radians are measured counter-clockwise.
'''

DESCRIPTION = '''\
Polar Coordinates to Cartesian Coordinates Calculator.

Convert polar coordinates (radius, angle) to Cartesian coordinates (x, y).
Degrees are assumed by default. Post-fix the angle with r, c, rad, radian or
radians, or use -c, to measure it in radians. Values that are not given on the
command line are prompted for.

By default x and y are printed tab separated on a single line, for redirecting
to other programs. Use -n for one coordinate per line.'''

LOG_FORMAT = '<level>{level: <8}</level> | <cyan>{name}</cyan>:{line} - {message}'

# key in the click context where the forced angle unit is stored
RADIANS = 'pol2cart.radians'


# ---------------------------------------------------------------------------- #
# CLI settings, passed explicitly through each conversion. `radians` is the
# unit forced by a command line flag, or None to detect it from the angle.
Options = namedtuple('Options', 'radius angle radians precision mode')


# ---------------------------------------------------------------------------- #

class Number(click.ParamType):
    """Number read from the start of a string, trailing characters ignored."""

    name = 'number'

    def convert(self, value, param, ctx):
        try:
            return parse.parse_number(value)
        except (TypeError, ValueError) as err:
            self.fail(str(err), param, ctx)


class Precision(click.ParamType):
    """Non-negative number of decimal places."""

    name = 'places'

    def convert(self, value, param, ctx):
        try:
            return parse.parse_precision(value)
        except ValueError as err:
            self.fail(str(err), param, ctx)


def _force_units(ctx, param, value):
    # Parameters are processed in command line order, so the last flag wins
    if value:
        ctx.meta[RADIANS] = (param.name == 'radians')


def setup_logging(verbose):
    if not verbose:
        return

    # turn on logging
    logger.configure(
        handlers=[dict(sink=sys.stderr, level='DEBUG', format=LOG_FORMAT)],
        activation=[('pol2cart', True)]
    )


def load_defaults():
    try:
        return get_format()
    except (TypeError, ValueError) as err:
        raise click.UsageError(f'Invalid config file: {err}') from err


# ---------------------------------------------------------------------------- #

def convert(radius, angle, options):
    """
    Convert the (possibly textual) `radius` and `angle` and return the output
    string for the configured precision and mode.
    """
    radius = parse.parse_number(radius)
    angle, radians = parse.parse_angle(str(angle), options.radians)
    point = pol2cart(radius, angle, radians)
    logger.debug('Converted {} to {}.', (radius, angle, radians), point)
    return format(point, options.precision, options.mode)


def prompt(options):
    # ask for the missing coordinates
    if options.radius is None:
        options = options._replace(radius=click.prompt(PROMPT_RADIUS))

    if options.angle is None:
        options = options._replace(angle=click.prompt(PROMPT_ANGLE))

    return options


def repl(options):
    """
    Interactive loop. Reads "(r, θ)" pairs from the user and prints the
    Cartesian coordinates until 'exit' or 'quit' is entered.
    """
    click.echo(GREETING)

    while True:
        line = click.prompt(PROMPT_PAIR)

        try:
            radius, angle = parse.parse_pair(line)
        except ValueError as err:
            click.echo(err, err=True)
            continue

        if parse.is_exit(radius) or parse.is_exit(angle):
            click.echo()
            return

        try:
            output = convert(radius, angle, options)
        except ValueError as err:
            click.echo(err, err=True)
            continue

        click.echo(output, nl=False)


# ---------------------------------------------------------------------------- #

@click.command('pol2cart', help=DESCRIPTION,
               context_settings=dict(help_option_names=['-h', '--help']))
@click.option('-i', '--interactive', is_flag=True,
              help='Invoke the interactive mode.')
@click.option('-n', '--nice', is_flag=True,
              help='Produce nice output. Each x and y coordinate is on its own '
                   'line.')
@click.option('-r', '--radius', '--rho', 'radius', type=Number(),
              help='Set the radius polar coordinate.')
@click.option('-a', '-t', '--angle', '--azimuth', '--phi', '--theta', 'angle',
              type=click.STRING,
              help='Set the angular polar coordinate, also known as theta (θ) '
                   'or the azimuth. Angle can optionally be post-fixed with any '
                   'of the following to indicate radians: r, c, rad, radian, '
                   'or radians. Otherwise, default angle units are degrees.')
@click.option('-d', '--deg', '--degrees', 'degrees', is_flag=True,
              expose_value=False, callback=_force_units,
              help='Force angle units to be degrees. This overrides the angle '
                   'post-fix.')
@click.option('-c', '--rad', '--radians', 'radians', is_flag=True,
              expose_value=False, callback=_force_units,
              help='Force angle units to be radians. This overrides the angle '
                   'post-fix.')
@click.option('-p', '--precision', type=Precision(),
              help='Sets desired decimal places of precision. Default is 3, '
                   'or the value in the user config file.')
@click.option('-v', '--verbose', is_flag=True,
              help='Print debug messages to stderr.')
@click.pass_context
def main(ctx, interactive, nice, radius, angle, precision, verbose):
    setup_logging(verbose)
    defaults = load_defaults()

    mode = (Mode.INTERACTIVE if interactive else
            Mode.NICE if nice else
            defaults.mode)
    if precision is None:
        precision = defaults.precision

    options = Options(radius, angle, ctx.meta.get(RADIANS), precision, mode)
    logger.debug('Options: {}', options)

    if interactive:
        repl(options)
        return

    options = prompt(options)

    try:
        output = convert(options.radius, options.angle, options)
    except ValueError as err:
        raise click.UsageError(str(err)) from err

    click.echo(output, nl=False)
