# std
import math

# third-party
import click
import pytest
from click.testing import CliRunner

# local
from pol2cart import cli, config
from pol2cart.cli import main


# ---------------------------------------------------------------------------- #

@pytest.fixture
def run():
    """Invoke the command line interface, optionally feeding lines to prompts."""
    runner = CliRunner()

    def invoke(args, text=None):
        return runner.invoke(main, args, input=text)

    return invoke


# ---------------------------------------------------------------------------- #

@pytest.mark.parametrize(
    'args, expected',
    [(['-r', '5', '-a', '0'],
      ' 5.000\t 0.000\n'),
     (['--rho', '5', '--theta', '0'],
      ' 5.000\t 0.000\n'),
     (['-n', '-r', '2', '-a', '90'],
      'X Coord = 0.000\nY Coord =  2.000\n'),
     (['-r', '10', '-a', f'{math.pi / 2}rad'],
      '0.000\t10.000\n'),
     (['-r', '10', '--azimuth', f'{math.pi / 2}'],
      ' 9.996\t0.274\n'),
     # negative values are taken as option values
     (['-r', '1', '-a', f'{-math.pi / 2}rad'],
      '0.000\t-1.000\n'),
     (['-r', '2', '-a', '-90'],
      '0.000\t-2.000\n'),
     # explicit units override the angle post-fix in any order
     (['-d', '-r', '1', '-a', '90r'],
      '0.000\t 1.000\n'),
     (['-r', '1', '-t', '90r', '--deg'],
      '0.000\t 1.000\n'),
     (['-c', '-r', '1', '-a', '0'],
      ' 1.000\t 0.000\n'),
     (['-r', '1', '--phi', '90', '--radians'],
      '-0.448\t0.894\n'),
     # last unit flag wins
     (['-c', '-d', '-r', '1', '-a', '90'],
      '0.000\t 1.000\n'),
     (['-d', '-r', '1', '-a', '90', '-c'],
      '-0.448\t0.894\n'),
     (['-p', '1', '-r', '5', '-a', '0'],
      ' 5.0\t 0.0\n'),
     (['-r', '5', '-a', '0', '--precision', '0'],
      '  5\t  0\n')]
)
def test_main(run, args, expected):
    result = run(args)
    assert result.exit_code == 0
    assert result.output == expected


@pytest.mark.parametrize(
    'args',
    [['-r', 'abc', '-a', '0'],
     ['-r', '1', '-a', 'north'],
     ['-r', '1', '-a', '0', '--precision=-1'],
     ['-r', '1', '-a', '0', '-p', '-1'],
     ['-r', '1', '-a', '0', '-p', 'x'],
     ['-f', 'coords.txt']]
)
def test_usage_error(run, args):
    result = run(args)
    assert result.exit_code == 2
    assert 'Usage: pol2cart' in result.output


def test_help(run):
    result = run(['-h'])
    assert result.exit_code == 0
    assert 'Polar Coordinates to Cartesian Coordinates' in result.output


def test_verbose(run):
    result = run(['-v', '-r', '1', '-a', '0'])
    assert result.exit_code == 0
    assert 'DEBUG' in result.output
    assert result.output.endswith(' 1.000\t 0.000\n')


# ---------------------------------------------------------------------------- #

@pytest.mark.parametrize(
    'text',
    ['mode: fancy\n',
     'precision: -1\n',
     'colour: red\n',
     'precision: [1\n']
)
def test_invalid_user_config(run, tmp_path, monkeypatch, text):
    filename = tmp_path / 'config.yaml'
    filename.write_text(text)
    monkeypatch.setattr(config, 'get_user_path', lambda pkg='pol2cart': filename)

    result = run(['-r', '1', '-a', '0'])
    assert result.exit_code == 2
    assert 'Invalid config file' in result.output


def test_user_config_defaults(run, tmp_path, monkeypatch):
    filename = tmp_path / 'config.yaml'
    filename.write_text('mode: nice\nprecision: 1\n')
    monkeypatch.setattr(config, 'get_user_path', lambda pkg='pol2cart': filename)

    assert run(['-r', '5', '-a', '0']).output == 'X Coord =  5.0\nY Coord =  0.0\n'
    # command line overrides config
    assert run(['-r', '5', '-a', '0', '-p', '2']).output == \
        'X Coord =  5.00\nY Coord =  0.00\n'


# ---------------------------------------------------------------------------- #

def test_prompt(run):
    result = run([], '5\n0\n')
    assert result.exit_code == 0
    assert 'Please provide Radius (r): ' in result.output
    assert 'Please provide Angle (θ): ' in result.output
    assert result.output.endswith(' 5.000\t 0.000\n')


def test_prompt_angle_only(run):
    result = run(['-r', '1'], f'{math.pi}r\n')
    assert result.exit_code == 0
    assert 'Radius' not in result.output
    assert result.output.endswith('-1.000\t0.000\n')


def test_prompt_forced_units(run):
    result = run(['-r', '1', '-d'], '180r\n')
    assert result.output.endswith('-1.000\t0.000\n')


@pytest.mark.parametrize('args', [[], ['-r', '1'], ['-i']])
def test_abort(run, monkeypatch, args):
    # Ctrl-C / end of input at any prompt aborts with exit code 1

    def abort(*args, **kws):
        raise click.Abort()

    monkeypatch.setattr(cli.click, 'prompt', abort)

    result = run(args)
    assert result.exit_code == 1
    assert 'Aborted!' in result.output


# ---------------------------------------------------------------------------- #

def test_interactive(run):
    result = run(['-i'], '(5, 0)\n1, 90\nexit\n5, 5\n')
    assert result.exit_code == 0

    out = result.output
    assert 'interactive mode' in out
    assert 'Polar coordinates (r,θ): ' in out
    assert 'Cartesian Coordinates (x,y): ( 5.000, 0.000)\n\n' in out
    assert 'Cartesian Coordinates (x,y): (0.000, 1.000)\n\n' in out
    # nothing converted after exit
    assert out.count('Cartesian Coordinates') == 2


def test_interactive_quit_in_angle(run):
    result = run(['--interactive'], '1, quit\n')
    assert result.exit_code == 0
    assert 'Cartesian Coordinates' not in result.output


def test_interactive_precision(run):
    # precision may follow -i
    result = run(['-i', '-p', '1'], '2,0\nquit\n')
    assert result.exit_code == 0
    assert '( 2.0, 0.0)' in result.output


def test_interactive_units(run):
    # post-fix detected for every line
    result = run(['-i'], f'1, {math.pi}rad\n1, 180\nexit\n')
    assert result.exit_code == 0
    assert result.output.count('(-1.000,0.000)') == 2


def test_interactive_forced_units(run):
    result = run(['-i', '-c'], '1, 90\n1, 90deg\nexit\n')
    assert result.exit_code == 0
    assert result.output.count('(-0.448,0.894)') == 2


def test_interactive_bad_input(run):
    result = run(['-i'], 'abc, 1\n1, 2, 3\n5, 0\nquit\n')
    assert result.exit_code == 0

    out = result.output
    assert 'Could not parse a number' in out
    assert 'Expected two comma separated values' in out
    assert '( 5.000, 0.000)' in out
