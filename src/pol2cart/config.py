"""
Default settings. Values are read from the `config.yaml` file that ships with
the package, and overridden key by key by a `config.yaml` in the user config
folder, if one exists.
"""

# std
from pathlib import Path

# third-party
import yaml
from loguru import logger
from platformdirs import user_config_path

# relative
from .pprint import Format


# ---------------------------------------------------------------------------- #
CACHE = {}
FILENAME = 'config.yaml'
SOURCE = Path(__file__).parent / FILENAME
KEYS = set(Format._fields)


# ---------------------------------------------------------------------------- #

def get_user_path(pkg='pol2cart'):
    return user_config_path(pkg) / FILENAME


def load_yaml(filename):
    with Path(filename).open('r') as file:
        return yaml.safe_load(file) or {}


def load(filename):
    filename = Path(filename)
    if filename not in CACHE:
        CACHE[filename] = _load(filename)

    return CACHE[filename]


def _load(filename):
    if not filename.exists():
        raise FileNotFoundError(f"Non-existent file: '{filename!s}'")

    try:
        config = load_yaml(filename)
    except yaml.YAMLError as err:
        raise ValueError(f'Could not parse config file {filename!s}.') from err

    if not isinstance(config, dict):
        raise ValueError(f'Config file {filename!s} should contain a mapping, '
                         f'not {type(config).__name__!r}.')

    if unknown := set(config) - KEYS:
        raise ValueError(f'Unknown key(s) in config file {filename!s}: '
                         f'{sorted(unknown)}. Valid keys are: {sorted(KEYS)}.')

    logger.debug('Loaded config file: {!s}.', filename)
    return config


def load_config(filename=None, user=True):
    """
    Load settings.

    Parameters
    ----------
    filename : str or Path, optional
        Config file overriding the packaged defaults. If not given, the user
        config file is used when `user` is true and the file exists.
    user : bool
        Whether to look for a user config file.

    Returns
    -------
    dict
    """
    config = dict(load(SOURCE))

    if filename is None and user:
        filename = get_user_path()
        if not filename.exists():
            logger.debug('No user config at {!s}.', filename)
            filename = None

    if filename:
        config.update(load(filename))

    return config


def get_format(filename=None, user=True):
    """Output preferences from the config files."""
    return Format(**load_config(filename, user))
