"""
Build script. Project metadata lives in `pyproject.toml`.
"""

# std
import os

# third-party
from setuptools import Command, setup


# ---------------------------------------------------------------------------- #

class CleanCommand(Command):
    """Custom clean command to tidy up the project root."""

    user_options = []

    def initialize_options(self):
        pass

    def finalize_options(self):
        pass

    def run(self):
        os.system('rm -vrf ./build ./dist ./*.pyc ./*.tgz ./src/*.egg-info')


# Main
# ---------------------------------------------------------------------------- #
setup(
    include_package_data=True,
    cmdclass={'clean': CleanCommand}
)
