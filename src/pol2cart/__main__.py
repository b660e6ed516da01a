"""
Run the command line interface: `python -m pol2cart`.
"""

# relative
from .cli import main


main(prog_name='pol2cart')
