"""Host filter console entry point.
"""

import logging

import click

from hostfilter import cli
from hostfilter import logging as hl


@click.group(cls=cli.make_commands('hostfilter.cli'))
@click.option('--outfmt', type=click.Choice(['json', 'yaml']))
@click.option('--debug/--no-debug',
              help='Sets logging level to debug',
              is_flag=True, default=False)
def run(outfmt, debug):
    """Host constraint filter CLI."""
    cli.OUTPUT_FORMAT = outfmt or 'pretty'

    # Default logging to cli.json, at WARNING, unless --debug
    cli.init_logger('cli.json')
    if debug:
        hl.set_log_level(logging.DEBUG)
