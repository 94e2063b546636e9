"""Evaluate task constraints against snapshot hosts."""

import logging

import click

from hostfilter import cli
from hostfilter import exc
from hostfilter import snapshot


_LOGGER = logging.getLogger(__name__)

_VETO_FORMATTER = cli.make_formatter(cli.VetoPrettyFormatter)


def init():
    """Return top level command handler."""

    @click.command()
    @click.option('--host', 'hosts', multiple=True,
                  help='Candidate host, all snapshot hosts by default.')
    @click.argument('snapshot_file', type=click.Path(exists=True))
    @cli.handle_exceptions([
        (exc.InvalidInputError, None),
        (exc.SchedulerError, lambda err: 'Error: %s' % err),
    ])
    def evaluate(hosts, snapshot_file):
        """Show constraint vetoes for each candidate host."""
        placement = snapshot.load(snapshot_file)
        vetoes = placement.evaluate(list(hosts) or None)

        result = [
            {
                'host': host,
                'eligible': not host_vetoes,
                'vetoes': sorted(veto.reason for veto in host_vetoes),
            }
            for host, host_vetoes in sorted(vetoes.items())
        ]
        cli.out(_VETO_FORMATTER(result))

    return evaluate
