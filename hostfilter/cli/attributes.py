"""Show snapshot host attributes."""

import click

from hostfilter import cli
from hostfilter import exc
from hostfilter import snapshot


_ATTRIBUTES_FORMATTER = cli.make_formatter(cli.AttributesPrettyFormatter)


def init():
    """Return top level command handler."""

    @click.command()
    @click.argument('snapshot_file', type=click.Path(exists=True))
    @click.argument('host', required=False)
    @cli.handle_exceptions([
        (exc.InvalidInputError, None),
    ])
    def attributes(snapshot_file, host):
        """Show attributes of snapshot hosts."""
        placement = snapshot.load(snapshot_file)
        hosts = sorted(placement.hosts)
        if host is not None:
            if host not in placement.hosts:
                raise exc.InvalidInputError(host, 'Unknown host: %s' % host)
            hosts = [host]

        result = [
            {'host': name, 'attribute': attr, 'values': values}
            for name in hosts
            for attr, values in sorted(placement.hosts[name].to_dict().items())
        ]
        cli.out(_ATTRIBUTES_FORMATTER(result))

    return attributes
