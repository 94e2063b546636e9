"""Host filter command line helpers."""


import copy
import functools
import importlib
import json
import logging
import logging.config
import pkgutil
import sys
import tempfile
import traceback

import click
import prettytable

import hostfilter.logging
from hostfilter import utils


__path__ = pkgutil.extend_path(__path__, __name__)

EXIT_CODE_DEFAULT = 1

OUTPUT_FORMAT = 'pretty'


def init_logger(name):
    """Initialize logger."""
    try:
        # logging configuration files in json format
        conf = hostfilter.logging.load_logging_conf(name)
        logging.config.dictConfig(conf)
    except (IOError, ValueError):
        with tempfile.NamedTemporaryFile(delete=False, mode='w') as f:
            traceback.print_exc(file=f)
            click.echo('Unable to load log conf: %s [ %s ]' % (name, f.name),
                       err=True)


def make_commands(module_name):
    """Make a Click multicommand from all submodules of the module."""

    class MCommand(click.Group):
        """Host filter CLI driver."""

        def list_commands(self, ctx):
            """Return list of commands in the module."""
            climod = importlib.import_module(module_name)
            commands = set()
            for _finder, name, _ispkg in pkgutil.iter_modules(
                    climod.__path__):
                commands.add(name)

            return sorted([cmd.replace('_', '-') for cmd in commands])

        def get_command(self, ctx, cmd_name):
            """Return dymanically constructed command."""
            full_name = '.'.join([module_name, cmd_name.replace('-', '_')])
            try:
                mod = importlib.import_module(full_name)
            except ImportError as import_err:
                if import_err.name != full_name:
                    click.echo('dependency error: %s - %s' %
                               (full_name, import_err), err=True)
                return None

            return mod.init()

    return MCommand


def out(string, *args):
    """Print to stdout."""
    if args:
        string = string % args

    click.echo(string)


def handle_exceptions(exclist):
    """Decorator that will handle exceptions and output friendly messages."""

    def wrap(f):
        """Returns decorator that wraps/handles exceptions."""

        @functools.wraps(f)
        def wrapped_f(*args, **kwargs):
            """Wrapped function."""
            # Copy on each call, handlers are consumed while unwinding.
            return _handle(copy.copy(exclist), f, *args, **kwargs)

        @functools.wraps(f)
        def _handle_any(*args, **kwargs):
            """Default exception handler."""
            try:
                return wrapped_f(*args, **kwargs)
            except Exception as unhandled:  # pylint: disable=W0703
                with tempfile.NamedTemporaryFile(delete=False,
                                                 mode='w') as tmp:
                    traceback.print_exc(file=tmp)
                    click.echo('Error: %s [ %s ]' % (unhandled, tmp.name),
                               err=True)

                sys.exit(EXIT_CODE_DEFAULT)

        return _handle_any

    return wrap


def _handle(exclist, f, *args, **kwargs):
    """Invoke f, translating exceptions from exclist into exit code."""
    if not exclist:
        return f(*args, **kwargs)

    exc, handler = exclist.pop(0)
    try:
        return _handle(exclist, f, *args, **kwargs)
    except exc as err:
        if isinstance(handler, str):
            click.echo(handler, err=True)
        elif handler is None:
            click.echo(str(err), err=True)
        else:
            click.echo(handler(err), err=True)

        sys.exit(EXIT_CODE_DEFAULT)


def _make_table(columns, header=False):
    """Make a table object for output."""
    table = prettytable.PrettyTable(columns)
    for col in columns:
        table.align[col] = 'l'

    table.set_style(prettytable.PLAIN_COLUMNS)
    # For some reason, headers must be disable after set_style.
    table.header = header

    table.left_padding_width = 0
    table.right_padding_width = 2
    return table


def _cell(item, column, key, fmt):
    """Constructs a value in table cell."""
    if key is None:
        key = column

    raw_value = item.get(key)
    if fmt is not None:
        return fmt(raw_value)

    if raw_value is None:
        return '-'

    if isinstance(raw_value, (list, tuple, set, frozenset)):
        return ','.join(map(str, raw_value)) or '-'

    return raw_value


def list_to_table(items, schema, header=True):
    """Display list of items as table."""
    columns = [column for column, _, _ in schema]
    table = _make_table(columns, header=header)
    for item in items:
        table.add_row([_cell(item, column, key, fmt)
                       for column, key, fmt in schema])

    return table


def make_list_to_table(schema, header=True):
    """Return list to table function given schema."""
    return lambda items: list_to_table(items, schema, header)


def make_formatter(pretty_formatter):
    """Makes a formatter."""

    def _format(item, how=None):
        """Formats the object given global format setting."""
        if how is None:
            how = OUTPUT_FORMAT

        formatters = {
            'json': lambda obj: json.dumps(obj, indent=4, sort_keys=True),
            'yaml': utils.dump_yaml,
        }

        if pretty_formatter is not None:
            try:
                formatters['pretty'] = pretty_formatter.format
            except AttributeError:
                formatters['pretty'] = pretty_formatter

        if how in formatters:
            return formatters[how](item)
        else:
            return str(item)

    return _format


class VetoPrettyFormatter(object):
    """Pretty table host vetoes formatter."""

    @staticmethod
    def format(item):
        """Return pretty-formatted item."""
        schema = [
            ('host', None, None),
            ('eligible', None, lambda value: 'yes' if value else 'no'),
            ('vetoes', None, lambda vetoes: '; '.join(vetoes) or '-'),
        ]

        return make_list_to_table(schema)(item)


class AttributesPrettyFormatter(object):
    """Pretty table host attributes formatter."""

    @staticmethod
    def format(item):
        """Return pretty-formatted item."""
        schema = [
            ('host', None, None),
            ('attribute', None, None),
            ('values', None, None),
        ]

        return make_list_to_table(schema)(item)

