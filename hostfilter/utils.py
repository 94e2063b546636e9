"""Host filter utility functions."""

import yaml

from hostfilter import exc


def check_not_blank(value, name):
    """Raise InvalidInputError unless value is non-blank string."""
    if not isinstance(value, str) or not value.strip():
        raise exc.InvalidInputError(
            value, '%s must be non-blank string.' % name
        )
    return value


def check_callable(value, name):
    """Raise InvalidInputError unless value is callable."""
    if value is None or not callable(value):
        raise exc.InvalidInputError(value, '%s must be callable.' % name)
    return value


def _repr_tuple(dumper, data):
    """Fix yaml tuple representation (use list)."""
    return dumper.represent_list(list(data))


def _repr_none(dumper, data_unused):
    """Fix yaml None representation (use ~)."""
    return dumper.represent_scalar('tag:yaml.org,2002:null', '~')


class _Dumper(yaml.SafeDumper):  # pylint: disable=R0901
    """YAML dumper with host filter representers."""
    pass


_Dumper.add_representer(tuple, _repr_tuple)
_Dumper.add_representer(type(None), _repr_none)


def dump_yaml(obj):
    """Returns yaml representation of the object."""
    return yaml.dump(obj,
                     Dumper=_Dumper,
                     default_flow_style=False,
                     explicit_start=True,
                     explicit_end=True)
