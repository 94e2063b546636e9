"""Host attributes."""

import collections.abc
import logging

from hostfilter import exc

_LOGGER = logging.getLogger(__name__)


class Attribute(object):
    """Named, multi-valued host attribute (rack, datacenter, etc.)."""
    __slots__ = (
        'name',
        'values',
    )

    def __init__(self, name, values):
        if isinstance(values, str):
            values = [values]

        object.__setattr__(self, 'name', name)
        object.__setattr__(self, 'values', frozenset(values))

    def __setattr__(self, key, value):
        raise AttributeError('Attribute is immutable.')

    def __eq__(self, other):
        if not isinstance(other, Attribute):
            return NotImplemented
        return self.name == other.name and self.values == other.values

    def __hash__(self):
        return hash((self.name, self.values))

    def __repr__(self):
        return 'Attribute(%r, %r)' % (self.name, sorted(self.values))

    def overlaps(self, values):
        """Check if any of the values is shared with the attribute."""
        return not self.values.isdisjoint(values)


class AttributeCatalog(collections.abc.Mapping):
    """Attributes of a single host, indexed by attribute name."""
    __slots__ = (
        '_attributes',
    )

    def __init__(self, attributes=None):
        """Create catalog from {name: Attribute} mapping."""
        attributes = dict(attributes or {})
        for name, attribute in attributes.items():
            if not isinstance(attribute, Attribute) or attribute.name != name:
                raise exc.InvalidInputError(
                    name, 'Attribute does not match name: %s' % name
                )

        self._attributes = attributes

    @classmethod
    def from_attributes(cls, attributes):
        """Create catalog from sequence of attributes.

        Names must be unique, a host exposing the same attribute name twice
        is ambiguous and is rejected.
        """
        indexed = {}
        for attribute in attributes:
            if attribute.name in indexed:
                raise exc.InvalidInputError(
                    attribute.name,
                    'Duplicate attribute: %s' % attribute.name
                )
            indexed[attribute.name] = attribute

        return cls(indexed)

    @classmethod
    def from_dict(cls, data):
        """Create catalog from {name: [values]} dictionary."""
        return cls({
            name: Attribute(name, values)
            for name, values in data.items()
        })

    def find(self, name):
        """Return attribute given name or None."""
        return self._attributes.get(name)

    def to_dict(self):
        """Return {name: [values]} representation."""
        return {
            name: sorted(attribute.values)
            for name, attribute in self._attributes.items()
        }

    def __getitem__(self, name):
        return self._attributes[name]

    def __iter__(self):
        return iter(self._attributes)

    def __len__(self):
        return len(self._attributes)

    def __repr__(self):
        return 'AttributeCatalog(%r)' % list(self._attributes.values())
