"""Active tasks and attribute loaders.

The constraint filter does not own cluster state, it receives two read-only
capabilities from the caller: a supplier returning the job's active tasks
and a loader resolving a named attribute of a given host.
"""

import abc
import logging
import threading

from hostfilter import attributes

_LOGGER = logging.getLogger(__name__)


class ActiveTask(object):
    """Currently scheduled task of a job."""
    __slots__ = (
        'task_id',
        'host',
    )

    def __init__(self, task_id, host):
        self.task_id = task_id
        self.host = host

    def __eq__(self, other):
        if not isinstance(other, ActiveTask):
            return NotImplemented
        return (self.task_id, self.host) == (other.task_id, other.host)

    def __hash__(self):
        return hash((self.task_id, self.host))

    def __repr__(self):
        return 'ActiveTask(%r, %r)' % (self.task_id, self.host)


class AttributeLoader(object, metaclass=abc.ABCMeta):
    """Base class for host attribute loaders."""

    @abc.abstractmethod
    def load(self, host, name):
        """Return named attribute of the host, None if not found."""
        pass

    def __call__(self, host, name):
        return self.load(host, name)


class StaticAttributeLoader(AttributeLoader):
    """Loads attributes from {host: AttributeCatalog} mapping."""

    def __init__(self, hosts):
        self.hosts = {
            host: _as_catalog(catalog)
            for host, catalog in hosts.items()
        }

    def load(self, host, name):
        """Return named attribute of the host, None if not found."""
        catalog = self.hosts.get(host)
        if catalog is None:
            _LOGGER.debug('Unknown host: %s', host)
            return None

        return catalog.find(name)


def _as_catalog(value):
    """Convert {name: [values]} to catalog if necessary."""
    if isinstance(value, attributes.AttributeCatalog):
        return value
    return attributes.AttributeCatalog.from_dict(value)


def memoize(supplier):
    """Return supplier that calls the wrapped supplier at most once.

    Intended to share one active task snapshot between all limit
    constraints (and hosts) of a single placement attempt.
    """
    lock = threading.Lock()
    cache = []

    def _memoized():
        """Return cached supplier result."""
        with lock:
            if not cache:
                cache.append(supplier())
            return cache[0]

    return _memoized
