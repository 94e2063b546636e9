"""Cluster snapshot describing a placement request.

Snapshot is a YAML document with the job key, the task's constraints, the
candidate hosts and their attributes, and the job's active tasks::

    job: proid.hello
    constraints:
      - name: rack
        limit: 1
      - name: dc
        value: {values: [east]}
    hosts:
      host1: {rack: [r1], dc: [east]}
    tasks:
      - {id: 'proid.hello#1', host: host1}
"""

import io
import logging

import yaml

from hostfilter import attributes
from hostfilter import constraints
from hostfilter import exc
from hostfilter import scheduling
from hostfilter import schema
from hostfilter import tasks

_LOGGER = logging.getLogger(__name__)


class Snapshot(object):
    """Placement request and the cluster state it is evaluated against."""
    __slots__ = (
        'job',
        'constraints',
        'hosts',
        'tasks',
    )

    def __init__(self, job, task_constraints, hosts=None, active_tasks=None):
        self.job = job
        self.constraints = list(task_constraints)
        self.hosts = dict(hosts or {})
        self.tasks = list(active_tasks or [])

    def attribute_loader(self):
        """Return attribute loader over snapshot hosts."""
        return tasks.StaticAttributeLoader(self.hosts)

    def scheduling_filter(self):
        """Return scheduling filter over snapshot state."""
        return scheduling.SchedulingFilter(
            lambda: self.tasks,
            self.attribute_loader()
        )

    def evaluate(self, hosts=None):
        """Return {host: vetoes} for all (or selected) snapshot hosts."""
        if hosts is None:
            hosts = list(self.hosts)

        unknown = [host for host in hosts if host not in self.hosts]
        if unknown:
            raise exc.InvalidInputError(
                unknown, 'Unknown host(s): %s' % ', '.join(unknown)
            )

        return self.scheduling_filter().filter_hosts(
            self.job,
            self.constraints,
            {host: self.hosts[host] for host in hosts}
        )


def _constraint(data):
    """Create constraint from validated dict."""
    if 'limit' in data:
        return constraints.limit(data['name'], data['limit'])

    value = data['value']
    return constraints.value(
        data['name'], value['values'], negated=value.get('negated', False)
    )


def from_dict(data):
    """Create snapshot from dict."""
    schema.validate(data, schema.SNAPSHOT)

    return Snapshot(
        data['job'],
        [_constraint(item) for item in data['constraints']],
        {
            host: attributes.AttributeCatalog.from_dict(host_attributes)
            for host, host_attributes in data.get('hosts', {}).items()
        },
        [
            tasks.ActiveTask(item['id'], item['host'])
            for item in data.get('tasks', [])
        ]
    )


def load(source):
    """Load snapshot from file name or stream."""
    try:
        if isinstance(source, str):
            _LOGGER.debug('Loading snapshot: %s', source)
            with io.open(source) as f:
                data = yaml.safe_load(f)
        else:
            data = yaml.safe_load(source)
    except yaml.YAMLError as err:
        raise exc.InvalidInputError(source, 'Invalid snapshot: %s' % err)

    if data is None:
        raise exc.InvalidInputError(source, 'Empty snapshot.')

    return from_dict(data)
