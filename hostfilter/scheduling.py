"""Collects constraint vetoes for candidate hosts of a placement attempt."""

import logging

from hostfilter import attributes
from hostfilter import constraint_filter
from hostfilter import tasks
from hostfilter import utils

_LOGGER = logging.getLogger(__name__)


class SchedulingFilter(object):
    """Builds constraint filter for each candidate host.

    Active tasks are fetched at most once per placement attempt, i.e. per
    filter() or filter_hosts() call, and shared by all limit constraints.
    """
    __slots__ = (
        'active_tasks_supplier',
        'attribute_loader',
    )

    def __init__(self, active_tasks_supplier, attribute_loader):
        self.active_tasks_supplier = utils.check_callable(
            active_tasks_supplier, 'Active tasks supplier'
        )
        self.attribute_loader = utils.check_callable(
            attribute_loader, 'Attribute loader'
        )

    def _host_attributes(self, host, task_constraints):
        """Resolve constrained attributes of the host via the loader."""
        found = []
        for name in sorted({constraint.name
                            for constraint in task_constraints}):
            attribute = self.attribute_loader(host, name)
            if attribute is not None:
                found.append(attribute)

        return attributes.AttributeCatalog.from_attributes(found)

    def _filter(self, job_key, task_constraints, host, host_attributes,
                supplier):
        """Evaluate constraints against single host."""
        if host_attributes is None:
            host_attributes = self._host_attributes(host, task_constraints)

        vetoes = constraint_filter.ConstraintFilter(
            job_key,
            supplier,
            self.attribute_loader,
            host_attributes
        ).evaluate(task_constraints)

        if vetoes:
            _LOGGER.info('%s: host %s vetoed: %s', job_key, host,
                         ', '.join(sorted(veto.reason for veto in vetoes)))
        return vetoes

    def filter(self, job_key, task_constraints, host, host_attributes=None):
        """Return set of vetoes for the host, empty if host is eligible."""
        task_constraints = list(task_constraints)
        return self._filter(
            job_key,
            task_constraints,
            host,
            host_attributes,
            tasks.memoize(self.active_tasks_supplier)
        )

    def filter_hosts(self, job_key, task_constraints, hosts):
        """Return {host: vetoes} for all candidate hosts.

        Hosts can be given as list of names (attributes resolved through the
        loader) or as {host: host attributes} mapping.
        """
        task_constraints = list(task_constraints)
        if not isinstance(hosts, dict):
            hosts = dict.fromkeys(hosts)

        supplier = tasks.memoize(self.active_tasks_supplier)
        return {
            host: self._filter(
                job_key, task_constraints, host, host_attributes, supplier
            )
            for host, host_attributes in hosts.items()
        }
