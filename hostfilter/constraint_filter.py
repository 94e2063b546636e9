"""Task constraint filter."""

import collections.abc
import logging

from hostfilter import attributes
from hostfilter import constraints
from hostfilter import exc
from hostfilter import matchers
from hostfilter import utils

_LOGGER = logging.getLogger(__name__)


def _catalog(host_attributes):
    """Convert host attributes to AttributeCatalog."""
    if host_attributes is None:
        raise exc.InvalidInputError(
            host_attributes, 'Host attributes are required.'
        )

    if isinstance(host_attributes, attributes.AttributeCatalog):
        return host_attributes

    if isinstance(host_attributes, collections.abc.Mapping):
        if all(isinstance(attribute, attributes.Attribute)
               for attribute in host_attributes.values()):
            return attributes.AttributeCatalog(host_attributes)
        return attributes.AttributeCatalog.from_dict(host_attributes)

    return attributes.AttributeCatalog.from_attributes(host_attributes)


class ConstraintFilter(object):
    """Determines whether a task's constraints are satisfied by a host."""
    __slots__ = (
        'job_key',
        'active_tasks_supplier',
        'attribute_loader',
        'host_attributes',
    )

    def __init__(self, job_key, active_tasks_supplier, attribute_loader,
                 host_attributes):
        """Creates a new constraint filter for a given job.

        :param job_key:
            Key for the job.
        :param active_tasks_supplier:
            Callable returning the job's active tasks (if necessary).
        :param attribute_loader:
            Callable (host, name) returning host attribute (if necessary).
        :param host_attributes:
            The attributes of the host to test against, AttributeCatalog,
            {name: Attribute} or {name: [values]} dict, or sequence of
            Attribute.
        """
        self.job_key = utils.check_not_blank(job_key, 'Job key')
        self.active_tasks_supplier = utils.check_callable(
            active_tasks_supplier, 'Active tasks supplier'
        )
        self.attribute_loader = utils.check_callable(
            attribute_loader, 'Attribute loader'
        )
        self.host_attributes = _catalog(host_attributes)

    def apply(self, constraint):
        """Evaluate single constraint, return Veto or None."""
        attribute = self.host_attributes.find(constraint.name)
        kind = constraint.kind

        if kind is constraints.ConstraintKind.VALUE:
            if matchers.value_matches(attribute, constraint.body):
                return None
            return constraints.unsatisfied_value_veto(constraint.name)

        elif kind is constraints.ConstraintKind.LIMIT:
            if attribute is None:
                return constraints.missing_limit_veto(constraint.name)

            satisfied = matchers.limit_matches(
                attribute,
                self.job_key,
                constraint.body.limit,
                self.active_tasks_supplier(),
                self.attribute_loader
            )
            if satisfied:
                return None
            return constraints.unsatisfied_limit_veto(constraint.name)

        else:
            _LOGGER.warning('Failed to recognize the constraint type: %r',
                            constraint.body)
            raise exc.UnknownConstraintError(constraint.name, constraint.body)

    def evaluate(self, task_constraints):
        """Evaluate all constraints, return set of vetoes.

        Empty set means the host is eligible.
        """
        vetoes = set()
        for constraint in task_constraints:
            veto = self.apply(constraint)
            if veto is not None:
                _LOGGER.debug('%s: %s', self.job_key, veto)
                vetoes.add(veto)

        return vetoes
