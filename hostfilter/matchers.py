"""Value and limit constraint evaluation."""

import logging

_LOGGER = logging.getLogger(__name__)


def value_matches(attribute, constraint):
    """Check if host attribute satisfies value constraint.

    A negated constraint ("must not be one of") is satisfied when the host
    does not have the attribute at all, positive constraint is not.
    """
    if attribute is None:
        return constraint.negated

    overlap = attribute.overlaps(constraint.values)
    return overlap != constraint.negated


def limit_matches(attribute, job_key, limit, active_tasks, loader):
    """Check if placing one more task of the job violates the limit.

    Counts job's active tasks placed on hosts which share at least one
    attribute value with the candidate host. The candidate placement itself
    counts toward the limit, so the constraint is satisfied only while the
    count is strictly less than the limit.

    Tasks whose host attribute can not be resolved are not counted.
    """
    count = 0
    for task in active_tasks:
        task_attribute = loader(task.host, attribute.name)
        if task_attribute is None:
            _LOGGER.debug('%s: %s - no %s attribute on %s',
                          job_key, task.task_id, attribute.name, task.host)
            continue

        if task_attribute.overlaps(attribute.values):
            count += 1

    _LOGGER.debug('%s: %s=%s, tasks: %d, limit: %d',
                  job_key, attribute.name, sorted(attribute.values),
                  count, limit)
    return count < limit
