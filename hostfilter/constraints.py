"""Task placement constraints and vetoes."""

import enum

from hostfilter import exc


UNSATISFIED_VALUE = 'Constraint not satisfied: %s'

MISSING_LIMIT = 'Limit constraint not present: %s'

UNSATISFIED_LIMIT = 'Constraint not satisfied: %s'


class ConstraintKind(enum.Enum):
    """Enumeration of constraint body variants."""

    VALUE = 'value'

    LIMIT = 'limit'


class _Immutable(object):
    """Immutable value object, compared by key."""
    __slots__ = ()

    def _set(self, **kwargs):
        """Set attributes during construction."""
        for key, val in kwargs.items():
            object.__setattr__(self, key, val)

    def _key(self):
        """Tuple identifying the object."""
        raise NotImplementedError()

    def __setattr__(self, key, val):
        raise AttributeError('%s is immutable.' % type(self).__name__)

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._key() == other._key()  # pylint: disable=W0212

    def __hash__(self):
        return hash(self._key())


class ValueConstraint(_Immutable):
    """Host attribute must (or, if negated, must not) hold one of values."""
    __slots__ = (
        'negated',
        'values',
    )

    def __init__(self, values, negated=False):
        if isinstance(values, str):
            values = [values]

        values = frozenset(values)
        if not values:
            raise exc.InvalidInputError(
                values, 'Value constraint requires at least one value.'
            )

        self._set(values=values, negated=bool(negated))

    def _key(self):
        return (self.values, self.negated)

    def __repr__(self):
        return 'ValueConstraint(%r, negated=%r)' % (
            sorted(self.values), self.negated
        )


class LimitConstraint(_Immutable):
    """Max number of job's active tasks sharing host attribute value."""
    __slots__ = (
        'limit',
    )

    def __init__(self, limit):
        if (isinstance(limit, bool) or not isinstance(limit, int) or
                limit < 0):
            raise exc.InvalidInputError(
                limit, 'Limit must be non-negative integer: %r' % (limit,)
            )

        self._set(limit=limit)

    def _key(self):
        return (self.limit,)

    def __repr__(self):
        return 'LimitConstraint(%r)' % self.limit


_KINDS = [
    (ValueConstraint, ConstraintKind.VALUE),
    (LimitConstraint, ConstraintKind.LIMIT),
]


class Constraint(_Immutable):
    """Named constraint, body is either value or limit constraint.

    The body is not checked on construction, constraints built from
    foreign data are rejected when evaluated.
    """
    __slots__ = (
        'name',
        'body',
    )

    def __init__(self, name, body):
        if not isinstance(name, str) or not name.strip():
            raise exc.InvalidInputError(
                name, 'Constraint name must be non-blank string.'
            )

        self._set(name=name, body=body)

    @property
    def kind(self):
        """Body variant, None if body is not recognized."""
        for body_t, kind in _KINDS:
            if isinstance(self.body, body_t):
                return kind
        return None

    def _key(self):
        return (self.name, self.body)

    def __repr__(self):
        return 'Constraint(%r, %r)' % (self.name, self.body)


def value(name, values, negated=False):
    """Shortcut to create named value constraint."""
    return Constraint(name, ValueConstraint(values, negated=negated))


def limit(name, count):
    """Shortcut to create named limit constraint."""
    return Constraint(name, LimitConstraint(count))


class Veto(_Immutable):
    """Reason a host is rejected for a task placement."""
    __slots__ = (
        'reason',
    )

    def __init__(self, reason):
        self._set(reason=reason)

    def _key(self):
        return (self.reason,)

    def __repr__(self):
        return 'Veto(%r)' % self.reason

    def __str__(self):
        return self.reason


def unsatisfied_value_veto(name):
    """Veto for value constraint the host does not satisfy."""
    return Veto(UNSATISFIED_VALUE % name)


def missing_limit_veto(name):
    """Veto for limit constraint on attribute the host does not have."""
    return Veto(MISSING_LIMIT % name)


def unsatisfied_limit_veto(name):
    """Veto for limit constraint the host does not satisfy."""
    return Veto(UNSATISFIED_LIMIT % name)
