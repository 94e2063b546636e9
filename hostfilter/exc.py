"""Host filter exceptions.
"""


class HostFilterError(Exception):
    """Base class for all host filter errors"""

    pass


class InvalidInputError(HostFilterError):
    """Fatal error, indicating incorrect input."""

    def __init__(self, source, msg):
        self.source = source
        self.message = msg
        super(InvalidInputError, self).__init__(msg)

    def __str__(self):
        return self.message


class SchedulerError(HostFilterError):
    """Scheduler internal consistency error, never a placement rejection."""

    def __init__(self, msg):
        self.message = msg
        super(SchedulerError, self).__init__(msg)

    def __str__(self):
        return self.message


class UnknownConstraintError(SchedulerError):
    """Thrown when constraint body is neither value nor limit."""

    def __init__(self, name, body):
        self.name = name
        self.body = body
        super(UnknownConstraintError, self).__init__(
            'Failed to recognize the constraint type: %s' %
            type(body).__name__
        )
