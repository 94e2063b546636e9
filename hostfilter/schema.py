"""Helper tools for jsonschema."""

import jsonschema

from hostfilter import exc


_NAME = {
    'type': 'string',
    'pattern': r'\S',
}

_VALUES = {
    'type': 'array',
    'items': {'type': 'string'},
}

VALUE_CONSTRAINT = {
    'type': 'object',
    'additionalProperties': False,
    'required': ['values'],
    'properties': {
        'values': dict(_VALUES, minItems=1),
        'negated': {'type': 'boolean'},
    },
}

CONSTRAINT = {
    'type': 'object',
    'additionalProperties': False,
    'required': ['name'],
    'properties': {
        'name': _NAME,
        'value': VALUE_CONSTRAINT,
        'limit': {'type': 'integer', 'minimum': 0},
    },
    'oneOf': [
        {'required': ['value']},
        {'required': ['limit']},
    ],
}

HOST_ATTRIBUTES = {
    'type': 'object',
    'additionalProperties': _VALUES,
}

TASK = {
    'type': 'object',
    'additionalProperties': False,
    'required': ['id', 'host'],
    'properties': {
        'id': {'type': 'string'},
        'host': _NAME,
    },
}

SNAPSHOT = {
    'type': 'object',
    'additionalProperties': False,
    'required': ['job', 'constraints'],
    'properties': {
        'job': _NAME,
        'constraints': {
            'type': 'array',
            'items': CONSTRAINT,
        },
        'hosts': {
            'type': 'object',
            'additionalProperties': HOST_ATTRIBUTES,
        },
        'tasks': {
            'type': 'array',
            'items': TASK,
        },
    },
}


def validate(data, schema):
    """Validate data against the schema, raise InvalidInputError."""
    validator = jsonschema.Draft4Validator(schema)
    error = jsonschema.exceptions.best_match(validator.iter_errors(data))
    if error is not None:
        path = '/'.join(str(elem) for elem in error.absolute_path)
        raise exc.InvalidInputError(
            path or '/', '%s: %s' % (path or '/', error.message)
        )

    return data
