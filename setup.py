#!/usr/bin/env python
"""Host filter setup.py.
"""

import io

import setuptools


def _read_requires(filename):
    reqs = []
    with io.open(filename) as f:
        for line in f:
            line = line.split('#', 1)[0].strip()
            if line:
                reqs.append(line)
    return reqs


setuptools.setup(
    name='hostfilter',
    version='1.0',
    description='Host placement constraint filter.',
    packages=setuptools.find_packages(exclude=['tests', 'tests.*']),
    package_data={
        'hostfilter.logging': ['*.json'],
    },
    python_requires='>=3.6',
    install_requires=_read_requires('requirements.txt'),
    extras_require={
        'test': _read_requires('test-requirements.txt'),
    },
    entry_points={
        'console_scripts': [
            'hostfilter=hostfilter.console:run',
        ],
    },
)
