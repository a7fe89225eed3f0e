#!/usr/bin/env python
"""Ponci setup.py.
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
    name='ponci',
    version='1.0',
    description='Poor man\'s cgroups interface.',
    package_dir={'': 'lib/python'},
    packages=setuptools.find_packages('lib/python'),
    package_data={'ponci.logging': ['*.json']},
    python_requires='>=3.8',
    install_requires=_read_requires('requirements.txt'),
    extras_require={
        'test': _read_requires('test-requirements.txt'),
    },
    entry_points={
        'console_scripts': [
            'ponci = ponci.console:run',
        ],
    },
)
