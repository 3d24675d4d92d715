#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""The setup script."""

from setuptools import setup, find_packages

with open('README.rst') as readme_file:
    readme = readme_file.read()

with open('requirements.txt') as r:
    requirements = [line.strip() for line in r.readlines()
                    if line.strip() and not line.startswith('#')]

test_requirements = ['pytest', 'munch']

setup(
    name='capdo',
    version='0.1.0',
    description='bootstrap user-data for Cluster API machines',
    long_description=readme,
    packages=find_packages(exclude=['tests', 'tests.*']),
    python_requires='>=3.8',
    install_requires=requirements,
    tests_require=test_requirements,
    extras_require={'test': test_requirements},
    entry_points={
        'console_scripts': [
            'capdo = capdo.capdo:main',
        ],
    },
)
