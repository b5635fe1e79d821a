#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""The setup script."""

from setuptools import setup, find_packages

requirements = [
    'Jinja2>=3.0',
    'click>=7.0',
]

setup_requirements = [ ]

test_requirements = [
    'pytest>=6.0',
]

setup(
    classifiers=[
        'Development Status :: 2 - Pre-Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Natural Language :: English',
        'Programming Language :: Python :: 3',
    ],
    description="Render HTML templates into HTTP responses",
    entry_points={
        'console_scripts': [
            'htmlrender=htmlrender.cli:main',
        ],
    },
    install_requires=requirements,
    extras_require={
        'test': test_requirements,
    },
    license="MIT license",
    include_package_data=True,
    keywords='htmlrender',
    name='htmlrender',
    packages=find_packages(include=['htmlrender', 'htmlrender.*']),
    python_requires='>=3.8',
    setup_requires=setup_requirements,
    tests_require=test_requirements,
    version='0.1.0',
    zip_safe=False,
)
