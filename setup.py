# -*- coding: utf-8 -*-
#
# Copyright (C) 2019 Vinay Sajip.
# Licensed to the Python Software Foundation under a contributor agreement.
# See LICENSE.txt and CONTRIBUTORS.txt.
#
from os.path import join, dirname
import sys

import setuptools

import reqlib


class TestCommand(setuptools.Command):
    user_options = []

    def run(self):
        sys.path.append(join(dirname(__file__), 'tests'))
        import test_all
        sys.exit(test_all.main())

    def initialize_options(self):
        pass

    def finalize_options(self):
        pass

setuptools.setup(
    name='reqlib',
    version=reqlib.__version__,
    description='Parser for Python dependency specifications',
    long_description=('Parsing of PEP 508 dependency specifications and '
                      'environment markers, with PEP 440 version ordering '
                      'and version specifier matching.'),
    license='Python license',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: Python Software Foundation License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Software Development',
    ],
    platforms='any',
    python_requires='>=3.8',
    packages=[
        'reqlib',
    ],
    package_data={
        'reqlib': ['*.pyi'],
    },
    extras_require={
        'test': ['pytest'],
    },
    cmdclass={
        'test': TestCommand,
    },
)
