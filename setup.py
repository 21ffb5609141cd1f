#!/usr/bin/env python

"""
    tinybox
    =======

    tinybox lays out HTML documents styled with CSS into boxes, and paints
    them to PNG.

"""

import sys

from setuptools import find_packages, setup

if sys.version_info.major < 3:
    raise RuntimeError('tinybox does not support Python 2.x.')

setup(
    name='tinybox',
    version='0.1.0',
    description='A tiny HTML and CSS layout engine',
    long_description=__doc__,
    license='BSD',
    python_requires='>=3.9',
    packages=find_packages(include=['tinybox', 'tinybox.*']),
    install_requires=[
        'tinycss2>=1.3.0',
        'cssselect2>=0.7.0',
        'tinyhtml5>=2.0.0',
        'Pillow>=9.1.0',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': ['tinybox = tinybox.__main__:main'],
    },
)
