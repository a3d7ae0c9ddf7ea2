#  ___________________________________________________________________________
#
#  extmap: Set Algebra for Python Mappings
#  Copyright (c) 2008-2025
#  National Technology and Engineering Solutions of Sandia, LLC
#  Under the terms of Contract DE-NA0003525 with National Technology and
#  Engineering Solutions of Sandia, LLC, the U.S. Government retains certain
#  rights in this software.
#  This software is distributed under the 3-clause BSD License.
#  ___________________________________________________________________________

"""
Installer for the extmap package.
"""

import os
from setuptools import setup, find_packages

_here = os.path.dirname(os.path.abspath(__file__))


def _read(*path):
    with open(os.path.join(_here, *path)) as FILE:
        return FILE.read()


def _version():
    # exec info.py directly: importing extmap here would need an
    # installed copy
    namespace = {'__name__': 'extmap.version.info'}
    exec(_read('extmap', 'version', 'info.py'), namespace)
    return namespace['__version__']


setup(
    name='extmap',
    version=_version(),
    description='Set algebra (intersection, union, difference, ...) over '
    'ordered Python mappings, plus a dict replacement with default values',
    long_description=_read('README.md'),
    long_description_content_type='text/markdown',
    license='BSD-3-Clause',
    python_requires='>=3.9',
    packages=find_packages(exclude=('scripts',)),
    install_requires=[],
    extras_require={'tests': ['coverage', 'parameterized', 'pytest']},
)
