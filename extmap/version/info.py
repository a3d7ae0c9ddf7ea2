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

# Bump these for each release
major = 1
minor = 0
micro = 0
releaselevel = 'final'
serial = 0

version_info = (major, minor, micro, releaselevel, serial)

__version__ = f'{major}.{minor}.{micro}'
if releaselevel != 'final':
    __version__ += f'.dev{serial}'

version = __version__
if releaselevel != 'final':
    version += f' ({releaselevel})'
