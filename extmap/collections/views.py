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

from .algebra import _check_mapping
from .orderedset import OrderedSet


def key_view(mapping):
    """Return the keys of `mapping` as an :class:`OrderedSet`

    The view is a snapshot: later changes to `mapping` are not
    reflected.  It supports the named set operations (``intersection``,
    ``union``, ``difference``, ``symmetric_difference``,
    ``issubset``, ``issuperset``, ``isdisjoint``) against any
    iterable, e.g. ``key_view(a).intersection(b.keys())``.

    """
    _check_mapping(mapping, 'mapping')
    return OrderedSet(mapping.keys())


def value_view(mapping):
    """Return the distinct values of `mapping` as an :class:`OrderedSet`

    Values that appear under several keys are included once, in the
    position of their first occurrence.  Unhashable values are compared
    by identity.

    """
    _check_mapping(mapping, 'mapping')
    return OrderedSet(mapping.values())
