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

"""Set algebra free functions returning :class:`ExtendedMap` results.

These mirror the :class:`ExtendedMap` methods but take the container(s)
as explicit leading arguments, so any :class:`~collections.abc.Mapping`
(including a plain dict) can be used as an operand::

    >>> from extmap import intersection
    >>> intersection({'a': 1, 'b': 2}, {'a': 1, 'b': 3})
    ExtendedMap([('a', 1)])

"""

from . import algebra
from .algebra import is_subset_of, is_superset_of, is_disjoint_from
from .algebra import is_empty, to_dict, try_get
from .extended_map import ExtendedMap


def intersection(a, b):
    """Entries of `a` that have a matching entry (key and value) in `b`"""
    return algebra.intersection(a, b, ExtendedMap)


def union(a, b):
    """Entries of `a` then `b`; `b`'s value wins for shared keys"""
    return algebra.union(a, b, ExtendedMap)


def difference(a, b):
    """Entries of `a` without a matching entry in `b`"""
    return algebra.difference(a, b, ExtendedMap)


def symmetric_difference(a, b):
    """Entries without a match in the other mapping (`a`'s value wins)"""
    return algebra.symmetric_difference(a, b, ExtendedMap)


def where_key(a, predicate):
    return algebra.where_key(a, predicate, ExtendedMap)


def where_value(a, predicate):
    return algebra.where_value(a, predicate, ExtendedMap)
