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

"""Set algebra over mappings.

Every operation treats an *entry* (a ``(key, value)`` pair) as the
unit of comparison: two entries match if their keys are equal (as
determined by the mapping's own lookup) and their values satisfy
:func:`entries_match`.

Operations that produce a mapping accept a ``factory`` callable that
receives an iterable of ``(key, value)`` pairs and returns the result
container.  This module never constructs a concrete container type
itself; see :mod:`extmap.collections.functions` for the versions that
build :class:`~extmap.collections.extended_map.ExtendedMap` results.

None of the operations mutate their arguments.

"""

from collections.abc import Mapping
from typing import Any, NamedTuple

from extmap.common.flags import NOTSET

from ._hasher import entries_match


class TryGetResult(NamedTuple):
    """Result of a lookup that does not raise: ``(found, value)``"""

    found: bool
    value: Any = None


def _check_mapping(obj, argname):
    if not isinstance(obj, Mapping):
        raise TypeError(
            f"'{argname}' must be a Mapping, but received {obj!r} "
            f"of type '{type(obj).__name__}'"
        )


def _contains(mapping, key):
    # An unhashable key can never be present in a hash-based mapping
    # (e.g., dict), but testing for it raises TypeError.
    try:
        return key in mapping
    except TypeError:
        return False


def _has_entry(mapping, key, value):
    return _contains(mapping, key) and entries_match(mapping[key], value)


def intersection(a, b, factory):
    """Entries of `a` that have a matching entry in `b`"""
    _check_mapping(a, 'a')
    _check_mapping(b, 'b')
    return factory((k, v) for k, v in a.items() if _has_entry(b, k, v))


def union(a, b, factory):
    """All entries of `a` and `b`

    The value from `b` wins for keys present in both mappings.  The
    result iterates over the keys of `a` first (in their original
    positions), followed by the keys that only appear in `b`.

    """
    _check_mapping(a, 'a')
    _check_mapping(b, 'b')
    ans = factory(a.items())
    for k, v in b.items():
        ans[k] = v
    return ans


def difference(a, b, factory):
    """Entries of `a` whose key is missing from `b` or maps to a different value"""
    _check_mapping(a, 'a')
    _check_mapping(b, 'b')
    return factory((k, v) for k, v in a.items() if not _has_entry(b, k, v))


def symmetric_difference(a, b, factory):
    """Entries that appear in exactly one of `a` and `b`

    The entries of :func:`difference` (a, b) come first, followed by the
    entries of :func:`difference` (b, a).  A key mapped to different
    values in the two mappings keeps the value from `a`.

    """
    _check_mapping(a, 'a')
    _check_mapping(b, 'b')
    ans = factory((k, v) for k, v in a.items() if not _has_entry(b, k, v))
    for k, v in b.items():
        if not _contains(a, k):
            ans[k] = v
    return ans


def is_subset_of(a, b):
    """True if every entry of `a` has a matching entry in `b`"""
    _check_mapping(a, 'a')
    _check_mapping(b, 'b')
    if len(a) > len(b):
        return False
    return all(_has_entry(b, k, v) for k, v in a.items())


def is_superset_of(a, b):
    """True if every entry of `b` has a matching entry in `a`"""
    return is_subset_of(b, a)


def is_disjoint_from(a, b):
    """True if no entry of `a` has a matching entry in `b`"""
    _check_mapping(a, 'a')
    _check_mapping(b, 'b')
    return not any(_has_entry(b, k, v) for k, v in a.items())


def where_key(a, predicate, factory):
    _check_mapping(a, 'a')
    return factory((k, v) for k, v in a.items() if predicate(k))


def where_value(a, predicate, factory):
    _check_mapping(a, 'a')
    return factory((k, v) for k, v in a.items() if predicate(v))


def to_dict(a):
    """Convert a mapping to a plain dict

    Raises TypeError if any key is unhashable.

    """
    _check_mapping(a, 'a')
    return {k: v for k, v in a.items()}


def is_empty(a):
    _check_mapping(a, 'a')
    return not len(a)


def try_get(a, key, fallback=NOTSET):
    """Look up `key` in `a` without raising and without default values

    With no `fallback`, returns a :class:`TryGetResult`:
    ``(True, value)`` if the key is present, else ``(False, None)``.
    With a `fallback`, returns the stored value if the key is present,
    else `fallback`.  The default value of an
    :class:`~extmap.collections.extended_map.ExtendedMap` is never used.

    """
    _check_mapping(a, 'a')
    if _contains(a, key):
        value = a[key]
        if fallback is NOTSET:
            return TryGetResult(True, value)
        return value
    if fallback is NOTSET:
        return TryGetResult(False)
    return fallback
