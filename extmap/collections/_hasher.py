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

"""Storage keys for mappings and sets that accept unhashable members.

Containers in this package do not index their contents by the user's
object directly.  Each object is first translated by :func:`storage_key`:

  - a hashable object is its own storage key, so it compares with the
    native ``hash()`` / ``==`` (``1``, ``1.0`` and ``True`` collide,
    exactly as in a dict),
  - an unhashable object (list, dict, set, ...) is keyed by its
    :func:`id()`, i.e., it compares by reference,
  - an unhashable tuple (including namedtuples and other tuple
    subclasses) is keyed element-wise, so ``(1, lst)`` matches any
    tuple holding ``1`` and that same ``lst``.

Hashability is decided for every object, not once per type: instances
of one class (e.g., a namedtuple) may be hashable or not depending on
their contents.

"""

from extmap.common.flags import FlagType

# Types whose instances are always (or never) hashable.  Anything else
# is checked with hash().
_always_hashable = frozenset(
    (int, float, complex, bool, str, bytes, type(None), range, frozenset)
)
_never_hashable = frozenset((list, dict, set, bytearray))


class BY_IDENTITY(object, metaclass=FlagType):
    """Tag marking a storage key built from an object's id()

    Tagging keeps the id() of an unhashable key from colliding with an
    integer key that happens to have the same value.

    """


def storage_key(obj):
    """Return the key under which `obj` is stored in a hashed container"""
    cls = obj.__class__
    if cls in _always_hashable:
        return obj
    if cls in _never_hashable:
        return BY_IDENTITY, id(obj)
    try:
        hash(obj)
    except TypeError:
        if isinstance(obj, tuple):
            return tuple(map(storage_key, obj))
        return BY_IDENTITY, id(obj)
    return obj


def _is_hashable(val):
    try:
        hash(val)
    except TypeError:
        return False
    return True


def entries_match(first, second):
    """Return True if two entry values are considered equal

    Values are equal if they are the same object, or if both are
    hashable and compare equal.  Unhashable values (lists, dicts, ...)
    are only equal to themselves: there is no structural comparison.

    """
    if first is second:
        return True
    if not (_is_hashable(first) and _is_hashable(second)):
        return False
    return bool(first == second)
