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

from collections.abc import MutableSet, Set

from ._hasher import storage_key


class OrderedSet(MutableSet):
    """A set that remembers insertion order and admits unhashable members.

    Membership follows :func:`~extmap.collections._hasher.storage_key`:
    hashable members compare by value, unhashable ones by identity.
    The set holds a reference to every member, so an id()-based entry
    can never be confused with a later object at the same address.

    Re-adding a member leaves it where it was.  The named operations
    (:meth:`union`, :meth:`intersection`, ...) take any iterable, e.g.
    the ``keys()`` of another mapping, and list this set's members
    first.

    """

    __slots__ = ('_members',)

    def __init__(self, iterable=()):
        # storage_key(member) -> member, in insertion order
        self._members = {}
        if type(iterable) is OrderedSet:
            self._members.update(iterable._members)
        else:
            self.update(iterable)

    def __repr__(self):
        return f"OrderedSet({', '.join(map(repr, self))})"

    __str__ = __repr__

    def update(self, *iterables):
        for iterable in iterables:
            for member in iterable:
                self.add(member)

    # The set is slotized, and id()-based storage keys are only valid
    # in the process that made them: pickle the members, not the keys.
    def __getstate__(self):
        return list(self._members.values())

    def __setstate__(self, members):
        self._members = {storage_key(m): m for m in members}

    def __contains__(self, member):
        return storage_key(member) in self._members

    def __iter__(self):
        return iter(self._members.values())

    def __reversed__(self):
        return reversed(self._members.values())

    def __len__(self):
        return len(self._members)

    def add(self, member):
        self._members.setdefault(storage_key(member), member)

    def discard(self, member):
        self._members.pop(storage_key(member), None)

    def remove(self, member):
        try:
            del self._members[storage_key(member)]
        except KeyError:
            raise KeyError(member) from None

    def clear(self):
        self._members.clear()

    def __eq__(self, other):
        if not isinstance(other, Set):
            return False
        return len(self) == len(other) and all(m in self for m in other)

    def __ne__(self, other):
        return not self == other

    @classmethod
    def _from_iterable(cls, it):
        return cls(it)

    def union(self, other):
        ans = OrderedSet(self)
        ans.update(other)
        return ans

    def intersection(self, other):
        other = OrderedSet(other)
        return OrderedSet(m for m in self if m in other)

    def difference(self, other):
        other = OrderedSet(other)
        return OrderedSet(m for m in self if m not in other)

    def symmetric_difference(self, other):
        other = OrderedSet(other)
        ans = self.difference(other)
        ans.update(m for m in other if m not in self)
        return ans

    def issubset(self, other):
        other = OrderedSet(other)
        return all(m in other for m in self)

    def issuperset(self, other):
        return all(m in self for m in other)

    def isdisjoint(self, other):
        return not any(m in self for m in other)
