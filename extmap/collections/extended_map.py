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

from collections.abc import Mapping, MutableMapping

from extmap.common.config import ConfigDict, ConfigValue
from extmap.common.deprecation import deprecated
from extmap.common.errors import KeyNotFoundError
from extmap.common.flags import NOTSET

from . import algebra
from ._hasher import storage_key
from .views import key_view, value_view


class ExtendedMap(MutableMapping):
    """
    An insertion-ordered mapping with set algebra and default values.

    ExtendedMap can stand in for a dict, with three additions:

    - any object can be a key.  Hashable keys compare by value;
      unhashable ones (lists, dicts, ...) compare by identity, and
      tuples holding unhashable items compare item by item,
    - :py:meth:`get` can fall back on a default value given at
      construction,
    - the entry-wise set operations of
      :py:mod:`extmap.collections.algebra` are available as methods
      and as the ``| & - ^`` operators.

    Each entry keeps a reference to its key, so identity-compared keys
    stay valid for as long as they are stored.

    Parameters
    ----------
    entries: Mapping or Iterable[tuple], optional
        The initial contents of the map.

    options: dict or ConfigDict, optional
        Options declared by :py:attr:`ExtendedMap.CONFIG`.  Keyword
        arguments are applied on top of `options`.

    Examples
    --------
    >>> m = ExtendedMap([('a', 1)], default=0)
    >>> m.get('a'), m.get('z'), 'z' in m
    (1, 0, False)

    """

    __slots__ = ("_entries", "_default")

    CONFIG = ConfigDict()
    CONFIG.declare(
        'default',
        ConfigValue(
            NOTSET,
            description="Value returned by get() for missing keys.  It is "
            "never stored: len(), membership, iteration and the set "
            "operations ignore it.",
        ),
    )

    def __init__(self, entries=None, options=None, **kwds):
        # storage_key(key) -> (key, value)
        self._entries = {}
        if options is None and not kwds:
            self._default = NOTSET
        else:
            self._default = self.CONFIG(options).set_value(kwds).default
        if entries is not None:
            self.update(entries)

    def __repr__(self):
        body = ', '.join(f"({k!r}, {v!r})" for k, v in self._entries.values())
        if self._default is NOTSET:
            return f"{type(self).__name__}([{body}])"
        return f"{type(self).__name__}([{body}], default={self._default!r})"

    __str__ = __repr__

    def __getitem__(self, key):
        entry = self._entries.get(storage_key(key))
        if entry is None:
            raise KeyNotFoundError(key)
        return entry[1]

    def __setitem__(self, key, val):
        skey = storage_key(key)
        # An existing entry keeps its original key object and position
        entry = self._entries.get(skey)
        self._entries[skey] = (key if entry is None else entry[0], val)

    def __delitem__(self, key):
        if self._entries.pop(storage_key(key), None) is None:
            raise KeyNotFoundError(key)

    def __iter__(self):
        return (entry[0] for entry in self._entries.values())

    def __len__(self):
        return len(self._entries)

    def __contains__(self, key):
        return storage_key(key) in self._entries

    def update(self, *args, **kwargs):
        if len(args) == 1 and not kwargs and isinstance(args[0], ExtendedMap):
            # storage keys of another ExtendedMap can be reused as is
            for skey, (key, val) in args[0]._entries.items():
                entry = self._entries.get(skey)
                self._entries[skey] = (key if entry is None else entry[0], val)
        else:
            super().update(*args, **kwargs)

    def get(self, key, default=NOTSET):
        """Return the value for `key`

        A missing key returns `default` when it is given, else the
        default value this map was constructed with, else None.

        """
        entry = self._entries.get(storage_key(key))
        if entry is not None:
            return entry[1]
        if default is NOTSET:
            default = self._default
        return None if default is NOTSET else default

    def clear(self):
        self._entries.clear()

    # Entry-wise equality: the order of the entries and the default
    # value do not matter.
    def __eq__(self, other):
        if not isinstance(other, Mapping):
            return False
        return other is self or (
            len(self) == len(other) and algebra.is_subset_of(self, other)
        )

    def __ne__(self, other):
        return not self == other

    # Storage keys of identity-compared keys are id() values, which do
    # not survive pickling or deepcopy: only the entries are saved.
    def __getstate__(self):
        return list(self._entries.values()), self._default

    def __setstate__(self, state):
        entries, self._default = state
        self._entries = {storage_key(key): (key, val) for key, val in entries}

    def copy(self):
        """Return a shallow copy (including the default value)"""
        if self._default is NOTSET:
            return self.__class__(self)
        return self.__class__(self, default=self._default)

    __copy__ = copy

    #
    # Default values and non-raising lookups
    #

    @property
    def default(self):
        """The default value returned by get() (NOTSET if none)"""
        return self._default

    @property
    def has_default(self):
        return self._default is not NOTSET

    def has(self, key):
        return key in self

    def get_asserted(self, key):
        """Return the stored value for `key`

        Raises :py:class:`~extmap.common.errors.KeyNotFoundError` if the
        key is missing.  The default value is never used.

        """
        return self[key]

    def try_get(self, key, fallback=NOTSET):
        """Look up `key` without raising and without the default value

        See :py:func:`extmap.collections.algebra.try_get`.

        """
        return algebra.try_get(self, key, fallback)

    def is_empty(self):
        return not self._entries

    #
    # Set algebra.  Results are new instances of this class (without
    # the default value).
    #

    def intersection(self, other):
        return algebra.intersection(self, other, self.__class__)

    def union(self, other):
        return algebra.union(self, other, self.__class__)

    def difference(self, other):
        return algebra.difference(self, other, self.__class__)

    def symmetric_difference(self, other):
        return algebra.symmetric_difference(self, other, self.__class__)

    def is_subset_of(self, other):
        return algebra.is_subset_of(self, other)

    def is_superset_of(self, other):
        return algebra.is_superset_of(self, other)

    def is_disjoint_from(self, other):
        return algebra.is_disjoint_from(self, other)

    def where_key(self, predicate):
        return algebra.where_key(self, predicate, self.__class__)

    def where_value(self, predicate):
        return algebra.where_value(self, predicate, self.__class__)

    def to_dict(self):
        return algebra.to_dict(self)

    def key_view(self):
        return key_view(self)

    def value_view(self):
        return value_view(self)

    #
    # Operators
    #

    def __or__(self, other):
        if not isinstance(other, Mapping):
            return NotImplemented
        return self.union(other)

    def __ror__(self, other):
        if not isinstance(other, Mapping):
            return NotImplemented
        return algebra.union(other, self, self.__class__)

    def __and__(self, other):
        if not isinstance(other, Mapping):
            return NotImplemented
        return self.intersection(other)

    def __rand__(self, other):
        if not isinstance(other, Mapping):
            return NotImplemented
        return algebra.intersection(other, self, self.__class__)

    def __sub__(self, other):
        if not isinstance(other, Mapping):
            return NotImplemented
        return self.difference(other)

    def __rsub__(self, other):
        if not isinstance(other, Mapping):
            return NotImplemented
        return algebra.difference(other, self, self.__class__)

    def __xor__(self, other):
        if not isinstance(other, Mapping):
            return NotImplemented
        return self.symmetric_difference(other)

    def __rxor__(self, other):
        if not isinstance(other, Mapping):
            return NotImplemented
        return algebra.symmetric_difference(other, self, self.__class__)


# camelCase spellings of the ExtendedMap methods.  These forward to the
# snake_case methods and log a deprecation warning when called.
_CAMEL_CASE_ALIASES = {
    'symmetricDifference': 'symmetric_difference',
    'isSubsetOf': 'is_subset_of',
    'isSupersetOf': 'is_superset_of',
    'isDisjointFrom': 'is_disjoint_from',
    'whereKey': 'where_key',
    'whereValue': 'where_value',
    'toObject': 'to_dict',
    'isEmpty': 'is_empty',
    'getAsserted': 'get_asserted',
    'tryGet': 'try_get',
}

for _old, _new in _CAMEL_CASE_ALIASES.items():
    setattr(
        ExtendedMap,
        _old,
        deprecated(
            f"ExtendedMap.{_old}() has been renamed to ExtendedMap.{_new}().",
            logger='extmap.collections',
            version='1.0.0',
        )(getattr(ExtendedMap, _new)),
    )
del _old, _new
