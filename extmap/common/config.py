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
"""Declared option containers

A class that takes options declares them once, in a class-level
:py:class:`ConfigDict`, and calls it to get a per-instance copy::

    CONFIG = ConfigDict()
    CONFIG.declare('default', ConfigValue(NOTSET))

    config = CONFIG(options)
    config.default

"""

import inspect
from collections.abc import Mapping

from extmap.common.flags import NOTSET


class ConfigValue(object):
    """A single option value

    Parameters
    ----------
    default: optional
        The value held until one is set, and restored by :py:meth:`reset`.

    domain: Callable, optional
        Converts (and validates) every value stored, e.g. ``int``.
        None and NOTSET are stored without conversion.

    description: str, optional
        A short description of the option.

    """

    __slots__ = ('name', 'default', 'domain', 'description', '_value')

    def __init__(self, default=None, domain=None, description=None):
        self.name = None
        self.default = default
        self.domain = domain
        self.description = inspect.cleandoc(description) if description else None
        self._value = self._cast(default)

    def __call__(self, value=NOTSET):
        ans = ConfigValue(self.default, self.domain, self.description)
        ans.name = self.name
        ans._value = self._value
        if value is not NOTSET:
            ans.set_value(value)
        return ans

    def _cast(self, value):
        if self.domain is None or value is None or value is NOTSET:
            return value
        try:
            return self.domain(value)
        except (TypeError, ValueError) as err:
            raise ValueError(
                f"invalid value for option '{self.name}': {value!r} ({err})"
            ) from err

    def value(self):
        return self._value

    def set_value(self, value):
        self._value = self._cast(value)

    def reset(self):
        self._value = self._cast(self.default)


class ConfigDict(Mapping):
    """A group of declared options

    Options are read as items or attributes.  Assigning to a name that
    was never declared is an error.

    """

    def __init__(self, description=None):
        object.__setattr__(self, 'description', description)
        object.__setattr__(self, '_entries', {})

    def __call__(self, value=NOTSET):
        ans = ConfigDict(self.description)
        for name, cfg in self._entries.items():
            ans._entries[name] = cfg()
        if value is not NOTSET:
            ans.set_value(value)
        return ans

    def declare(self, name, config):
        if name in self._entries:
            raise ValueError(f"option '{name}' is already declared")
        config.name = name
        self._entries[name] = config
        return config

    def __getitem__(self, name):
        return self._entries[name].value()

    def __iter__(self):
        return iter(self._entries)

    def __len__(self):
        return len(self._entries)

    def __getattr__(self, name):
        # only reached after normal lookup fails
        entries = self.__dict__.get('_entries', {})
        if name not in entries:
            raise AttributeError(
                f"'{type(self).__name__}' object has no attribute '{name}'"
            )
        return entries[name].value()

    def __setitem__(self, name, value):
        if name not in self._entries:
            raise ValueError(f"undeclared option '{name}'")
        self._entries[name].set_value(value)

    __setattr__ = __setitem__

    def value(self):
        return dict(self)

    def set_value(self, values):
        """Set several options at once

        Either all of `values` are applied or, when one is undeclared or
        fails its domain, none are.

        """
        if values is None:
            return self
        if not isinstance(values, Mapping):
            raise ValueError(
                "expected a mapping of option values, "
                f"found {type(values).__name__}"
            )
        for name in values:
            if name not in self._entries:
                raise ValueError(f"undeclared option '{name}'")
        saved = self.value()
        try:
            for name in values:
                self[name] = values[name]
        except ValueError:
            for name, val in saved.items():
                self._entries[name]._value = val
            raise
        return self

    def reset(self):
        for cfg in self._entries.values():
            cfg.reset()
