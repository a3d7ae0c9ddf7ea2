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

import sys


class FlagType(type):
    """Metaclass for sentinel classes used as flag values

    A flag is the class itself: "instantiating" it hands back the class,
    so ``NOTSET() is NOTSET``.  str() gives the bare class name, which
    keeps signatures in generated documentation short; repr() gives the
    dotted module path.

    """

    def __call__(cls, *args, **kwargs):
        return cls

    def __repr__(cls):
        return f"{cls.__module__}.{cls.__qualname__}"

    def __str__(cls):
        return cls.__name__


class NOTSET(object, metaclass=FlagType):
    """Marks an argument that was not passed at all

    Use it as the default when None is a meaningful value, e.g. a map
    whose default value is None:

    >>> def lookup(key, default=NOTSET):
    ...     if default is NOTSET:
    ...         pass  # caller gave no default

    """


def in_testing_environment(state=NOTSET):
    """Report whether a test runner (pytest or nose2) has been imported

    Passing `state` overrides the check until it is called again with
    ``state=None``.

    """
    if state is not NOTSET:
        in_testing_environment.state = state
    if in_testing_environment.state is None:
        return not sys.modules.keys().isdisjoint(('pytest', 'nose2'))
    return bool(in_testing_environment.state)


in_testing_environment.state = None
