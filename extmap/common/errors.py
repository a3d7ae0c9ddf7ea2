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

import textwrap


class ExtMapException(Exception):
    """Base class of the exceptions raised by extmap

    Subclasses may set ``default_message``, used when the exception is
    raised without arguments.

    """

    default_message = None

    def __init__(self, *args):
        if not args and self.default_message:
            args = (self.default_message,)
        super().__init__(*args)


class DeveloperError(ExtMapException, NotImplementedError):
    """An extmap programming error (as opposed to a usage error)"""

    def __str__(self):
        detail = textwrap.fill(
            repr(super().__str__()),
            width=76,
            initial_indent='    ',
            subsequent_indent='    ',
            break_long_words=False,
        )
        return (
            "Internal extmap implementation error:\n"
            f"{detail}\n"
            "Please report this to the extmap developers."
        )


class KeyNotFoundError(ExtMapException, KeyError):
    """A KeyError raised by asserted lookups on a missing key

    The missing key is available as the ``key`` attribute.  Unlike the
    builtin :py:class:`KeyError`, the string representation is the plain
    message and not the repr() of the key.

    """

    def __init__(self, key, *args):
        self.key = key
        if not args:
            args = (f'Key "{key}" does not exist in map',)
        super().__init__(*args)

    def __str__(self):
        return str(self.args[0])
