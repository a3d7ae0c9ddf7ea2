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
"""Deprecation helpers

.. autosummary::

   deprecated
   deprecation_warning
"""

import functools
import inspect
import logging
import textwrap

from extmap.common.errors import DeveloperError
from extmap.common.flags import in_testing_environment


def _format_message(msg, version, remove_in):
    notes = []
    if version:
        notes.append(f'deprecated in {version}')
    if remove_in:
        notes.append(f'will be removed in (or after) {remove_in}')
    if not notes:
        return msg
    return f"{msg}  ({', '.join(notes)})"


def _external_frame(depth):
    """Return the first frame outside this module (depth=1) or outside
    this module and the module that called into it (depth=2)"""
    skipped = {id(globals())}
    frame = inspect.currentframe().f_back
    while frame is not None:
        if id(frame.f_globals) in skipped:
            frame = frame.f_back
        elif len(skipped) < depth:
            skipped.add(id(frame.f_globals))
        else:
            break
    return frame


def deprecation_warning(
    msg, logger=None, version=None, remove_in=None, calling_frame=None
):
    """Log a standardized deprecation warning

    Parameters
    ----------
    msg: str or None
        What was deprecated.  None gives a generic message.

    logger: str or logging.Logger, optional
        Where to log.  By default this is the logger of the calling
        module when it is part of extmap, else ``'extmap'``.

    version: str
        The release that deprecated the functionality (required).

    remove_in: str, optional
        The release that will remove it.

    calling_frame: frame, optional
        The frame reported as the caller of the deprecated code.

    Outside of test runs, each message is logged once per call site.

    """
    if version is None:
        raise DeveloperError("deprecation_warning() missing 'version' argument")
    if msg is None:
        msg = 'This has been deprecated and may be removed in a future release.'

    if logger is None:
        frame = calling_frame or _external_frame(1)
        name = frame.f_globals.get('__name__') if frame is not None else None
        logger = name if name and name.startswith('extmap') else 'extmap'
    if isinstance(logger, str):
        logger = logging.getLogger(logger)

    text = textwrap.fill(
        'DEPRECATED: ' + _format_message(msg, version, remove_in), width=70
    )
    if calling_frame is None:
        calling_frame = _external_frame(2)
    if calling_frame is not None:
        text += '\n(called from %s:%s)' % (
            calling_frame.f_code.co_filename,
            calling_frame.f_lineno,
        )
        seen = deprecation_warning.emitted_warnings
        if seen is not None:
            if text in seen:
                return
            seen.add(text)
    logger.warning(text)


# Test runs want every warning, so they are not de-duplicated.
deprecation_warning.emitted_warnings = None if in_testing_environment() else set()


def deprecated(msg=None, logger=None, version=None, remove_in=None):
    """Decorator marking a function or method as deprecated

    Calls to the decorated function log a deprecation warning (see
    :py:func:`deprecation_warning`) and the docstring gains a
    ``.. deprecated::`` note.  Without `msg`, the message names the
    function.

    >>> @deprecated(version='1.2.3')
    ... def double(x):
    ...     return 2*x

    """
    if version is None:
        raise DeveloperError("@deprecated(): missing 'version' argument")

    def decorator(func):
        text = msg
        if text is None:
            text = (
                f'This function ({func.__qualname__}) has been deprecated '
                'and may be removed in a future release.'
            )
        logged = _format_message(text, version, remove_in)

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            deprecation_warning(
                logged, logger, version='', calling_frame=_external_frame(1)
            )
            return func(*args, **kwargs)

        wrapper.__doc__ = 'DEPRECATED.\n\n'
        if func.__doc__:
            wrapper.__doc__ += func.__doc__ + '\n\n'
        wrapper.__doc__ += (
            f'.. deprecated:: {version}\n'
            f'   {_format_message(text, None, remove_in)}\n'
        )
        return wrapper

    return decorator
