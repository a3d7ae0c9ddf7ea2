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
"""Logging setup for the ``extmap`` package and a log capture helper"""

import inspect
import io
import logging
import sys
import textwrap


class WrappingFormatter(logging.Formatter):
    """Formatter that line-wraps the rendered record

    The message is dedented with :py:func:`inspect.cleandoc` and each of
    its lines is filled to `wrap` columns.  Continuation lines, and
    every line after the first, start with `hang`.

    """

    def __init__(self, fmt='%(levelname)s: %(message)s', wrap=78, hang='    ', **kwds):
        super().__init__(fmt, **kwds)
        self.wrap = wrap
        self.hang = hang or ''

    def formatMessage(self, record):
        text = super().formatMessage(record)
        head, *rest = inspect.cleandoc(text).split('\n')
        lines = [
            textwrap.fill(head, self.wrap, subsequent_indent=self.hang) if head else head
        ]
        for line in rest:
            if line:
                line = textwrap.fill(
                    line,
                    self.wrap,
                    initial_indent=self.hang,
                    subsequent_indent=self.hang,
                )
            lines.append(line)
        return '\n'.join(lines)


class _RootHandlerFilter(logging.Filter):
    """Drop records once the application configures the root logger"""

    def filter(self, record):
        return not logging.getLogger().handlers


extmap_logger = logging.getLogger('extmap')
extmap_handler = logging.StreamHandler(sys.stdout)
extmap_handler.setFormatter(WrappingFormatter())
extmap_handler.addFilter(_RootHandlerFilter())
extmap_logger.addHandler(extmap_handler)


class LoggingIntercept(object):
    r"""Capture the records sent to one logger

    While the context is active the target logger sends records at or
    above `level` only to `output` (a new :py:class:`io.StringIO` if not
    given), formatted with `formatter` (default ``'%(message)s'``).  Its
    other handlers and propagation are suspended and restored on exit.
    The target is either the logger named `module` or the `logger`
    object itself.

    >>> import io, logging
    >>> buf = io.StringIO()
    >>> with LoggingIntercept(buf, 'extmap'):
    ...     logging.getLogger('extmap').warning('captured')
    >>> buf.getvalue()
    'captured\n'

    """

    def __init__(
        self, output=None, module=None, level=logging.WARNING, formatter=None, logger=None
    ):
        if logger is None:
            logger = logging.getLogger(module)
        elif module is not None:
            raise ValueError("LoggingIntercept() accepts 'module' or 'logger', not both")
        self._logger = logger
        self.output = output
        self.level = level
        self.formatter = formatter or logging.Formatter('%(message)s')
        self.handler = None
        self._saved = None

    @property
    def module(self):
        return self._logger.name

    def __enter__(self):
        logger = self._logger
        stream = io.StringIO() if self.output is None else self.output
        self.handler = logging.StreamHandler(stream)
        self.handler.setFormatter(self.formatter)
        self.handler.setLevel(self.level)
        self._saved = logger.level, logger.propagate, logger.handlers
        logger.handlers = [self.handler]
        logger.propagate = False
        logger.setLevel(self.level)
        return stream

    def __exit__(self, et, ev, tb):
        logger = self._logger
        level, logger.propagate, logger.handlers = self._saved
        logger.setLevel(level)
        self.handler = self._saved = None
