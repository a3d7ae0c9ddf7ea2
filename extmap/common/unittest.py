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
"""The standard :py:mod:`unittest` namespace with an extended TestCase"""

from unittest import *
import unittest as _unittest

import contextlib
import re
from collections.abc import Mapping


class TestCase(_unittest.TestCase):
    """unittest.TestCase with mapping-aware assertions

    Adds :py:meth:`assertMapEqual` and a `normalize_whitespace` option
    to :py:meth:`assertRaisesRegex`.

    """

    # always show the full diff
    maxDiff = None

    def assertMapEqual(self, first, second, ordered=True, msg=None):
        """Assert that two mappings hold the same entries

        `second` may be any Mapping or an iterable of (key, value)
        pairs.  Entries are compared as (key, value) lists, so
        unhashable keys are supported.  If `ordered` is True, the
        iteration order of the entries must also agree.

        """
        if not isinstance(first, Mapping):
            self.fail(self._formatMessage(msg, f"{first!r} is not a Mapping"))
        first_items = list(first.items())
        if isinstance(second, Mapping):
            second_items = list(second.items())
        else:
            second_items = list(second)
        if ordered:
            self.assertEqual(first_items, second_items, msg)
        else:
            self.assertEqual(len(first_items), len(second_items), msg)
            for item in second_items:
                self.assertIn(item, first_items, msg)

    def assertRaisesRegex(self, expected_exception, expected_regex, *args, **kwargs):
        """assertRaisesRegex, optionally ignoring line breaks and indentation

        With ``normalize_whitespace=True`` every run of whitespace in the
        exception message is collapsed to one space before searching
        for `expected_regex`.  Only the context manager form supports
        this option.

        """
        if not kwargs.pop('normalize_whitespace', False):
            return super().assertRaisesRegex(
                expected_exception, expected_regex, *args, **kwargs
            )
        return self._raises_normalized(expected_exception, expected_regex)

    @contextlib.contextmanager
    def _raises_normalized(self, expected_exception, expected_regex):
        with self.assertRaises(expected_exception) as cm:
            yield cm
        text = ' '.join(str(cm.exception).split())
        if not re.search(expected_regex, text):
            self.fail(f'"{expected_regex}" does not match "{text}"')
