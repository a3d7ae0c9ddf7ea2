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

import extmap.common.unittest as unittest

from extmap.collections import ExtendedMap


class TestExtMapUnittest(unittest.TestCase):
    def test_assertMapEqual(self):
        lst = [1]
        m = ExtendedMap([('a', 1), (lst, 2)])
        self.assertMapEqual(m, [('a', 1), (lst, 2)])
        self.assertMapEqual(m, ExtendedMap([('a', 1), (lst, 2)]))
        self.assertMapEqual(m, [(lst, 2), ('a', 1)], ordered=False)

        with self.assertRaises(self.failureException):
            self.assertMapEqual(m, [(lst, 2), ('a', 1)])
        with self.assertRaises(self.failureException):
            self.assertMapEqual(m, [('a', 1)], ordered=False)
        with self.assertRaisesRegex(self.failureException, "is not a Mapping"):
            self.assertMapEqual([('a', 1)], [('a', 1)])

    def test_assertRaisesRegex_normalize_whitespace(self):
        with self.assertRaisesRegex(ValueError, 'a b c', normalize_whitespace=True):
            raise ValueError('a\n    b\tc')

        with self.assertRaises(self.failureException):
            with self.assertRaisesRegex(ValueError, 'a b c'):
                raise ValueError('a\n    b\tc')

        with self.assertRaisesRegex(
            self.failureException, '"a b d" does not match "a b c"'
        ):
            with self.assertRaisesRegex(ValueError, 'a b d', normalize_whitespace=True):
                raise ValueError('a\n    b\tc')

        # Other exception types pass through
        with self.assertRaises(KeyError):
            with self.assertRaisesRegex(ValueError, 'a', normalize_whitespace=True):
                raise KeyError('a')


if __name__ == '__main__':
    unittest.main()
