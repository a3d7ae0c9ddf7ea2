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

from extmap.collections import ExtendedMap, OrderedSet, key_view, value_view


class TestViews(unittest.TestCase):
    def test_key_view(self):
        a = {'a': 1, 'b': 2, 'c': 3}
        keys = key_view(a)
        self.assertIsInstance(keys, OrderedSet)
        self.assertEqual(list(keys), ['a', 'b', 'c'])

        b = {'c': 0, 'd': 0}
        self.assertEqual(list(keys.intersection(b.keys())), ['c'])
        self.assertEqual(list(keys.union(b)), ['a', 'b', 'c', 'd'])
        self.assertEqual(list(keys.difference(key_view(b))), ['a', 'b'])
        self.assertEqual(list(keys.symmetric_difference(b)), ['a', 'b', 'd'])
        self.assertTrue(key_view({'a': 0}).issubset(keys))
        self.assertTrue(keys.issuperset(['a', 'c']))
        self.assertTrue(keys.isdisjoint(['x']))

    def test_value_view(self):
        lst = [1]
        a = ExtendedMap([('a', 1), ('b', lst), ('c', 1), ('d', [1]), ('e', lst)])
        values = value_view(a)
        self.assertEqual(len(values), 3)
        self.assertEqual(list(values)[:2], [1, lst])
        self.assertIs(list(values)[1], lst)
        self.assertIn(lst, values)
        self.assertTrue(values.isdisjoint([[1]]))

    def test_snapshot(self):
        a = {'a': 1}
        keys = key_view(a)
        values = value_view(a)
        a['b'] = 2
        self.assertEqual(list(keys), ['a'])
        self.assertEqual(list(values), [1])

        # the views are independent of the mapping
        keys.add('z')
        self.assertNotIn('z', a)

    def test_unhashable_keys(self):
        k = [0]
        keys = key_view(ExtendedMap([(k, 1), ('a', 2)]))
        self.assertIn(k, keys)
        self.assertNotIn([0], keys)

    def test_mapping_unchanged(self):
        # Views are built explicitly: the builtin mapping types are not
        # extended with new attributes
        self.assertFalse(hasattr({}, 'key_view'))
        self.assertFalse(hasattr(dict, 'value_view'))

    def test_not_a_mapping(self):
        with self.assertRaisesRegex(TypeError, "'mapping' must be a Mapping"):
            key_view(['a', 'b'])
        with self.assertRaisesRegex(TypeError, "'mapping' must be a Mapping"):
            value_view(None)


if __name__ == '__main__':
    unittest.main()
