"""
Unit tests for the pairwise distance table
"""

import random
import unittest

from tour_ga.data import City, generate_cities
from tour_ga.distances import DistanceTable, pair_key
from tour_ga.errors import MissingDistanceError


class TestDistanceTable(unittest.TestCase):
    def setUp(self):
        self.cities = [City(0, 0, 0), City(1, 3, 0), City(2, 0, 4)]
        self.table = DistanceTable.from_cities(self.cities)

    def test_exact_distances(self):
        self.assertEqual(self.table.distance(0, 1), 3.0)
        self.assertEqual(self.table.distance(0, 2), 4.0)
        self.assertEqual(self.table.distance(1, 2), 5.0)

    def test_symmetric_lookup(self):
        cities = generate_cities(12, random.Random(7))
        table = DistanceTable.from_cities(cities)
        for a in range(12):
            for b in range(12):
                if a != b:
                    self.assertEqual(table.distance(a, b), table.distance(b, a))
                    self.assertAlmostEqual(table.distance(a, b), cities[a].distance_to(cities[b]))

    def test_one_entry_per_unordered_pair(self):
        table = DistanceTable.from_cities(generate_cities(9, random.Random(1)))
        self.assertEqual(len(table), 9 * 8 // 2)
        self.assertEqual(table.cities_count, 9)
        keys = [k for k, _ in table.items()]
        self.assertTrue(all(a < b for a, b in keys))
        self.assertEqual(keys, sorted(keys))
        self.assertIn((5, 2), table)

    def test_diagonal_lookup_fails(self):
        with self.assertRaises(MissingDistanceError):
            self.table.distance(1, 1)

    def test_unknown_city_fails(self):
        with self.assertRaises(LookupError):
            self.table.distance(0, 3)
        with self.assertRaises(KeyError):
            self.table.distance(-1, 0)

    def test_pair_key_is_canonical(self):
        self.assertEqual(pair_key(4, 2), (2, 4))
        self.assertEqual(pair_key(2, 4), (2, 4))


if __name__ == "__main__":
    unittest.main()
