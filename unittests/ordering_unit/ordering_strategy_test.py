import unittest
from collections import Counter

from faker import Faker

from ordering.ordering_strategy.ascending_strategy import AscendingOrder
from ordering.ordering_strategy.descending_strategy import DescendingOrder
from ordering.ordering_strategy.sequence_steps import (reverse_sequence,
                                                       sort_by_comparison)


class TestSequenceSteps(unittest.TestCase):

    def test_sort_by_comparison_copies(self):
        data = [3, 1, 2]
        self.assertEqual(sort_by_comparison(data), [1, 2, 3])
        self.assertEqual(data, [3, 1, 2])

    def test_reverse_sequence_copies(self):
        data = ("a", "b", "c")
        self.assertEqual(reverse_sequence(data), ["c", "b", "a"])

    def test_steps_on_empty_input(self):
        self.assertEqual(sort_by_comparison([]), [])
        self.assertEqual(reverse_sequence([]), [])


class TestOrderingStrategies(unittest.TestCase):

    def setUp(self):
        self.fake = Faker()
        Faker.seed(4321)
        self.samples = [[]]
        self.samples += [
            [self.fake.random_int(min=-50, max=50) for _ in range(self.fake.random_int(min=1, max=30))]
            for _ in range(20)
        ]
        self.samples += [self.fake.words(nb=self.fake.random_int(min=1, max=15)) for _ in range(20)]
        self.samples += [[7, 7, 7], ["b", "a", "b", "a"]]

    def test_ascending_laws(self):
        """Test ascending output is a non-decreasing permutation of the input"""
        strategy = AscendingOrder()
        for sample in self.samples:
            with self.subTest(sample=sample):
                result = strategy.apply_ordering(sample)
                self.assertEqual(Counter(result), Counter(sample))
                self.assertTrue(all(a <= b for a, b in zip(result, result[1:])))

    def test_descending_laws(self):
        """Test descending output is a non-increasing permutation of the input"""
        strategy = DescendingOrder()
        for sample in self.samples:
            with self.subTest(sample=sample):
                result = strategy.apply_ordering(sample)
                self.assertEqual(Counter(result), Counter(sample))
                self.assertTrue(all(a >= b for a, b in zip(result, result[1:])))

    def test_idempotent_on_own_output(self):
        for strategy in (AscendingOrder(), DescendingOrder()):
            for sample in self.samples:
                with self.subTest(strategy=type(strategy).__name__, sample=sample):
                    once = strategy.apply_ordering(sample)
                    self.assertEqual(strategy.apply_ordering(once), once)

    def test_idempotent_with_equal_but_distinct_elements(self):
        """Test elements that compare equal keep their positions when reapplied"""
        samples = [[1, 1.0], [1.0, 1], [0.0, -0.0], [2, 1.0, 1, 2.0, 3]]
        for strategy in (AscendingOrder(), DescendingOrder()):
            for sample in samples:
                with self.subTest(strategy=type(strategy).__name__, sample=sample):
                    once = strategy.apply_ordering(sample)
                    twice = strategy.apply_ordering(once)
                    self.assertEqual(repr(twice), repr(once))
                    self.assertTrue(all(a is b for a, b in zip(twice, once)))

    def test_descending_keeps_input_order_of_ties(self):
        self.assertEqual(repr(DescendingOrder().apply_ordering([1, 1.0])), "[1, 1.0]")
        self.assertEqual(repr(DescendingOrder().apply_ordering([1.0, 2, 1])), "[2, 1.0, 1]")

    def test_empty_sequence_returned_empty(self):
        self.assertEqual(AscendingOrder().apply_ordering([]), [])
        self.assertEqual(DescendingOrder().apply_ordering(()), [])

    def test_input_is_not_mutated(self):
        data = ["e", "c", "a", "d", "b"]
        AscendingOrder().apply_ordering(data)
        DescendingOrder().apply_ordering(data)
        self.assertEqual(data, ["e", "c", "a", "d", "b"])

    def test_immutable_input_is_accepted(self):
        self.assertEqual(AscendingOrder().apply_ordering((3, 1, 2)), [1, 2, 3])
        self.assertEqual(DescendingOrder().apply_ordering("bca"), ["c", "b", "a"])

    def test_original_letters(self):
        letters = ["a", "b", "c", "d", "e"]
        self.assertEqual(AscendingOrder().apply_ordering(letters), letters)
        self.assertEqual(DescendingOrder().apply_ordering(letters), ["e", "d", "c", "b", "a"])


if __name__ == "__main__":
    unittest.main()
