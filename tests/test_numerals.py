#! /usr/bin/env python3

import unittest

import sqidish_numerals
from sqidish_alphabet import DEFAULT_ALPHABET
from sqidish_errors import InvalidCharacterError, NumberOverflowError

ALPHABET = DEFAULT_ALPHABET
LENGTH = len(ALPHABET)

class TestNumerals(unittest.TestCase):

    def test_bounds(self):
        self.assertEqual(sqidish_numerals.to_id(0, ALPHABET), ALPHABET[0])

        self.assertEqual(sqidish_numerals.to_number(
            sqidish_numerals.to_id(0, ALPHABET), ALPHABET), 0)

    def test_thresholds(self):
        for power in range(1, 5):
            for value in range((LENGTH**power) - 2, (LENGTH**power) + 2):
                self.assertEqual(sqidish_numerals.to_number(
                    sqidish_numerals.to_id(value, ALPHABET), ALPHABET), value)

    def test_most_significant_digit_first(self):
        self.assertEqual(sqidish_numerals.to_id(5, 'ab'), 'bab')
        self.assertEqual(sqidish_numerals.to_number('bab', 'ab'), 5)
        self.assertEqual(len(sqidish_numerals.to_id(LENGTH, ALPHABET)), 2)

    def test_max_value(self):
        encoded = sqidish_numerals.to_id(sqidish_numerals.MAX_VALUE, ALPHABET)
        self.assertEqual(sqidish_numerals.to_number(encoded, ALPHABET),
                         sqidish_numerals.MAX_VALUE)

    def test_overflow(self):
        with self.assertRaises(NumberOverflowError):
            sqidish_numerals.to_number(ALPHABET[-1] * 20, ALPHABET)
        # Also usable as a plain OverflowError:
        with self.assertRaises(OverflowError):
            sqidish_numerals.to_number('b' * 64, 'ab')

    def test_invalid_character(self):
        with self.assertRaises(InvalidCharacterError):
            sqidish_numerals.to_number('ab!', ALPHABET)

if __name__ == '__main__':
    unittest.main()
