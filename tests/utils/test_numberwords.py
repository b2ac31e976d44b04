import unittest

from phraseclock import exception
from phraseclock.utils.numberwords import spell_number


class TestSpellNumber(unittest.TestCase):
    """Unit tests for the spell_number() function."""

    def test_zero_is_empty(self):
        self.assertEqual("", spell_number(0))

    def test_units(self):
        self.assertEqual("one", spell_number(1))
        self.assertEqual("nine", spell_number(9))
        self.assertEqual("fifteen", spell_number(15))
        self.assertEqual("nineteen", spell_number(19))

    def test_tens(self):
        cases = {
            20: "twenty",
            21: "twenty one",
            40: "forty",
            59: "fifty nine",
            99: "ninety nine",
        }
        for value, expected in cases.items():
            with self.subTest(value=value):
                self.assertEqual(expected, spell_number(value))

    def test_hundreds_have_no_and(self):
        self.assertEqual("one hundred", spell_number(100))
        self.assertEqual("one hundred one", spell_number(101))
        self.assertEqual("nine hundred ninety nine", spell_number(999))

    def test_large_groups(self):
        cases = {
            1000: "one thousand",
            1001: "one thousand one",
            10123: "ten thousand one hundred twenty three",
            1_000_000: "one million",
            251334506: (
                "two hundred fifty one million "
                "three hundred thirty four thousand "
                "five hundred six"
            ),
            1_000_000_000: "one billion",
            999_999_999_999: (
                "nine hundred ninety nine billion "
                "nine hundred ninety nine million "
                "nine hundred ninety nine thousand "
                "nine hundred ninety nine"
            ),
        }
        for value, expected in cases.items():
            with self.subTest(value=value):
                self.assertEqual(expected, spell_number(value))

    def test_negative(self):
        self.assertEqual("minus seven", spell_number(-7))
        for value in (1, 13, 45, 100, 2024, 7_000_001):
            with self.subTest(value=value):
                self.assertEqual(
                    "minus " + spell_number(value),
                    spell_number(-value),
                )

    def test_unsupported_magnitude(self):
        for value in (10**12, -(10**12), 10**15):
            with self.subTest(value=value):
                with self.assertRaises(exception.UnsupportedMagnitudeError) as ctx:
                    spell_number(value)
                self.assertEqual(value, ctx.exception.value)
                self.assertIn(str(value), ctx.exception.message)

    def test_unsupported_magnitude_is_value_error(self):
        with self.assertRaises(ValueError):
            spell_number(10**13)

    def test_rejects_non_int(self):
        for value in (1.5, "12", None, True):
            with self.subTest(value=value):
                with self.assertRaises(TypeError):
                    spell_number(value)
