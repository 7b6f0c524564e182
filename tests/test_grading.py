import unittest

from cgpacalc.domain.logic.grading import DEFAULT_GRADE_MAPPING, GRADE_LETTERS, cgpa_emoji, coerce_number


class CoercionTests(unittest.TestCase):
    def test_numbers_pass_through(self):
        self.assertEqual(coerce_number(4), 4.0)
        self.assertEqual(coerce_number(8.5), 8.5)

    def test_numeric_strings(self):
        self.assertEqual(coerce_number("9"), 9.0)
        self.assertEqual(coerce_number(" 7.25 "), 7.25)

    def test_unusable_input_is_zero(self):
        for value in (None, "", "   ", "abc", "A+", float("nan"), float("inf"), "-inf", True):
            with self.subTest(value=value):
                self.assertEqual(coerce_number(value), 0.0)


class EmojiTests(unittest.TestCase):
    def test_zero_is_rocket(self):
        self.assertEqual(cgpa_emoji(0), "🚀")

    def test_out_of_range(self):
        self.assertEqual(cgpa_emoji(10.01), "⁉️")
        self.assertEqual(cgpa_emoji(-1), "⁉️")

    def test_bands_use_inclusive_lower_bounds(self):
        self.assertEqual(cgpa_emoji(10), "🏆")
        self.assertEqual(cgpa_emoji(9), "🏆")
        self.assertEqual(cgpa_emoji(8.99), "😎")
        self.assertEqual(cgpa_emoji(8), "😎")
        self.assertEqual(cgpa_emoji(7), "😊")
        self.assertEqual(cgpa_emoji(6.5), "🙂")
        self.assertEqual(cgpa_emoji(5), "😐")
        self.assertEqual(cgpa_emoji(4.99), "😟")
        self.assertEqual(cgpa_emoji(0.5), "😟")


class MappingTests(unittest.TestCase):
    def test_default_mapping(self):
        self.assertEqual(GRADE_LETTERS, ("O", "A+", "A", "B+", "B", "C"))
        self.assertEqual([DEFAULT_GRADE_MAPPING[g] for g in GRADE_LETTERS], [10, 9, 8, 7, 6, 5])


if __name__ == "__main__":
    unittest.main()
