import unittest
from unittest import mock

from cgpacalc.ui.app import CGPACalculatorApp


class CalculatorAppTests(unittest.TestCase):
    def setUp(self):
        self.app = CGPACalculatorApp(mock.MagicMock())
        self.app.decimals = 2
        self.app.run()
        self.app.act(self.app.book.add_semester)

    def test_field_edits_keep_controls_and_refresh_totals(self):
        before = list(self.app.body.controls)
        self.app.edit_course(0, 0, "credits", "4")
        self.app.edit_course(0, 0, "grade", "8")

        self.assertEqual(len(self.app.body.controls), len(before))
        for old, new in zip(before, self.app.body.controls):
            self.assertIs(old, new)
        self.assertEqual(self.app.sgpa_texts[0].value, "SGPA: 8.00")
        self.assertEqual(self.app.cgpa_text.value, "8.00")
        self.assertEqual(self.app.emoji_text.value, "😎")

    def test_structural_actions_rebuild(self):
        before = list(self.app.body.controls)
        self.app.act(lambda: self.app.book.add_course(0))
        self.assertIsNot(before[1], self.app.body.controls[1])
        self.assertEqual(len(self.app.book.semesters[0].courses), 2)

    def test_rejected_edit_shows_status(self):
        self.app.edit_course(0, 3, "credits", "4")
        self.assertIn("No course at index 3", self.app.status.value)
        self.assertEqual(self.app.cgpa_text.value, "0.00")
        self.assertEqual(self.app.emoji_text.value, "🚀")


if __name__ == "__main__":
    unittest.main()
