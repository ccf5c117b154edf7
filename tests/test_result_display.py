"""Tests for result display text."""

import unittest

from pages.components.result_display import result_labels
from unit_converter.models import ConversionResult


class TestResultLabels(unittest.TestCase):
    def test_nothing_selected(self):
        self.assertEqual(result_labels(None), ("0", "Unit"))

    def test_selected_unit_shown_without_result(self):
        # e.g. after an incompatible-units error
        self.assertEqual(result_labels(None, "Grams (g)"), ("0", "Grams (g)"))

    def test_successful_conversion(self):
        r = ConversionResult(1, "Meters (m)", "Feet (ft)", "length", 3.28084)
        self.assertEqual(result_labels(r, "Feet (ft)"), ("3.28", "Feet (ft)"))


if __name__ == "__main__":
    unittest.main()
