"""Tests for the command-line interface."""

import io
import unittest
from contextlib import redirect_stdout

from unit_converter.cli import main


def run_cli(*argv):
    out = io.StringIO()
    with redirect_stdout(out):
        main(list(argv))
    return out.getvalue()


class TestConvertCommand(unittest.TestCase):
    def test_full_labels(self):
        output = run_cli("convert", "1", "Meters (m)", "Millimeters (mm)")
        self.assertEqual(output.strip(), "1000.00 Millimeters (mm)")

    def test_abbreviations(self):
        output = run_cli("convert", "2", "lb", "kg")
        self.assertEqual(output.strip(), "0.91 Kilograms (kg)")

    def test_decimals(self):
        output = run_cli("convert", "1", "ft", "m", "--decimals", "4")
        self.assertEqual(output.strip(), "0.3048 Meters (m)")

    def test_incompatible_units_exits(self):
        out = io.StringIO()
        with redirect_stdout(out), self.assertRaises(SystemExit) as ctx:
            main(["convert", "1", "m", "g"])
        self.assertEqual(ctx.exception.code, 1)
        self.assertIn("Incompatible unit types selected.", out.getvalue())

    def test_non_numeric_value_exits(self):
        out = io.StringIO()
        with redirect_stdout(out), self.assertRaises(SystemExit) as ctx:
            main(["convert", "abc", "m", "ft"])
        self.assertEqual(ctx.exception.code, 1)
        self.assertIn("Please fill all fields.", out.getvalue())


class TestOtherCommands(unittest.TestCase):
    def test_units_lists_all_categories(self):
        output = run_cli("units")
        for heading in ("Length:", "Weight:", "Volume:"):
            self.assertIn(heading, output)
        self.assertIn("Gallons (gal)", output)

    def test_units_single_category(self):
        output = run_cli("units", "--category", "weight")
        self.assertIn("Pounds (lb)", output)
        self.assertNotIn("Meters (m)", output)

    def test_table(self):
        output = run_cli("table", "1", "km")
        self.assertIn("1000.00  Meters (m)", output)
        self.assertIn("Miles (mi)", output)

    def test_no_command_prints_help(self):
        output = run_cli()
        self.assertIn("usage:", output)


if __name__ == "__main__":
    unittest.main()
