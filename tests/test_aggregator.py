"""Tests for transaction aggregator."""
import math
import unittest

from clustergenius.aggregation import Aggregator, parse_amount, sort_by_total, UNKNOWN_IDENTIFIER
from clustergenius.utils.exceptions import EmptyInputError, MissingAmountColumnError


class TestParseAmount(unittest.TestCase):
    """Test amount cell parsing."""

    def test_thousands_separator(self):
        self.assertEqual(parse_amount("1,234.56"), parse_amount("1234.56"))
        self.assertEqual(parse_amount("1,000.00"), 1000.0)

    def test_numbers_and_whitespace(self):
        self.assertEqual(parse_amount(42), 42.0)
        self.assertEqual(parse_amount(" -12.5 "), -12.5)

    def test_non_numeric_returns_none(self):
        self.assertIsNone(parse_amount("abc"))
        self.assertIsNone(parse_amount(""))
        self.assertIsNone(parse_amount(None))
        self.assertIsNone(parse_amount("NaN"))


class TestAggregator(unittest.TestCase):
    """Test Aggregator functionality."""

    def setUp(self):
        """Set up test fixtures."""
        self.aggregator = Aggregator()

    def test_scenario(self):
        """Commas are stripped and the unparseable BA gets no group."""
        rows = [
            {"BA_ID": "A1", "Net_Amount": "1,000.00"},
            {"BA_ID": "A1", "Net_Amount": "500"},
            {"BA_ID": "B2", "Net_Amount": "abc"},
        ]

        result = self.aggregator.aggregate(rows)

        self.assertEqual(len(result), 1)
        a1 = result[0]
        self.assertEqual(a1.identifier, "A1")
        self.assertAlmostEqual(a1.total_amount, 1500.0)
        self.assertEqual(a1.transaction_count, 2)
        self.assertAlmostEqual(a1.average_amount, 750.0)
        self.assertAlmostEqual(a1.std_dev_amount, 250.0)

    def test_statistics_invariants(self):
        rows = [
            {"customer": "X", "amount": "10"},
            {"customer": "X", "amount": "20"},
            {"customer": "X", "amount": "45.5"},
            {"customer": "Y", "amount": "7"},
            {"customer": "Y", "amount": "7"},
        ]

        result = {s.identifier: s for s in self.aggregator.aggregate(rows)}

        for summary in result.values():
            self.assertGreaterEqual(summary.transaction_count, 1)
            self.assertGreaterEqual(summary.std_dev_amount, 0)
            self.assertAlmostEqual(summary.average_amount, summary.total_amount / summary.transaction_count)

        self.assertAlmostEqual(result["X"].total_amount, 75.5)
        self.assertEqual(result["Y"].std_dev_amount, 0)

    def test_population_std_dev(self):
        rows = [{"id": "A", "value": v} for v in ("2", "4", "4", "4", "5", "5", "7", "9")]

        summary = self.aggregator.aggregate(rows)[0]

        self.assertAlmostEqual(summary.std_dev_amount, 2.0)

    def test_bad_amount_does_not_affect_other_groups(self):
        rows = [
            {"BA": "A", "Amount": "100"},
            {"BA": "A", "Amount": "n/a"},
            {"BA": "B", "Amount": "50"},
        ]

        result = {s.identifier: s for s in self.aggregator.aggregate(rows)}

        self.assertEqual(result["A"].transaction_count, 1)
        self.assertAlmostEqual(result["A"].total_amount, 100.0)
        self.assertAlmostEqual(result["B"].total_amount, 50.0)

    def test_missing_identifier_becomes_unknown(self):
        rows = [
            {"BA": "", "Amount": "10"},
            {"BA": None, "Amount": "30"},
            {"BA": "A", "Amount": "5"},
        ]

        result = {s.identifier: s for s in self.aggregator.aggregate(rows)}

        self.assertEqual(result[UNKNOWN_IDENTIFIER].transaction_count, 2)
        self.assertAlmostEqual(result[UNKNOWN_IDENTIFIER].average_amount, 20.0)

    def test_empty_rows_raise_error(self):
        with self.assertRaises(EmptyInputError):
            self.aggregator.aggregate([])

    def test_missing_amount_column_lists_columns(self):
        rows = [{"BA_ID": "A1", "Date": "2025-01-01", "Memo": "x"}]

        with self.assertRaises(MissingAmountColumnError) as ctx:
            self.aggregator.aggregate(rows)

        self.assertEqual(ctx.exception.columns, ["BA_ID", "Date", "Memo"])
        self.assertIn("BA_ID, Date, Memo", str(ctx.exception))

    def test_sort_by_total(self):
        rows = [
            {"BA": "small", "Amount": "1"},
            {"BA": "big", "Amount": "1000"},
            {"BA": "mid", "Amount": "50"},
        ]

        ordered = sort_by_total(self.aggregator.aggregate(rows))

        self.assertEqual([s.identifier for s in ordered], ["big", "mid", "small"])

    def test_all_amounts_invalid_gives_no_groups(self):
        rows = [{"BA": "A", "Amount": "x"}, {"BA": "B", "Amount": ""}]

        self.assertEqual(self.aggregator.aggregate(rows), [])


if __name__ == "__main__":
    unittest.main()
