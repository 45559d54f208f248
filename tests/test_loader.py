"""Tests for CSV intake."""
import unittest
import tempfile
import shutil
from pathlib import Path

from clustergenius.aggregation import Aggregator, load_csv
from clustergenius.utils.exceptions import EmptyInputError, InputFileError


class TestLoadCsv(unittest.TestCase):
    """Test load_csv functionality."""

    def setUp(self):
        """Set up test fixtures."""
        self.test_dir = Path(tempfile.mkdtemp())

    def tearDown(self):
        """Clean up test fixtures."""
        shutil.rmtree(self.test_dir, ignore_errors=True)

    def _write(self, name: str, text: str, encoding: str = "utf-8") -> Path:
        path = self.test_dir / name
        path.write_text(text, encoding=encoding)
        return path

    def test_reads_rows_and_skips_blank_lines(self):
        path = self._write(
            "tx.csv",
            'BA_ID,Net_Amount\nA1,"1,000.00"\n\nA1,500\nB2,abc\n'
        )

        rows = load_csv(path)

        self.assertEqual(len(rows), 3)
        self.assertEqual(rows[0], {"BA_ID": "A1", "Net_Amount": "1,000.00"})

    def test_byte_order_mark_is_removed(self):
        path = self._write("bom.csv", "BA,Amount\nA,1\n", encoding="utf-8-sig")

        rows = load_csv(path)

        self.assertEqual(list(rows[0].keys()), ["BA", "Amount"])

    def test_short_and_long_rows(self):
        path = self._write("ragged.csv", "BA,Amount\nA\nB,2,extra\n")

        rows = load_csv(path)

        self.assertIsNone(rows[0]["Amount"])
        self.assertEqual(rows[1], {"BA": "B", "Amount": "2"})

    def test_header_only_is_empty_input(self):
        path = self._write("empty.csv", "BA_ID,Net_Amount\n")

        rows = load_csv(path)

        self.assertEqual(rows, [])
        with self.assertRaises(EmptyInputError):
            Aggregator().aggregate(rows)

    def test_rejects_non_csv(self):
        path = self._write("tx.txt", "BA,Amount\n")
        with self.assertRaises(InputFileError):
            load_csv(path)

    def test_missing_file(self):
        with self.assertRaises(InputFileError):
            load_csv(self.test_dir / "missing.csv")

    def test_undecodable_file(self):
        path = self.test_dir / "latin.csv"
        path.write_bytes(b"BA,Amount\n\xff\xfe\xfa,1\n")
        with self.assertRaises(InputFileError):
            load_csv(path)


if __name__ == "__main__":
    unittest.main()
