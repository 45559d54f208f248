"""CSV intake for transaction exports."""
import csv
from pathlib import Path
from typing import Dict, List, Optional

from ..utils.logger import get_logger
from ..utils.exceptions import InputFileError

logger = get_logger()


def read_rows(path: Path, encoding: str = "utf-8-sig") -> List[Dict[str, Optional[str]]]:
    """
    Read a comma-separated file with a header row.

    Blank lines are skipped. Short rows get None for missing cells and
    surplus cells beyond the header are dropped.
    """
    with open(path, "r", encoding=encoding, newline="") as f:
        reader = csv.DictReader(f)
        rows = []
        for row in reader:
            row.pop(None, None)
            rows.append(row)
    return rows


def load_csv(path: Path) -> List[Dict[str, Optional[str]]]:
    """Load transaction rows from a CSV file."""
    path = Path(path)

    if path.suffix.lower() != ".csv":
        raise InputFileError(f"Please upload a valid CSV file: {path.name}")
    if not path.is_file():
        raise InputFileError(f"File not found: {path}")

    try:
        rows = read_rows(path)
    except (UnicodeDecodeError, csv.Error, OSError) as e:
        raise InputFileError(f"Failed to parse CSV {path.name}: {e}")

    logger.info(f"Read {len(rows)} rows from {path.name}")
    return rows
