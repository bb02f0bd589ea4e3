"""OpenCC text dictionary ingestor.

Format (one entry per line):
    # comment
    头发	頭髮
    发	發 髮

Fields are separated by a tab or other whitespace. Lines with fewer than
two fields are reported as errors and skipped. When a line lists several
candidates, the first one is used. A key that appears on several lines takes
the value of the last one.
"""

from pathlib import Path
from typing import Iterator, Optional

from .base import Ingestor


class OpenccTextIngestor(Ingestor):
    """Ingestor for OpenCC .txt dictionaries."""

    def __init__(self, encoding: str = "utf-8", comment_char: str = "#"):
        super().__init__(encoding)
        self.comment_char = comment_char

    def parse(self, filepath: Path) -> Iterator[tuple[str, str, Optional[int]]]:
        """Parse an OpenCC dictionary file.

        Args:
            filepath: Path to .txt file.

        Yields:
            Tuples of (key, value, line_number).
        """
        with open(filepath, "r", encoding=self.encoding) as f:
            for line_num, line in enumerate(f, start=1):
                line = line.strip().lstrip("\ufeff")

                # Skip empty lines and comments
                if not line or line.startswith(self.comment_char):
                    continue

                parts = line.split()
                if len(parts) < 2:
                    self.report_error(filepath, line_num, f"expected key and value: {line!r}")
                    continue

                yield parts[0], parts[1], line_num


def ingest(filepath: Path | str, name: Optional[str] = None, encoding: str = "utf-8"):
    """Convenience function to ingest an OpenCC text dictionary.

    Args:
        filepath: Path to text file.
        name: Dictionary name (default: file stem).
        encoding: File encoding.

    Returns:
        IngestResult with the entry.
    """
    return OpenccTextIngestor(encoding=encoding).ingest(filepath, name=name)
