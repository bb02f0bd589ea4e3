"""Base ingestor interface for dictionary sources.

All ingestors inherit from Ingestor and implement the parse() method.
This provides a consistent API for loading key -> value tables from any
source format into a DictEntry.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, Optional
import logging

from ..schema import DictEntry

logger = logging.getLogger(__name__)


@dataclass
class IngestResult:
    """Result of ingesting a dictionary source."""

    entry: DictEntry
    source_path: str
    dict_name: str
    total_raw: int = 0          # Entry lines in source
    total_valid: int = 0        # Distinct keys kept
    total_duplicates: int = 0   # Repeated keys within this source
    errors: list[str] = field(default_factory=list)

    def __repr__(self) -> str:
        return (
            f"IngestResult({self.dict_name}: "
            f"{self.total_valid}/{self.total_raw} valid, "
            f"{self.total_duplicates} dupes, max {self.entry.max_length})"
        )


class Ingestor(ABC):
    """Base class for dictionary ingestors.

    Subclasses must implement:
        - parse(filepath) -> Iterator of (key, value, line_number) tuples

    The ingest() method handles duplicates and DictEntry creation. The last
    occurrence of a key wins.
    """

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding
        self._errors: list[str] = []

    @abstractmethod
    def parse(self, filepath: Path) -> Iterator[tuple[str, str, Optional[int]]]:
        """Parse source file and yield (key, value, line_number) tuples.

        Malformed lines are reported through report_error() and skipped.

        Args:
            filepath: Path to source file.

        Yields:
            Tuples of (key, value, line_number).
        """
        pass

    def report_error(self, filepath: Path, line_num: Optional[int], message: str) -> None:
        """Record a malformed line."""
        error = f"{filepath.name}:{line_num}: {message}"
        self._errors.append(error)
        logger.warning("Malformed line ignored: %s", error)

    def get_dict_name(self, filepath: Path) -> str:
        """Generate dictionary name from filepath."""
        return filepath.stem

    def ingest(self, filepath: Path | str, name: Optional[str] = None) -> IngestResult:
        """Ingest dictionary from file.

        Args:
            filepath: Path to source file.
            name: Dictionary name; defaults to get_dict_name().

        Returns:
            IngestResult with the entry and statistics.
        """
        filepath = Path(filepath)
        dict_name = name or self.get_dict_name(filepath)
        self._errors = []

        mapping: dict[str, str] = {}
        total_raw = 0
        duplicates = 0

        for key, value, line_num in self.parse(filepath):
            total_raw += 1

            if key in mapping:
                duplicates += 1
                logger.debug(
                    "%s:%s: duplicate key %r overrides earlier value",
                    filepath.name, line_num, key,
                )

            mapping[key] = value

        entry = DictEntry.from_mapping(dict_name, mapping)
        return IngestResult(
            entry=entry,
            source_path=str(filepath.resolve()),
            dict_name=dict_name,
            total_raw=total_raw,
            total_valid=len(mapping),
            total_duplicates=duplicates,
            errors=list(self._errors),
        )
