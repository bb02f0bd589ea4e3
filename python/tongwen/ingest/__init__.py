"""Dictionary ingestion module.

Provides pluggable ingestors for dictionary formats:
- OpenCC text dictionaries (key<TAB>value per line)
- Custom formats via register_ingestor()

Usage:
    from tongwen.ingest import opencc_text

    result = opencc_text.ingest("dicts/STCharacters.txt", name="st_characters")
    entry = result.entry
"""

from .base import Ingestor, IngestResult
from . import opencc_text

# Register available ingestors
INGESTORS: dict[str, type[Ingestor]] = {
    "opencc_text": opencc_text.OpenccTextIngestor,
}


def get_ingestor(name: str) -> type[Ingestor]:
    """Get ingestor class by name."""
    if name not in INGESTORS:
        raise ValueError(f"Unknown ingestor: {name}. Available: {list(INGESTORS.keys())}")
    return INGESTORS[name]


def register_ingestor(name: str, ingestor_cls: type[Ingestor]) -> None:
    """Register a custom ingestor."""
    INGESTORS[name] = ingestor_cls


__all__ = [
    "Ingestor",
    "IngestResult",
    "opencc_text",
    "get_ingestor",
    "register_ingestor",
    "INGESTORS",
]
