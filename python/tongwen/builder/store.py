"""Dictionary store builder.

Reads the OpenCC text dictionaries of a directory into a DictionaryStore and
writes the combined JSON file used for fast startup.

Input structure:
    dicts/
    ├── STCharacters.txt
    ├── STPhrases.txt
    ├── TSCharacters.txt
    ├── ...
    └── STPunctuations.txt      (optional)

Output:
    dictionary_maxlength.json   {slot: [mapping, max_length], ...}
"""

from dataclasses import dataclass, field
from pathlib import Path
import logging

from ..schema import DICT_FILES, OPTIONAL_SLOTS, DictEntry, DictionaryStore, punctuation_entry
from ..ingest import get_ingestor

logger = logging.getLogger(__name__)


@dataclass
class BuildStats:
    """Statistics from a build operation."""

    total_entries: int = 0
    by_slot: dict[str, int] = field(default_factory=dict)
    max_lengths: dict[str, int] = field(default_factory=dict)
    files_read: list[str] = field(default_factory=list)
    fallbacks: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)


class StoreBuilder:
    """Builds a DictionaryStore from a directory of OpenCC text files."""

    def __init__(
        self,
        dict_dir: Path | str,
        ingestor: str = "opencc_text",
        encoding: str = "utf-8",
    ):
        """Initialize builder.

        Args:
            dict_dir: Directory containing the dictionary files.
            ingestor: Registered ingestor name.
            encoding: Dictionary file encoding.
        """
        self.dict_dir = Path(dict_dir)
        self.ingestor = get_ingestor(ingestor)(encoding=encoding)

    def missing_files(self) -> list[str]:
        """Get required dictionary files not present in dict_dir."""
        return [
            filename
            for slot, filename in DICT_FILES.items()
            if slot not in OPTIONAL_SLOTS and not (self.dict_dir / filename).is_file()
        ]

    def build(self) -> tuple[DictionaryStore, BuildStats]:
        """Read every dictionary slot.

        Returns:
            The store and BuildStats with counts and file paths.

        Raises:
            FileNotFoundError: If a required dictionary file is missing.
        """
        stats = BuildStats()
        entries: dict[str, DictEntry] = {}

        for slot, filename in DICT_FILES.items():
            filepath = self.dict_dir / filename

            if not filepath.is_file():
                if slot not in OPTIONAL_SLOTS:
                    raise FileNotFoundError(
                        f"Dictionary not found in {self.dict_dir}: {filename} ({slot})"
                    )
                logger.info("%s not found, using built-in punctuation map", filename)
                entries[slot] = punctuation_entry(slot)
                stats.fallbacks.append(slot)
            else:
                result = self.ingestor.ingest(filepath, name=slot)
                entries[slot] = result.entry
                stats.files_read.append(str(filepath))
                stats.errors.extend(result.errors)
                logger.debug("Ingested %r", result)

            entry = entries[slot]
            stats.total_entries += len(entry)
            stats.by_slot[slot] = len(entry)
            stats.max_lengths[slot] = entry.max_length

        store = DictionaryStore(entries)
        logger.info("Built %s from %s", store, self.dict_dir)
        return store, stats


def generate_json(
    dict_dir: Path | str,
    output: Path | str,
    encoding: str = "utf-8",
) -> BuildStats:
    """Build the store from text files and save it as one JSON file.

    Args:
        dict_dir: Directory containing the dictionary files.
        output: JSON file to write.
        encoding: Dictionary file encoding.

    Returns:
        BuildStats of the build.
    """
    store, stats = StoreBuilder(dict_dir, encoding=encoding).build()
    store.save(output)
    return stats
