"""Dictionary schema and store for tongwen.

Core concept:
    - Each OpenCC dictionary is a DictEntry: key -> value plus the longest
      key length, measured in characters
    - A DictionaryStore holds one DictEntry per named slot and is loaded
      once, then shared read-only by every conversion
    - Starter indexes for round compositions are derived from the store and
      cached on it by UnionKey

JSON layout (compatible with OpenCC ``dictionary_maxlength.json``):
    {
        "st_characters": [{"汉": "漢", ...}, 1],
        "st_phrases": [{"长江": "長江", ...}, 16],
        ...
    }
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any
import json
import logging

from .punct import PUNCT_S2T_MAP, PUNCT_T2S_MAP
from .starter import StarterUnion
from .unions import UnionKey, UNION_SLOTS

logger = logging.getLogger(__name__)

# slot name -> OpenCC text dictionary file
DICT_FILES: dict[str, str] = {
    "st_characters": "STCharacters.txt",
    "st_phrases": "STPhrases.txt",
    "ts_characters": "TSCharacters.txt",
    "ts_phrases": "TSPhrases.txt",
    "tw_phrases": "TWPhrases.txt",
    "tw_phrases_rev": "TWPhrasesRev.txt",
    "tw_variants": "TWVariants.txt",
    "tw_variants_rev": "TWVariantsRev.txt",
    "tw_variants_rev_phrases": "TWVariantsRevPhrases.txt",
    "hk_variants": "HKVariants.txt",
    "hk_variants_rev": "HKVariantsRev.txt",
    "hk_variants_rev_phrases": "HKVariantsRevPhrases.txt",
    "jps_characters": "JPShinjitaiCharacters.txt",
    "jps_phrases": "JPShinjitaiPhrases.txt",
    "jp_variants": "JPVariants.txt",
    "jp_variants_rev": "JPVariantsRev.txt",
    "st_punctuations": "STPunctuations.txt",
    "ts_punctuations": "TSPunctuations.txt",
}

# Slots that may be absent on disk; they default to the fixed quote maps.
OPTIONAL_SLOTS = frozenset({"st_punctuations", "ts_punctuations"})


class DictionaryError(ValueError):
    """Malformed dictionary data."""


@dataclass(frozen=True)
class DictEntry:
    """One named key -> value table with its longest key length."""

    name: str
    mapping: dict[str, str] = field(default_factory=dict)
    max_length: int = 1

    def __post_init__(self):
        """Reject malformed data at construction time."""
        if not isinstance(self.max_length, int) or isinstance(self.max_length, bool):
            raise DictionaryError(
                f"{self.name}: max_length must be an int, got {self.max_length!r}"
            )
        if self.max_length < 1:
            raise DictionaryError(
                f"{self.name}: max_length must be positive, got {self.max_length}"
            )

        longest = 0
        for key, value in self.mapping.items():
            if not isinstance(key, str) or not isinstance(value, str):
                raise DictionaryError(
                    f"{self.name}: keys and values must be strings, got {key!r}: {value!r}"
                )
            if not key:
                raise DictionaryError(f"{self.name}: empty key")
            longest = max(longest, len(key))

        # Keys longer than max_length would never be probed.
        if longest > self.max_length:
            raise DictionaryError(
                f"{self.name}: max_length {self.max_length} is shorter than "
                f"longest key ({longest})"
            )

    @classmethod
    def from_mapping(cls, name: str, mapping: dict[str, str]) -> "DictEntry":
        """Create an entry, computing max_length from the keys."""
        max_length = max((len(k) for k in mapping if isinstance(k, str)), default=1)
        return cls(name=name, mapping=dict(mapping), max_length=max_length)

    def __len__(self) -> int:
        return len(self.mapping)

    def to_list(self) -> list[Any]:
        """Convert to the OpenCC JSON array form ``[mapping, max_length]``."""
        return [self.mapping, self.max_length]

    @classmethod
    def from_list(cls, name: str, data: Any) -> "DictEntry":
        """Create from the OpenCC JSON array form."""
        if (
            not isinstance(data, (list, tuple))
            or len(data) != 2
            or not isinstance(data[0], dict)
            or not isinstance(data[1], int)
            or isinstance(data[1], bool)
        ):
            raise DictionaryError(f"{name}: expected [mapping, max_length]")
        return cls(name=name, mapping=dict(data[0]), max_length=data[1])


def punctuation_entry(slot: str) -> DictEntry:
    """Build a punctuation slot from the fixed quote maps."""
    if slot == "st_punctuations":
        return DictEntry.from_mapping(slot, PUNCT_S2T_MAP)
    if slot == "ts_punctuations":
        return DictEntry.from_mapping(slot, PUNCT_T2S_MAP)
    raise KeyError(f"Not a punctuation slot: {slot}")


class DictionaryStore:
    """All conversion dictionaries, keyed by slot name.

    Entries are never mutated after construction. The only state that
    changes afterwards is the starter-index cache, which is filled on demand
    with insert-if-absent semantics and needs no lock: two threads building
    the same union produce equal values and one of them is kept.
    """

    def __init__(self, entries: dict[str, DictEntry]):
        """Initialize store.

        Args:
            entries: slot name -> DictEntry. Every slot in DICT_FILES must
                be present.

        Raises:
            DictionaryError: If a slot is missing.
        """
        missing = [slot for slot in DICT_FILES if slot not in entries]
        if missing:
            raise DictionaryError(f"Missing dictionaries: {', '.join(missing)}")

        self._entries: dict[str, DictEntry] = dict(entries)
        self._unions: dict[UnionKey, StarterUnion] = {}

    def get(self, slot: str) -> DictEntry:
        """Get dictionary by slot name."""
        try:
            return self._entries[slot]
        except KeyError:
            raise KeyError(
                f"Unknown dictionary slot: {slot}. Available: {list(DICT_FILES)}"
            ) from None

    def entries_for(self, union_key: UnionKey) -> tuple[DictEntry, ...]:
        """Get the ordered dictionaries of a round composition."""
        return tuple(self._entries[slot] for slot in UNION_SLOTS[union_key])

    def union_for(self, union_key: UnionKey) -> StarterUnion:
        """Get (building once) the starter index of a round composition."""
        union = self._unions.get(union_key)
        if union is None:
            union = StarterUnion.build(self.entries_for(union_key))
            union = self._unions.setdefault(union_key, union)
        return union

    def slots(self) -> list[str]:
        """Get slot names in canonical order."""
        return [slot for slot in DICT_FILES if slot in self._entries]

    def count(self) -> int:
        """Get number of non-empty dictionaries."""
        return sum(1 for entry in self._entries.values() if len(entry))

    def __repr__(self) -> str:
        return f"<DictionaryStore with {self.count()} loaded dicts>"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {slot: self._entries[slot].to_list() for slot in self.slots()}

    def save(self, filepath: Path | str) -> None:
        """Save store to a JSON file."""
        filepath = Path(filepath)
        filepath.parent.mkdir(parents=True, exist_ok=True)
        with open(filepath, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, ensure_ascii=False)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "DictionaryStore":
        """Create from the JSON layout, filling optional punctuation slots."""
        entries = {}
        for slot in DICT_FILES:
            if slot in data:
                entries[slot] = DictEntry.from_list(slot, data[slot])
            elif slot in OPTIONAL_SLOTS:
                entries[slot] = punctuation_entry(slot)
        return cls(entries)

    @classmethod
    def load(cls, filepath: Path | str) -> "DictionaryStore":
        """Load store from a JSON file."""
        with open(filepath, "r", encoding="utf-8") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise DictionaryError(f"{filepath}: invalid JSON ({e})") from e

        if not isinstance(data, dict):
            raise DictionaryError(f"{filepath}: expected a JSON object")

        store = cls.from_dict(data)
        logger.info("Loaded %s from %s", store, filepath)
        return store
