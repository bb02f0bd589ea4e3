"""Starter index for a conversion round.

A starter is the first character of a dictionary key. Collecting the starters
of every dictionary in a round lets the scanner skip positions that cannot
begin any match without probing a single dictionary.

For each starter the index also records which key lengths begin with it, so
the scanner only builds candidate substrings of lengths that exist.
"""

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Iterable, TYPE_CHECKING

if TYPE_CHECKING:
    from .schema import DictEntry

_NO_LENGTHS: tuple[int, ...] = ()


@dataclass(frozen=True)
class StarterUnion:
    """Starter characters and key lengths across an ordered dictionary list.

    Attributes:
        lengths: starter char -> distinct key lengths starting with it,
            longest first.
        max_length: Largest declared max key length in the round.
    """

    lengths: dict[str, tuple[int, ...]] = field(default_factory=dict)
    max_length: int = 0

    @classmethod
    def build(cls, entries: Iterable["DictEntry"]) -> "StarterUnion":
        """Scan all keys of ``entries`` once.

        Args:
            entries: Dictionaries of one round, in round order.

        Returns:
            StarterUnion covering every key.
        """
        collected: dict[str, set[int]] = defaultdict(set)
        max_length = 0

        for entry in entries:
            max_length = max(max_length, entry.max_length)
            for key in entry.mapping:
                collected[key[0]].add(len(key))

        return cls(
            lengths={
                ch: tuple(sorted(lens, reverse=True))
                for ch, lens in collected.items()
            },
            max_length=max_length,
        )

    @property
    def starters(self) -> frozenset[str]:
        return frozenset(self.lengths)

    def has_starter(self, ch: str) -> bool:
        return ch in self.lengths

    def lengths_for(self, ch: str) -> tuple[int, ...]:
        """Key lengths beginning with ``ch``, longest first; empty if none."""
        return self.lengths.get(ch, _NO_LENGTHS)
