"""Chained hash table from clue names to the suspects they implicate."""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Iterator

from manor.config import HASH_BUCKETS
from manor.domain import rules

logger = logging.getLogger(__name__)

_DJB2_SEED = 5381
_WORD_MASK = (1 << 64) - 1


def djb2_hash(key: str, buckets: int = HASH_BUCKETS) -> int:
    """Fold ``key`` into ``[0, buckets)`` with djb2 (``h * 33 + byte``)."""
    if buckets <= 0:
        raise ValueError("buckets must be positive")
    value = _DJB2_SEED
    for byte in key.encode("utf-8"):
        value = ((value << 5) + value + byte) & _WORD_MASK
    return value % buckets


@dataclass
class IndexEntry:
    clue: str
    suspect: str
    next: IndexEntry | None = None


@dataclass
class SuspicionIndex:
    """Filled once before exploration and only read afterwards.

    Each bucket is a singly linked chain with the most recently inserted
    entry at its head, so a repeated clue shadows the older one.
    """

    bucket_count: int = HASH_BUCKETS
    _buckets: list[IndexEntry | None] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.bucket_count <= 0:
            raise ValueError("bucket_count must be positive")
        self._buckets = [None] * self.bucket_count

    def bucket_of(self, clue: str) -> int:
        return djb2_hash(clue, self.bucket_count)

    def insert(self, clue: str, suspect: str) -> None:
        rules.ensure_bounded_name(clue, "clue")
        rules.ensure_bounded_name(suspect, "suspect")
        index = self.bucket_of(clue)
        self._buckets[index] = IndexEntry(clue=clue, suspect=suspect, next=self._buckets[index])
        logger.debug("Indexed clue %r under bucket %d", clue, index)

    def lookup(self, clue: str) -> str | None:
        entry = self._buckets[self.bucket_of(clue)]
        while entry is not None:
            if entry.clue == clue:
                return entry.suspect
            entry = entry.next
        return None

    def __contains__(self, clue: object) -> bool:
        return isinstance(clue, str) and self.lookup(clue) is not None

    def __len__(self) -> int:
        return sum(self.chain_lengths())

    def entries(self) -> Iterator[IndexEntry]:
        """Walk every bucket in order, each chain head first."""
        for head in self._buckets:
            entry = head
            while entry is not None:
                yield entry
                entry = entry.next

    def chain_lengths(self) -> list[int]:
        lengths: list[int] = []
        for head in self._buckets:
            count = 0
            entry = head
            while entry is not None:
                count += 1
                entry = entry.next
            lengths.append(count)
        return lengths

    def suspects(self) -> list[str]:
        return sorted({entry.suspect for entry in self.entries()})

    def teardown(self) -> int:
        released = len(self)
        self._buckets = [None] * self.bucket_count
        return released
