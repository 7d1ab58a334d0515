"""Ordered ledger of collected clues, kept as a binary search tree."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Iterator

from manor.domain.models import ClueRecord

logger = logging.getLogger(__name__)


@dataclass
class ClueNode:
    record: ClueRecord
    left: ClueNode | None = None
    right: ClueNode | None = None


def _insert(node: ClueNode | None, record: ClueRecord) -> tuple[ClueNode, bool]:
    if node is None:
        return ClueNode(record), True
    if record.clue < node.record.clue:
        node.left, added = _insert(node.left, record)
    elif record.clue > node.record.clue:
        node.right, added = _insert(node.right, record)
    else:
        added = False
    return node, added


def _in_order(node: ClueNode | None) -> Iterator[ClueRecord]:
    if node is None:
        return
    yield from _in_order(node.left)
    yield node.record
    yield from _in_order(node.right)


def _count_matching(node: ClueNode | None, suspect: str) -> int:
    if node is None:
        return 0
    count = 1 if node.record.suspect == suspect else 0
    return count + _count_matching(node.left, suspect) + _count_matching(node.right, suspect)


def _release(node: ClueNode | None) -> int:
    if node is None:
        return 0
    released = _release(node.left) + _release(node.right)
    node.left = None
    node.right = None
    return released + 1


class ClueLedger:
    """Evidence collected during one exploration, one record per clue."""

    def __init__(self) -> None:
        self._root: ClueNode | None = None
        self._size = 0

    def insert(self, record: ClueRecord) -> bool:
        """Add ``record``; a clue already present is discarded and ``False`` returned."""
        self._root, added = _insert(self._root, record)
        if added:
            self._size += 1
        else:
            logger.info("Discarded duplicate clue %r", record.clue)
        return added

    def in_order(self) -> Iterator[ClueRecord]:
        return _in_order(self._root)

    def __iter__(self) -> Iterator[ClueRecord]:
        return self.in_order()

    def __len__(self) -> int:
        return self._size

    def __contains__(self, clue: object) -> bool:
        if not isinstance(clue, str):
            return False
        node = self._root
        while node is not None:
            if clue == node.record.clue:
                return True
            node = node.left if clue < node.record.clue else node.right
        return False

    @property
    def is_empty(self) -> bool:
        return self._root is None

    def count_matching(self, suspect: str) -> int:
        return _count_matching(self._root, suspect)

    def teardown(self) -> int:
        released = _release(self._root)
        self._root = None
        self._size = 0
        return released
