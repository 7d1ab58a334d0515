"""Suspicion index: clue to suspect lookups."""

from manor.index.suspicion import IndexEntry, SuspicionIndex, djb2_hash

__all__ = [
    "IndexEntry",
    "SuspicionIndex",
    "djb2_hash",
]
