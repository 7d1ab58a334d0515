"""Clue ledger: collected evidence in clue order."""

from manor.ledger.clues import ClueLedger, ClueNode

__all__ = [
    "ClueLedger",
    "ClueNode",
]
