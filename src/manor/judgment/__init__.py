"""Accusation judge."""

from manor.judgment.accusation import AccusationVerdict, parse_accusation, verify

__all__ = [
    "AccusationVerdict",
    "parse_accusation",
    "verify",
]
