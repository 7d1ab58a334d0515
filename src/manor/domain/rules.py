"""Invariant checks for names shared across the case structures."""

from __future__ import annotations

from manor.config import NAME_LIMIT


def ensure_bounded_name(value: str, label: str) -> str:
    if not value:
        raise ValueError(f"{label} must not be empty")
    if len(value) > NAME_LIMIT:
        raise ValueError(f"{label} exceeds {NAME_LIMIT} characters: {value!r}")
    return value
