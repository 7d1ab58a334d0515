"""Fixed tuning constants for the mansion case."""

from __future__ import annotations

from pathlib import Path

HASH_BUCKETS = 10
MIN_EVIDENCE = 2
NAME_LIMIT = 49
DEFAULT_ACCUSED = "nobody"

CASE_FILE = Path(__file__).resolve().parent / "cases" / "mansion.yml"
