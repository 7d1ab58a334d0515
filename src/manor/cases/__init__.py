"""Bundled case data and builders for the static case structures."""

from manor.cases.loader import (
    CaseFile,
    CaseFileError,
    build_mansion,
    build_suspicion_index,
    load_case,
    parse_case,
)

__all__ = [
    "CaseFile",
    "CaseFileError",
    "build_mansion",
    "build_suspicion_index",
    "load_case",
    "parse_case",
]
