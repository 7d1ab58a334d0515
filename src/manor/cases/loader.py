"""Load the bundled case file and build the static case structures."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from manor import config
from manor.domain import rules
from manor.index.suspicion import SuspicionIndex
from manor.mansion.rooms import Room, create_room


class CaseFileError(ValueError):
    pass


@dataclass(frozen=True)
class CaseFile:
    title: str
    intro: list[str]
    clues: list[tuple[str, str]]
    layout: dict[str, Any]
    source: Path | None = field(default=None, compare=False)


_CASE_CACHE: CaseFile | None = None


def _bounded(value: Any, label: str) -> str:
    try:
        return rules.ensure_bounded_name(str(value).strip(), label)
    except ValueError as exc:
        raise CaseFileError(str(exc)) from exc


def _parse_clues(raw: Any) -> list[tuple[str, str]]:
    if not isinstance(raw, list) or not raw:
        raise CaseFileError("case file needs a non-empty 'clues' list")
    pairs: list[tuple[str, str]] = []
    for position, item in enumerate(raw):
        if not isinstance(item, dict) or "clue" not in item or "suspect" not in item:
            raise CaseFileError(f"clue entry {position} needs 'clue' and 'suspect'")
        pairs.append(
            (
                _bounded(item["clue"], f"clue entry {position} clue"),
                _bounded(item["suspect"], f"clue entry {position} suspect"),
            )
        )
    return pairs


def _check_layout(node: Any, known_clues: set[str], seen: set[str]) -> None:
    if not isinstance(node, dict) or not node.get("name"):
        raise CaseFileError("every room needs a 'name'")
    name = _bounded(node["name"], "room name")
    if name in seen:
        raise CaseFileError(f"duplicate room name: {name}")
    seen.add(name)
    clue = node.get("clue")
    if clue and str(clue).strip() not in known_clues:
        raise CaseFileError(f"room {name} references unknown clue: {clue}")
    for side in ("left", "right"):
        if node.get(side) is not None:
            _check_layout(node[side], known_clues, seen)


def parse_case(data: Any, source: Path | None = None) -> CaseFile:
    if not isinstance(data, dict):
        raise CaseFileError("case file must be a mapping")
    clues = _parse_clues(data.get("clues"))
    layout = data.get("map")
    _check_layout(layout, {clue for clue, _ in clues}, set())
    return CaseFile(
        title=str(data.get("title", "")).strip(),
        intro=[str(line) for line in data.get("intro", []) or []],
        clues=clues,
        layout=layout,
        source=source,
    )


def load_case(path: Path | None = None) -> CaseFile:
    """Read a case file; the bundled one is parsed once and cached."""
    global _CASE_CACHE
    if path is None and _CASE_CACHE is not None:
        return _CASE_CACHE
    case_path = path or config.CASE_FILE
    case = parse_case(yaml.safe_load(case_path.read_text(encoding="utf-8")), source=case_path)
    if path is None:
        _CASE_CACHE = case
    return case


def build_suspicion_index(case: CaseFile, bucket_count: int = config.HASH_BUCKETS) -> SuspicionIndex:
    index = SuspicionIndex(bucket_count=bucket_count)
    for clue, suspect in case.clues:
        index.insert(clue, suspect)
    return index


def _build_room(node: dict[str, Any]) -> Room:
    clue = node.get("clue")
    room = create_room(str(node["name"]).strip(), str(clue).strip() if clue else None)
    if node.get("left") is not None:
        room.left = _build_room(node["left"])
    if node.get("right") is not None:
        room.right = _build_room(node["right"])
    return room


def build_mansion(case: CaseFile) -> Room:
    return _build_room(case.layout)
