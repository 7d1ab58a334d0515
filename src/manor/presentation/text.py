"""Player-facing text for the console and Textual front ends."""

from __future__ import annotations

from typing import Iterable

from manor.domain.models import ClueRecord
from manor.exploration.controller import RoomVisit, StepResult
from manor.judgment.accusation import AccusationVerdict

RULE = "-" * 51
BANNER = "=" * 52

ACTION_PROMPT = "Action (e) go LEFT, (d) go RIGHT, (s) STOP and judge: "
ACCUSATION_RETRY = "[WARNING] Type the name of one suspect."


def banner_lines(title: str, intro: Iterable[str]) -> list[str]:
    lines = [BANNER, f"         {title.upper()}"]
    lines.extend(f"         {line}" for line in intro)
    lines.append(BANNER)
    return lines


def visit_lines(visit: RoomVisit) -> list[str]:
    lines = ["", f"[Exploring] You are in: **{visit.room_name}**", RULE]
    if visit.discovered is not None:
        lines.append(
            f"CLUE FOUND: '{visit.discovered.clue}' which points to: {visit.discovered.suspect}"
        )
    lines.extend(f"[INFO] {note}" for note in visit.notes)
    lines.append(RULE)
    return lines


def step_lines(result: StepResult) -> list[str]:
    if result.visit is not None:
        return visit_lines(result.visit)
    return [result.message] if result.message else []


def evidence_lines(records: Iterable[ClueRecord]) -> list[str]:
    lines = ["", "", "=============== JUDGMENT PHASE ===============", "Collected clues (alphabetical):"]
    listed = [f"  - {record.clue:<25} (Points to: {record.suspect})" for record in records]
    lines.extend(listed or ["  (none)"])
    lines.append(RULE)
    return lines


def accusation_prompt(suspects: Iterable[str]) -> str:
    names = ", ".join(suspects)
    return f"Who do you accuse? ({names}): " if names else "Who do you accuse? "


def verdict_lines(verdict: AccusationVerdict) -> list[str]:
    lines = [
        "",
        "--- FINAL EVIDENCE CHECK ---",
        f"Accused suspect: {verdict.accused}",
        f"Clues found against the accused: {verdict.evidence_count}",
        "",
    ]
    if verdict.is_successful:
        lines.append("*** CASE CLOSED! ***")
        lines.append(
            f"The accusation against {verdict.accused} is backed by "
            f"{verdict.evidence_count} pieces of evidence. Detective Quest wins!"
        )
    else:
        lines.append("!!! ACCUSATION FAILED !!!")
        lines.append(
            f"At least {verdict.threshold} clues are needed to back the accusation. "
            "The culprit got away!"
        )
    return lines
