"""Room-by-room exploration of the mansion map."""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Callable

from manor.domain.enums import Direction, ExplorationPhase, StepOutcome
from manor.domain.models import ClueRecord
from manor.index.suspicion import SuspicionIndex
from manor.ledger.clues import ClueLedger
from manor.mansion.rooms import Room

logger = logging.getLogger(__name__)


@dataclass
class RoomVisit:
    room_name: str
    discovered: ClueRecord | None = None
    notes: list[str] = field(default_factory=list)


@dataclass
class StepResult:
    outcome: StepOutcome
    message: str = ""
    visit: RoomVisit | None = None


def parse_direction(raw: str) -> Direction | None:
    """Read the action letter: first non-blank character, case-insensitive."""
    text = raw.strip()
    if not text:
        return None
    try:
        return Direction(text[0].lower())
    except ValueError:
        return None


class ExplorationController:
    """Single-pass, depth-first walk driven by the player's choices.

    The index is only read; the ledger and the rooms' pending clues are the
    only state mutated here.
    """

    def __init__(self, mansion: Room, index: SuspicionIndex, ledger: ClueLedger) -> None:
        self.mansion = mansion
        self.index = index
        self.ledger = ledger
        self.current: Room | None = None
        self.phase = ExplorationPhase.AT_ROOM
        self.path: list[str] = []

    @property
    def finished(self) -> bool:
        return self.phase == ExplorationPhase.FINISHED

    def start(self) -> RoomVisit:
        return self._enter(self.mansion)

    def collect_clue(self, room: Room, clear: bool = True) -> RoomVisit:
        """Resolve the room's pending clue against the index into the ledger."""
        visit = RoomVisit(room_name=room.name)
        clue = room.pending_clue
        if clue is None:
            visit.notes.append("No clue to collect in this room.")
            return visit
        suspect = self.index.lookup(clue)
        if suspect is None:
            logger.info("Clue %r in %s is not in the suspicion index", clue, room.name)
            visit.notes.append("This room has no more clues to collect.")
            return visit
        record = ClueRecord(clue=clue, suspect=suspect)
        if self.ledger.insert(record):
            visit.discovered = record
        else:
            visit.notes.append(f"Clue '{clue}' is already in your notes.")
        if clear:
            room.pending_clue = None
        return visit

    def _enter(self, room: Room) -> RoomVisit:
        self.current = room
        self.phase = ExplorationPhase.AT_ROOM
        self.path.append(room.name)
        logger.debug("Entered %s", room.name)
        visit = self.collect_clue(room)
        self.phase = ExplorationPhase.EXPLORING
        return visit

    def choose(self, raw: str | None) -> StepResult:
        if self.finished:
            return StepResult(StepOutcome.STOPPED, "Exploration is already over.")
        if self.current is None:
            raise RuntimeError("exploration has not started")
        if raw is None:
            self.phase = ExplorationPhase.FINISHED
            return StepResult(StepOutcome.EXHAUSTED, "No more input. Heading to judgment...")
        direction = parse_direction(raw)
        if direction is None:
            return StepResult(StepOutcome.INVALID, "[ERROR] Invalid action.")
        if direction == Direction.STOP:
            self.phase = ExplorationPhase.FINISHED
            return StepResult(
                StepOutcome.STOPPED,
                "Exploration finished. Heading to judgment...",
            )
        side = "left" if direction == Direction.LEFT else "right"
        target = self.current.child(side)
        if target is None:
            return StepResult(
                StepOutcome.NO_ROOM,
                "[WARNING] There is no room in that direction. Choose another action.",
            )
        return StepResult(StepOutcome.MOVED, visit=self._enter(target))

    def run(
        self,
        read_choice: Callable[[], str | None],
        report: Callable[[RoomVisit | StepResult], None] | None = None,
    ) -> list[str]:
        """Blocking loop: start at the root and step until finished."""
        visit = self.start()
        if report:
            report(visit)
        while not self.finished:
            result = self.choose(read_choice())
            if report:
                report(result)
        return list(self.path)
