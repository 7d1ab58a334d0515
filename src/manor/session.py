"""One playthrough: owns the index, the map and the ledger."""

from __future__ import annotations

from dataclasses import dataclass, field
import logging

from manor.cases.loader import CaseFile, build_mansion, build_suspicion_index, load_case
from manor.domain.models import ClueRecord
from manor.exploration.controller import ExplorationController
from manor.index.suspicion import SuspicionIndex
from manor.judgment.accusation import AccusationVerdict, verify
from manor.ledger.clues import ClueLedger
from manor.mansion import rooms
from manor.mansion.rooms import Room

logger = logging.getLogger(__name__)


@dataclass
class GameSession:
    case: CaseFile
    index: SuspicionIndex
    mansion: Room
    ledger: ClueLedger = field(default_factory=ClueLedger)
    closed: bool = False

    def __post_init__(self) -> None:
        self.controller = ExplorationController(self.mansion, self.index, self.ledger)

    def suspects(self) -> list[str]:
        return self.index.suspects()

    def evidence(self) -> list[ClueRecord]:
        return list(self.ledger.in_order())

    def judge(self, accused: str) -> AccusationVerdict:
        return verify(self.ledger, accused)

    def close(self) -> dict[str, int]:
        """Release map, ledger and index, in that order, exactly once."""
        if self.closed:
            return {}
        released = {
            "rooms": rooms.teardown(self.mansion),
            "clues": self.ledger.teardown(),
            "index_entries": self.index.teardown(),
        }
        self.closed = True
        logger.info("Session released %s", released)
        return released


def open_session(case: CaseFile | None = None) -> GameSession:
    """Build the index first, then the map, from the bundled case by default."""
    case = case or load_case()
    index = build_suspicion_index(case)
    mansion = build_mansion(case)
    return GameSession(case=case, index=index, mansion=mansion)
