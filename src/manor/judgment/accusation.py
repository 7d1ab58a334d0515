"""Final judgment: does the evidence support the accusation?"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from manor.config import MIN_EVIDENCE, NAME_LIMIT
from manor.ledger.clues import ClueLedger


@dataclass(frozen=True)
class AccusationVerdict:
    accused: str
    evidence_count: int
    threshold: ClassVar[int] = MIN_EVIDENCE

    @property
    def is_successful(self) -> bool:
        return self.evidence_count >= self.threshold


def verify(ledger: ClueLedger, accused: str) -> AccusationVerdict:
    return AccusationVerdict(accused=accused, evidence_count=ledger.count_matching(accused))


def parse_accusation(line: str) -> str | None:
    """Trim a typed accusation; ``None`` when blank or too long to be a name."""
    accused = line.strip()
    if not accused or len(accused) > NAME_LIMIT:
        return None
    return accused
