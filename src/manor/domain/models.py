"""Domain records shared by the ledger and the judge."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, StringConstraints

from manor.config import NAME_LIMIT

BoundedName = Annotated[str, StringConstraints(min_length=1, max_length=NAME_LIMIT)]


class ClueRecord(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    clue: BoundedName
    suspect: BoundedName
