"""Shared enums for exploration and judgment."""

from __future__ import annotations

from enum import StrEnum


class Direction(StrEnum):
    LEFT = "e"
    RIGHT = "d"
    STOP = "s"


class ExplorationPhase(StrEnum):
    AT_ROOM = "at_room"
    EXPLORING = "exploring"
    FINISHED = "finished"


class StepOutcome(StrEnum):
    MOVED = "moved"
    STOPPED = "stopped"
    NO_ROOM = "no_room"
    INVALID = "invalid"
    EXHAUSTED = "exhausted"
