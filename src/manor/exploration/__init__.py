"""Exploration controller and its step results."""

from manor.exploration.controller import (
    ExplorationController,
    RoomVisit,
    StepResult,
    parse_direction,
)

__all__ = [
    "ExplorationController",
    "RoomVisit",
    "StepResult",
    "parse_direction",
]
