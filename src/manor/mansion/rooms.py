"""Fixed binary map of mansion rooms."""

from __future__ import annotations

from typing import Iterator

from pydantic import BaseModel, ConfigDict

from manor.domain.models import BoundedName


class Room(BaseModel):
    """A mansion room; owned by its parent, the root by the session."""

    model_config = ConfigDict(extra="forbid")

    name: BoundedName
    pending_clue: BoundedName | None = None
    left: Room | None = None
    right: Room | None = None

    @property
    def has_clue(self) -> bool:
        return self.pending_clue is not None

    def child(self, side: str) -> Room | None:
        if side == "left":
            return self.left
        if side == "right":
            return self.right
        raise ValueError(f"Unknown side: {side}")


Room.model_rebuild()


def create_room(name: str, clue: str | None = None) -> Room:
    """Build a leaf room. An empty clue string means the room holds nothing."""
    return Room(name=name, pending_clue=clue or None)


def iter_rooms(root: Room | None) -> Iterator[Room]:
    """Pre-order walk: a room, then its left subtree, then its right subtree."""
    if root is None:
        return
    yield root
    yield from iter_rooms(root.left)
    yield from iter_rooms(root.right)


def room_count(root: Room | None) -> int:
    return sum(1 for _ in iter_rooms(root))


def depth(root: Room | None) -> int:
    if root is None:
        return -1
    return 1 + max(depth(root.left), depth(root.right))


def teardown(root: Room | None) -> int:
    """Detach every room post-order and return how many were released."""
    if root is None:
        return 0
    released = teardown(root.left) + teardown(root.right)
    root.left = None
    root.right = None
    return released + 1
