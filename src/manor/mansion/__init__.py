"""Mansion map: rooms and their pending clues."""

from manor.mansion.rooms import Room, create_room, depth, iter_rooms, room_count, teardown

__all__ = [
    "Room",
    "create_room",
    "depth",
    "iter_rooms",
    "room_count",
    "teardown",
]
