"""
core/room.py

Chambers inside a farm.

A room only remembers who was put in it. The farm's own roster
is the authority on who lives there; rooms never feed back into it.
"""

from __future__ import annotations
from enum import Enum
from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from .ant import Ant


class RoomType(Enum):
    """Purpose of a room."""
    SPAWNING = "spawning"
    RESTING = "resting"
    STORAGE = "storage"
    BATTLE = "battle"


class Room:
    """Capacity-bounded collection of ants."""

    def __init__(self, name: str, room_type: RoomType, capacity: int):
        self.name = name
        self.room_type = room_type
        self.capacity = capacity

        # References only - the farm owns its ants
        self.ants: List[Ant] = []

    def can_accept_more_ants(self) -> bool:
        return len(self.ants) < self.capacity

    def add_ant(self, ant: Ant) -> None:
        """Add an ant if there is space. A full room ignores the request."""
        if self.can_accept_more_ants():
            self.ants.append(ant)

    def __len__(self) -> int:
        return len(self.ants)

    def __repr__(self) -> str:
        return (
            f"Room(name={self.name}, "
            f"type={self.room_type.value}, "
            f"occupancy={len(self.ants)}/{self.capacity})"
        )
