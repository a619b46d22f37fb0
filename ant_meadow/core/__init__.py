"""
Core components of the ant meadow.

- species: Stat bonuses shared by ants and farms
- ant: The ants themselves - drones, warriors, queens
- room: Capacity-bounded chambers inside a farm
"""

from .species import Species
from .ant import Ant, AntConfig, AntState, AntType, DroneAnt, WarriorAnt, QueenAnt, create_ant
from .room import Room, RoomType

__all__ = [
    "Species",
    "Ant",
    "AntConfig",
    "AntState",
    "AntType",
    "DroneAnt",
    "WarriorAnt",
    "QueenAnt",
    "create_ant",
    "Room",
    "RoomType",
]
