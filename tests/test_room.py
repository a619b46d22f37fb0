"""
Tests for core/room.py
"""

from ant_meadow.core.ant import DroneAnt
from ant_meadow.core.room import Room, RoomType
from ant_meadow.core.species import Species


SPECIES = Species("Species0", 5, 5, 5)


class TestRoom:
    """Tests for Room."""

    def test_initialization(self):
        room = Room("Nursery", RoomType.SPAWNING, 3)
        assert room.name == "Nursery"
        assert room.room_type is RoomType.SPAWNING
        assert room.capacity == 3
        assert len(room) == 0
        assert room.can_accept_more_ants()

    def test_add_ant_until_full(self):
        room = Room("Barracks", RoomType.BATTLE, 2)
        ants = [DroneAnt(f"d{i}", SPECIES) for i in range(3)]
        for ant in ants:
            room.add_ant(ant)

        assert room.ants == ants[:2]
        assert not room.can_accept_more_ants()

    def test_zero_capacity_ignores_everything(self):
        room = Room("Closet", RoomType.STORAGE, 0)
        room.add_ant(DroneAnt("d", SPECIES))
        assert len(room) == 0

    def test_holds_references(self):
        """Rooms hold the same ant objects, not copies."""
        room = Room("Den", RoomType.RESTING, 1)
        ant = DroneAnt("d", SPECIES)
        room.add_ant(ant)
        ant.work()
        assert room.ants[0].energy == 90

    def test_repr(self):
        room = Room("Den", RoomType.RESTING, 4)
        assert repr(room) == "Room(name=Den, type=resting, occupancy=0/4)"
