"""
environments/ant_farm.py

A colony: one queen, her ants, their rooms, and a shared larder.

Every tick each ant acts and then eats. The first ant that finds
the larder too empty ends the colony for good.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import List, Optional
import numpy as np

from ant_meadow.core.ant import Ant, QueenAnt
from ant_meadow.core.room import Room
from ant_meadow.core.species import Species

logger = logging.getLogger(__name__)


@dataclass
class FarmConfig:
    """Configuration for an ant farm."""
    initial_food: int = 1000     # Starting food supply


class AntFarm:
    """
    A colony of ants around a single queen.

    Features:
    - Ordered roster; ants act in the order they were added
    - Rooms kept as separate bookkeeping
    - Fail-fast starvation: a colony that cannot feed an ant is done
    """

    def __init__(
        self,
        name: str,
        species: Species,
        config: Optional[FarmConfig] = None
    ):
        self.name = name
        self.species = species
        self.config = config or FarmConfig()

        self.queen: Optional[QueenAnt] = None
        self.ants: List[Ant] = []
        self.rooms: List[Room] = []

        self.food_supply = self.config.initial_food
        self.is_active = True
        self.time = 0

    def add_room(self, room: Room) -> None:
        self.rooms.append(room)

    def set_queen(self, queen: QueenAnt) -> None:
        """
        Crown a queen. She also joins the roster.

        Crowning again replaces the queen reference; the previous queen
        stays on the roster and keeps eating.
        """
        self.queen = queen
        self.ants.append(queen)

    def add_ant(self, ant: Ant) -> None:
        self.ants.append(ant)

    def tick(self) -> None:
        """
        Advance the colony by one tick.

        Each ant in roster order acts, then eats. If an ant cannot eat,
        the colony deactivates and the rest of the roster is skipped.
        Effects already applied this tick stay applied.
        """
        if not self.is_active or self.queen is None:
            return

        self.time += 1

        for ant in self.ants:
            ant.act()

            fed, self.food_supply = ant.consume_food(self.food_supply)
            if not fed:
                self.is_active = False
                logger.info(
                    f"{self.name} starved on tick {self.time}: "
                    f"{ant.name} could not eat ({self.food_supply} food left)"
                )
                return

    def is_active_colony(self) -> bool:
        return self.is_active and self.queen is not None

    def get_energies(self) -> np.ndarray:
        """Get energy levels of all ants on the roster."""
        return np.array([a.energy for a in self.ants], dtype=np.int64)

    def __repr__(self) -> str:
        return (
            f"AntFarm(name={self.name}, "
            f"ants={len(self.ants)}, "
            f"food={self.food_supply}, "
            f"active={self.is_active_colony()})"
        )
