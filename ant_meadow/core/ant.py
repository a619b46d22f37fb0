"""
core/ant.py

An ant works until it is tired, rests until it is not,
and eats every tick no matter what.

Three castes share one body:
- Drone: works, rests when depleted
- Warrior: same rhythm as the drone
- Queen: works while she can, and otherwise simply waits
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, List, Optional, Tuple

if TYPE_CHECKING:
    from .species import Species


class AntType(Enum):
    """Caste of an ant."""
    DRONE = "drone"
    WARRIOR = "warrior"
    QUEEN = "queen"


@dataclass
class AntState:
    """Snapshot of an ant at one moment."""
    energy: int
    age: int = 0


@dataclass
class AntConfig:
    """
    The unchanging nature of an ant.
    Set at birth, honored throughout life.
    """
    max_energy: int = 100          # Energy ceiling
    initial_energy: int = 100      # Energy at birth
    rest_gain: int = 20            # Benefit of rest
    work_cost: int = 10            # Cost of work
    rest_threshold: int = 30       # Below this, rest is needed
    food_consumption: int = 10     # Food eaten per tick


class Ant(ABC):
    """
    A single ant in a farm.

    Energy is always clamped to [0, max_energy]; rest and work are
    the only ways it changes.
    """

    ant_type: AntType

    def __init__(
        self,
        name: str,
        species: Species,
        config: Optional[AntConfig] = None
    ):
        self.name = name
        self.species = species
        self.config = config or AntConfig()

        # Born within [0, max_energy] whatever the config says
        initial = max(0, min(self.config.max_energy, self.config.initial_energy))
        self.state = AntState(energy=initial)
        self.food_consumption = self.config.food_consumption

        # History for observation (optional)
        self.history: List[AntState] = []
        self.record_history = False

    @property
    def energy(self) -> int:
        return self.state.energy

    # ==================== Core Loop ====================

    def act(self) -> None:
        """Perform this tick's behavior."""
        self.state.age += 1
        self._behave()

        if self.record_history:
            self._record()

    @abstractmethod
    def _behave(self) -> None:
        """Caste-specific policy."""

    def rest(self) -> None:
        self.state.energy = min(
            self.config.max_energy,
            self.state.energy + self.config.rest_gain
        )

    def work(self) -> None:
        self.state.energy = max(0, self.state.energy - self.config.work_cost)

    def consume_food(self, food_supply: int) -> Tuple[bool, int]:
        """
        Eat from a food supply.

        Returns (success, remaining). When the supply cannot cover
        this ant's consumption, nothing is eaten and the supply is
        returned unchanged.
        """
        if food_supply >= self.food_consumption:
            return True, food_supply - self.food_consumption
        return False, food_supply

    def needs_rest(self) -> bool:
        return self.state.energy < self.config.rest_threshold

    # ==================== Internal Mechanisms ====================

    def _rest_or_work(self) -> None:
        if self.needs_rest():
            self.rest()
        else:
            self.work()

    def _record(self) -> None:
        """Record current state for later analysis."""
        self.history.append(AntState(energy=self.state.energy, age=self.state.age))

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self.name}, "
            f"species={self.species.name}, "
            f"energy={self.state.energy}, "
            f"age={self.state.age})"
        )


class DroneAnt(Ant):
    ant_type = AntType.DRONE

    def _behave(self) -> None:
        self._rest_or_work()


class WarriorAnt(Ant):
    ant_type = AntType.WARRIOR

    def _behave(self) -> None:
        self._rest_or_work()


class QueenAnt(Ant):
    """
    The queen works while she has energy to spare.

    Unlike drones and warriors she never rests: once depleted her
    energy stays where it is.
    """

    ant_type = AntType.QUEEN

    def _behave(self) -> None:
        if not self.needs_rest():
            self.work()


_ANT_CLASSES = {
    AntType.DRONE: DroneAnt,
    AntType.WARRIOR: WarriorAnt,
    AntType.QUEEN: QueenAnt,
}


def create_ant(
    ant_type: AntType,
    name: str,
    species: Species,
    config: Optional[AntConfig] = None
) -> Ant:
    """Build an ant of the given caste."""
    return _ANT_CLASSES[ant_type](name, species, config)
