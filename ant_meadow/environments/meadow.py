"""
environments/meadow.py

The meadow holds every species and every colony.

It rolls its species once, at birth, and then simply asks each
colony to take its turn until at most one is left standing.
"""

from __future__ import annotations
import logging
import time
from dataclasses import dataclass
from typing import List, Optional
import numpy as np

from ant_meadow.core.species import Species
from ant_meadow.environments.ant_farm import AntFarm, FarmConfig

logger = logging.getLogger(__name__)


@dataclass
class MeadowConfig:
    """Configuration for the meadow."""
    roll_number: int = 38          # Drives the species count
    base_species: int = 10         # Species count floor
    bonus_low: int = 5             # Smallest species bonus
    bonus_high: int = 9            # Largest species bonus
    seed: Optional[int] = None     # None = seeded from the clock
    farm_config: Optional[FarmConfig] = None

    @property
    def num_species(self) -> int:
        return (self.roll_number % 6) + self.base_species


class Meadow:
    """
    Registry of species and colonies, and the global clock.

    Construct one explicitly and hand it to whatever drives the loop.
    get_meadow() offers a lazily built shared instance for callers
    that want one.
    """

    def __init__(self, config: Optional[MeadowConfig] = None):
        self.config = config or MeadowConfig()

        seed = self.config.seed if self.config.seed is not None else time.time_ns()
        self.rng = np.random.default_rng(seed)

        self.species: List[Species] = self._initialize_species()
        self.farms: List[AntFarm] = []
        self.time = 0

        logger.debug(f"Meadow rolled {len(self.species)} species (seed={seed})")

    @classmethod
    def get_instance(cls) -> Meadow:
        """Alias for get_meadow()."""
        return get_meadow()

    def _initialize_species(self) -> List[Species]:
        return [
            Species.random(
                f"Species{i}",
                self.rng,
                low=self.config.bonus_low,
                high=self.config.bonus_high,
            )
            for i in range(self.config.num_species)
        ]

    def get_species(self) -> List[Species]:
        return self.species

    def create_ant_farm(self, name: str, species: Species) -> AntFarm:
        """Found a new colony and register it."""
        farm = AntFarm(name, species, self.config.farm_config)
        self.farms.append(farm)
        logger.debug(f"Founded {name} ({species.name})")
        return farm

    def active_colonies(self) -> List[AntFarm]:
        return [farm for farm in self.farms if farm.is_active_colony()]

    def simulation_complete(self) -> bool:
        """True once at most one colony is still active."""
        return len(self.active_colonies()) <= 1

    def tick(self) -> None:
        """Give every colony its turn, in founding order."""
        self.time += 1
        for farm in self.farms:
            farm.tick()

    def __repr__(self) -> str:
        return (
            f"Meadow(species={len(self.species)}, "
            f"farms={len(self.farms)}, "
            f"active={len(self.active_colonies())}, "
            f"time={self.time})"
        )


_instance: Optional[Meadow] = None


def get_meadow() -> Meadow:
    """
    The shared meadow, built on first call.

    Not guarded for concurrent first access; the simulation is
    single-threaded.
    """
    global _instance
    if _instance is None:
        _instance = Meadow()
    return _instance


def reset_meadow() -> None:
    """Forget the shared meadow so the next get_meadow() builds afresh."""
    global _instance
    _instance = None
