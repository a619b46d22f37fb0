"""
core/species.py

What kind of ant this is.

A species is a bundle of inherited bonuses. It never changes
once rolled, and every ant and farm of that kind points back to it.
"""

from __future__ import annotations
from dataclasses import dataclass
import numpy as np


@dataclass(frozen=True)
class Species:
    """Named, immutable stat bonuses."""
    name: str
    strength_bonus: int
    efficiency_bonus: int
    harvest_bonus: int

    @classmethod
    def random(
        cls,
        name: str,
        rng: np.random.Generator,
        low: int = 5,
        high: int = 9
    ) -> "Species":
        """
        Roll a species with each bonus drawn uniformly from [low, high].

        The three bonuses are independent draws.
        """
        strength, efficiency, harvest = rng.integers(low, high + 1, size=3)
        return cls(
            name=name,
            strength_bonus=int(strength),
            efficiency_bonus=int(efficiency),
            harvest_bonus=int(harvest),
        )

    def __repr__(self) -> str:
        return (
            f"Species({self.name}, "
            f"str={self.strength_bonus}, "
            f"eff={self.efficiency_bonus}, "
            f"harv={self.harvest_bonus})"
        )
