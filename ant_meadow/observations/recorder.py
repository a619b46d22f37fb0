"""
observations/recorder.py

Watch the larders empty.

One frame per tick: how much food each colony has, whether it is
still standing, and how tired its ants are.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, TYPE_CHECKING
import numpy as np

if TYPE_CHECKING:
    from ant_meadow.environments.meadow import Meadow


@dataclass
class ColonyFrame:
    """State of one colony after one tick."""
    tick: int
    name: str
    food_supply: int
    active: bool
    energies: np.ndarray


class MeadowRecorder:
    """
    Records per-tick colony state for later analysis.

    Frames are kept per colony in founding order, so colonies sharing
    a name stay apart. Use record_frame as the on_tick hook of
    run_simulation.
    """

    def __init__(self, meadow: Meadow):
        self.meadow = meadow
        self.frames: List[List[ColonyFrame]] = [[] for _ in meadow.farms]

    def record_frame(self, tick: int, meadow: Optional[Meadow] = None) -> None:
        """Record current state of every colony."""
        meadow = meadow or self.meadow
        for index, farm in enumerate(meadow.farms):
            if index == len(self.frames):
                self.frames.append([])
            self.frames[index].append(
                ColonyFrame(
                    tick=tick,
                    name=farm.name,
                    food_supply=farm.food_supply,
                    active=farm.is_active_colony(),
                    energies=farm.get_energies(),
                )
            )

    def _colony_frames(self, index: int) -> List[ColonyFrame]:
        if 0 <= index < len(self.frames):
            return self.frames[index]
        return []

    def food_series(self, index: int) -> np.ndarray:
        """Food supply per tick for the colony at this founding position."""
        return np.array([f.food_supply for f in self._colony_frames(index)], dtype=np.int64)

    def last_active_tick(self, index: int) -> int:
        """Last recorded tick on which the colony was still active (0 if never)."""
        ticks = [f.tick for f in self._colony_frames(index) if f.active]
        return max(ticks) if ticks else 0

    def summary(self) -> List[Dict[str, Any]]:
        """
        Per-colony summary statistics, in founding order.

        - name: colony name
        - ticks_active: last tick the colony was still standing
        - food_left: food supply in the latest frame
        - mean_energy: mean ant energy over all frames
        - min_energy: lowest energy any ant reached
        """
        result = []
        for index, frames in enumerate(self.frames):
            if not frames:
                continue
            energies = np.concatenate([f.energies for f in frames])
            result.append({
                "name": frames[-1].name,
                "ticks_active": self.last_active_tick(index),
                "food_left": frames[-1].food_supply,
                "mean_energy": float(energies.mean()) if energies.size else 0.0,
                "min_energy": int(energies.min()) if energies.size else 0,
            })
        return result
