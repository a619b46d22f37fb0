"""
Environments the ants live in.

- ant_farm: A single colony and its larder
- meadow: Every species and every colony, ticking together
"""

from .ant_farm import AntFarm, FarmConfig
from .meadow import Meadow, MeadowConfig, get_meadow, reset_meadow

__all__ = [
    "AntFarm",
    "FarmConfig",
    "Meadow",
    "MeadowConfig",
    "get_meadow",
    "reset_meadow",
]
