"""
ant_meadow/simulation.py

The outer loop.

Tick the meadow until one colony stands alone, or until
patience runs out.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from ant_meadow.environments.meadow import Meadow

logger = logging.getLogger(__name__)


@dataclass
class SimulationConfig:
    """Configuration for a simulation run."""
    max_ticks: int = 1000  # Hard cap on ticks


def run_simulation(
    meadow: Meadow,
    config: Optional[SimulationConfig] = None,
    report: Callable[[str], None] = print,
    on_tick: Optional[Callable[[int, Meadow], None]] = None,
) -> int:
    """
    Run the meadow to completion.

    Args:
        meadow: The meadow to drive
        config: Run limits
        report: Receives one status line per tick and a final summary
        on_tick: Called after each tick with (tick_count, meadow)

    Returns:
        Number of ticks executed
    """
    config = config or SimulationConfig()
    tick_count = 0

    while not meadow.simulation_complete() and tick_count < config.max_ticks:
        meadow.tick()
        tick_count += 1
        report(f"Tick {tick_count} completed.")

        if on_tick is not None:
            on_tick(tick_count, meadow)

    report(f"Simulation ended after {tick_count} ticks.")

    if tick_count >= config.max_ticks and not meadow.simulation_complete():
        logger.info(f"Tick cap reached with {len(meadow.active_colonies())} colonies active")
    else:
        logger.info(f"Simulation complete after {tick_count} ticks")

    return tick_count
