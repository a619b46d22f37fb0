"""
Study: Two Colonies

Run: ant-meadow
 or: python -m ant_meadow.studies.two_colonies.observe

Colony1 (a queen and a drone) and Colony2 (a queen and a warrior)
share a meadow. Watch until at most one of them is left.
"""

import argparse
import logging
from typing import List, Optional

from ant_meadow.core.ant import DroneAnt, QueenAnt, WarriorAnt
from ant_meadow.environments.meadow import Meadow, MeadowConfig
from ant_meadow.observations.recorder import MeadowRecorder
from ant_meadow.simulation import SimulationConfig, run_simulation

logger = logging.getLogger(__name__)


def build_meadow(config: Optional[MeadowConfig] = None) -> Meadow:
    """
    Set up the two-colony scenario.

    Queens are crowned before workers join, so each queen acts
    first on every tick.
    """
    meadow = Meadow(config)
    species = meadow.get_species()

    farm1 = meadow.create_ant_farm("Colony1", species[0])
    farm2 = meadow.create_ant_farm("Colony2", species[1])

    farm1.set_queen(QueenAnt("Queen1", species[0]))
    farm2.set_queen(QueenAnt("Queen2", species[1]))

    farm1.add_ant(DroneAnt("Drone1", species[0]))
    farm2.add_ant(WarriorAnt("Warrior1", species[1]))

    return meadow


def run_study(
    max_ticks: int = 1000,
    seed: Optional[int] = None,
    observe: bool = False
) -> int:
    """
    Run the two-colony study.

    Prints one line per tick and a final tick count. With observe,
    follows up with a per-colony summary.

    Returns the number of ticks executed.
    """
    meadow = build_meadow(MeadowConfig(seed=seed))
    logger.debug(f"Starting study: {meadow}")

    recorder = MeadowRecorder(meadow) if observe else None
    ticks = run_simulation(
        meadow,
        SimulationConfig(max_ticks=max_ticks),
        on_tick=recorder.record_frame if recorder else None,
    )

    if recorder is not None:
        print("\n" + "=" * 50)
        print("Observations")
        print("=" * 50)
        for stats in recorder.summary():
            print(f"{stats['name']}: active through tick {stats['ticks_active']}, "
                  f"food left {stats['food_left']}, "
                  f"mean energy {stats['mean_energy']:.1f}, "
                  f"min energy {stats['min_energy']}")

    return ticks


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Two Colonies Study")
    parser.add_argument("--max-ticks", type=int, default=1000, help="Tick cap")
    parser.add_argument("--seed", type=int, default=None, help="Species roll seed")
    parser.add_argument("--observe", action="store_true", help="Print colony summary")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    run_study(
        max_ticks=args.max_ticks,
        seed=args.seed,
        observe=args.observe
    )


if __name__ == "__main__":
    main()
