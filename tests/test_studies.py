"""
Tests for the two-colony study entry point.
"""

from ant_meadow.core.ant import DroneAnt, QueenAnt, WarriorAnt
from ant_meadow.environments.meadow import MeadowConfig
from ant_meadow.studies.two_colonies.observe import build_meadow, main, run_study


class TestBuildMeadow:
    """Tests for the scenario setup."""

    def test_two_crowned_colonies(self):
        meadow = build_meadow(MeadowConfig(seed=3))
        farm1, farm2 = meadow.farms

        assert farm1.name == "Colony1"
        assert farm2.name == "Colony2"
        assert farm1.species is meadow.species[0]
        assert farm2.species is meadow.species[1]
        assert isinstance(farm1.queen, QueenAnt)
        assert isinstance(farm2.queen, QueenAnt)

    def test_queen_acts_first(self):
        meadow = build_meadow(MeadowConfig(seed=3))
        farm1, farm2 = meadow.farms

        assert farm1.ants[0] is farm1.queen
        assert isinstance(farm1.ants[1], DroneAnt)
        assert farm2.ants[0] is farm2.queen
        assert isinstance(farm2.ants[1], WarriorAnt)


class TestRunStudy:
    """Tests for the study run and console output."""

    def test_console_output(self, capsys):
        ticks = run_study(seed=3)
        lines = capsys.readouterr().out.splitlines()

        assert ticks == 51
        assert lines[:2] == ["Tick 1 completed.", "Tick 2 completed."]
        assert lines[50] == "Tick 51 completed."
        assert lines[-1] == "Simulation ended after 51 ticks."
        assert len(lines) == 52

    def test_tick_cap_respected(self, capsys):
        ticks = run_study(max_ticks=5)
        assert ticks == 5
        assert capsys.readouterr().out.splitlines()[-1] == "Simulation ended after 5 ticks."

    def test_observe_appends_summary(self, capsys):
        run_study(seed=3, observe=True)
        out = capsys.readouterr().out
        assert "Observations" in out
        assert "Colony1: active through tick 50, food left 0" in out
        assert "Colony2: active through tick 50, food left 0" in out

    def test_main_without_arguments(self, capsys):
        main([])
        lines = capsys.readouterr().out.splitlines()
        assert lines[-1] == "Simulation ended after 51 ticks."
