"""Tests for the command-line entry point and scenario presets."""

import pytest

from barnes_hut import SCENARIOS, get_scenario
from barnes_hut.cli import build_parser, main


class TestScenarios:
    """Tests for scenario presets."""

    def test_known_scenarios(self):
        """All presets are registered under their own names."""
        assert set(SCENARIOS) == {"jupiter", "galaxy", "collision"}
        for name, scenario in SCENARIOS.items():
            assert scenario.name == name

    def test_unknown_scenario(self):
        """Unknown names raise KeyError listing the choices."""
        with pytest.raises(KeyError, match="collision, galaxy, jupiter"):
            get_scenario("andromeda")

    def test_jupiter_universe(self):
        """The Jupiter preset loads the bundled moons."""
        universe = get_scenario("jupiter").build_universe()
        assert len(universe.bodies) == 5
        assert universe.bodies[0].name == "Jupiter"

    def test_galaxy_universe(self):
        """The galaxy preset holds one galaxy."""
        universe = get_scenario("galaxy").build_universe(seed=1)
        assert len(universe.bodies) == 501
        assert universe.width == 1e23

    def test_collision_universe(self):
        """The collision preset holds two galaxies moving toward each other."""
        universe = get_scenario("collision").build_universe(seed=1)
        assert len(universe.bodies) == 1002

        # Black holes start at rest and pick up the push
        g0_hole = universe.bodies[500]
        g1_hole = universe.bodies[1001]
        assert g0_hole.velocity.x < 0 < g0_hole.velocity.y
        assert g1_hole.velocity.y < 0 < g1_hole.velocity.x

    def test_collision_seed_reproducible(self):
        """The same seed builds the same collision."""
        scenario = get_scenario("collision")
        assert scenario.build_universe(seed=3) == scenario.build_universe(seed=3)


class TestMain:
    """Tests for main()."""

    def test_parser_rejects_unknown_scenario(self):
        """argparse limits the scenario to known presets."""
        with pytest.raises(SystemExit):
            build_parser().parse_args(["andromeda"])

    def test_jupiter_run(self, capsys):
        """A short Jupiter run reports every generation."""
        code = main(["jupiter", "--generations", "3", "--frequency", "1"])
        out = capsys.readouterr().out

        assert code == 0
        assert "Loaded 5 bodies" in out
        assert "generation 3/3" in out
        assert "4 snapshots, 4 frames" in out

    def test_quiet_run(self, capsys):
        """--quiet skips per-generation progress."""
        code = main(["jupiter", "--generations", "4", "--frequency", "2", "--quiet"])
        out = capsys.readouterr().out

        assert code == 0
        assert "generation 2/4" not in out
        assert "5 snapshots, 3 frames" in out

    def test_galaxy_run(self, capsys):
        """A seeded galaxy run completes."""
        code = main(["galaxy", "--generations", "1", "--frequency", "1", "--seed", "0"])
        out = capsys.readouterr().out

        assert code == 0
        assert "Loaded 501 bodies" in out

    def test_missing_data_file(self, capsys, tmp_path):
        """A missing data file is reported as an error."""
        code = main(["jupiter", "--data", str(tmp_path / "missing.txt")])
        assert code == 1
        assert "error:" in capsys.readouterr().err

    def test_invalid_frequency(self, capsys):
        """A zero frequency is reported as an error."""
        code = main(["jupiter", "--generations", "1", "--frequency", "0"])
        assert code == 1
        assert "frequency must be >= 1" in capsys.readouterr().err

    def test_invalid_time_step(self, capsys):
        """A non-positive time step is reported as an error."""
        code = main(["jupiter", "--generations", "1", "--time-step", "-1"])
        assert code == 1
        assert "time_step must be positive" in capsys.readouterr().err
