"""Tests for the lifegrid command-line entry point."""

import pytest

from lifegrid.__main__ import main


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep LIFEGRID_* variables from the outer shell out of the tests."""
    for name in ('INTERVAL', 'GENERATIONS', 'SEED', 'ROWS', 'COLS', 'DENSITY', 'LOG_LEVEL'):
        monkeypatch.delenv(f'LIFEGRID_{name}', raising=False)


class TestMain:
    """Test running the loop from the command line."""

    def test_runs_fixed_generations(self, capsys):
        """Each generation is rendered once before advancing."""
        code = main(["--seed", "blinker", "--rows", "5", "--cols", "5",
                     "--generations", "2", "--interval", "0"])

        out = capsys.readouterr().out
        assert code == 0
        assert out.count("[") == 10  # 2 renders x 5 rows
        assert "[ , @, @, @,  ]" in out
        assert "[ ,  , @,  ,  ]" in out

    def test_sample_seed_default(self, capsys):
        """The sample seed is used when no seed is given."""
        code = main(["--generations", "1", "--interval", "0", "--alive-char", "#"])

        out = capsys.readouterr().out
        assert code == 0
        assert out == ("[ ,  ,  ,  ,  ]\n"
                       "[ ,  , #,  ,  ]\n"
                       "[ , #,  , #,  ]\n"
                       "[ ,  , #,  ,  ]\n"
                       "[ ,  ,  ,  ,  ]\n\n")

    def test_random_seed(self, capsys):
        """Random boards use the requested size."""
        code = main(["--seed", "random", "--rows", "3", "--cols", "4",
                     "--generations", "1", "--interval", "0"])

        lines = [line for line in capsys.readouterr().out.splitlines() if line]
        assert code == 0
        assert len(lines) == 3
        assert all(line.count(",") == 3 for line in lines)

    def test_environment_defaults(self, monkeypatch, capsys):
        """Environment settings apply when flags are absent."""
        monkeypatch.setenv("LIFEGRID_GENERATIONS", "3")
        monkeypatch.setenv("LIFEGRID_INTERVAL", "0")

        assert main([]) == 0
        assert capsys.readouterr().out.count("\n\n") == 3

    @pytest.mark.parametrize("argv", [
        ["--interval", "-1"],
        ["--interval", "nan"],
        ["--interval", "inf"],
        ["--generations", "-5"],
        ["--seed", "glider", "--rows", "2"],
        ["--seed", "random", "--density", "2"],
    ])
    def test_configuration_errors_exit_2(self, argv):
        """Invalid settings end with status 2 before any output."""
        assert main(argv) == 2

    def test_unknown_seed_rejected_by_parser(self):
        """argparse rejects seeds outside the library."""
        with pytest.raises(SystemExit):
            main(["--seed", "spaceship"])

    def test_interrupt_exits_cleanly(self, monkeypatch):
        """Ctrl-C during the loop stops it with status 0."""
        def interrupt(grid, **kwargs):
            raise KeyboardInterrupt

        monkeypatch.setattr("lifegrid.__main__.print_grid", interrupt)

        assert main(["--seed", "blinker", "--rows", "5", "--cols", "5", "--interval", "0"]) == 0
