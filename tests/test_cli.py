import pytest

from runmenu.app import RunMenu
from runmenu.cli import main
from runmenu.errors import ConfigError
from runmenu.state import save_index

from conftest import FakeLauncher, FakePicker, make_entry


@pytest.mark.parametrize("argv", [[], ["launch"], ["--help"]])
def test_usage_on_bad_subcommand(argv, capsys):
    assert main(argv) == 1
    assert "runmenu <index|run [args...]>" in capsys.readouterr().err


def test_index_reports_count(config, capsys):
    app = RunMenu(config, picker=FakePicker(), launcher=FakeLauncher())

    assert main(["index"], app=app) == 0
    assert capsys.readouterr().out.strip() == "Indexed 0 programs"


def test_run_passes_args_through(config, capsys):
    save_index(config.index_path, [make_entry("calc", path="/bin/calc")])
    picker = FakePicker(output="P] calc: ")
    app = RunMenu(config, picker=picker, launcher=FakeLauncher())

    assert main(["run", "-p", "Run", "--fuzzy"], app=app) == 0
    assert picker.started_with == ["-p", "Run", "--fuzzy"]
    assert 'Starting "/bin/calc"' in capsys.readouterr().out


def test_run_cancelled(config, capsys):
    save_index(config.index_path, [make_entry("calc")])
    app = RunMenu(config, picker=FakePicker(returncode=1), launcher=FakeLauncher())

    assert main(["run"], app=app) == 0
    assert "Exited" in capsys.readouterr().out


def test_run_unknown_choice(config, capsys):
    save_index(config.index_path, [make_entry("calc")])
    app = RunMenu(config, picker=FakePicker(output="nothing"), launcher=FakeLauncher())

    assert main(["run"], app=app) == 1
    assert "Unknown choice 'nothing'" in capsys.readouterr().err


def test_fatal_errors_exit_nonzero(config, capsys):
    app = RunMenu(config, picker=FakePicker(), launcher=FakeLauncher())

    assert main(["run"], app=app) == 1
    assert "runmenu index" in capsys.readouterr().err


def test_config_error_from_environment(monkeypatch, capsys):
    def boom(cls):
        raise ConfigError("Environment variable PATH is not set")

    monkeypatch.setattr("runmenu.cli.Config.from_environment", classmethod(boom))

    assert main(["index"]) == 1
    assert "PATH is not set" in capsys.readouterr().err
