import os
from pathlib import Path

import pytest

from runmenu.config import Config
from runmenu.constants import START_MENU_SUBDIR
from runmenu.errors import ConfigError
from runmenu.models import SourceKind


def test_paths_and_picker_from_environment(tmp_path):
    env = {
        "RUNMENU_DATA_DIR": str(tmp_path),
        "RUNMENU_PICKER": "fzf --prompt 'run> '",
        "PATH": os.pathsep.join(["/usr/bin", "", "/opt/bin"]),
    }

    config = Config.from_environment(env, platform="linux")

    assert config.index_path == tmp_path / "runmenu_index.json"
    assert config.history_path == tmp_path / "runmenu_history.json"
    assert config.picker_command == ["fzf", "--prompt", "run> "]
    assert [(r.path, r.source, r.recursive) for r in config.roots] == [
        (Path("/usr/bin"), SourceKind.PATH, False),
        (Path("/opt/bin"), SourceKind.PATH, False),
    ]


def test_default_picker_and_data_dir():
    config = Config.from_environment({"PATH": ""}, platform="linux")

    assert config.picker_command == ["wlines"]
    assert config.index_path.name == "runmenu_index.json"
    assert config.roots == []


def test_windows_start_menu_roots_come_first():
    env = {"AppData": "C:/Users/me/AppData/Roaming", "ProgramData": "C:/ProgramData", "PATH": "C:/bin"}

    roots = Config.from_environment(env, platform="win32").roots

    assert roots[0].path == Path("C:/Users/me/AppData/Roaming") / START_MENU_SUBDIR
    assert roots[1].path == Path("C:/ProgramData") / START_MENU_SUBDIR
    assert all(r.source is SourceKind.START_MENU and r.recursive for r in roots[:2])
    assert roots[2].source is SourceKind.PATH and not roots[2].recursive


def test_extra_roots_are_recursive():
    env = {"RUNMENU_EXTRA_ROOTS": "/home/me/apps", "PATH": "/usr/bin"}

    roots = Config.from_environment(env, platform="linux").roots

    assert (roots[0].path, roots[0].source, roots[0].recursive) == (Path("/home/me/apps"), SourceKind.START_MENU, True)


def test_missing_path_is_fatal():
    with pytest.raises(ConfigError):
        Config.from_environment({}, platform="linux")


def test_missing_appdata_on_windows_is_fatal():
    with pytest.raises(ConfigError):
        Config.from_environment({"ProgramData": "C:/ProgramData", "PATH": "C:/bin"}, platform="win32")
