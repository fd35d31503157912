from pathlib import Path

import pytest

from runmenu.config import Config
from runmenu.models import CatalogEntry, SourceKind
from runmenu.picker import PickerResult


class FakeProcess:
    def __init__(self, result):
        self.result = result
        self.sent = None
        self.closed = False

    def exchange(self, candidates):
        self.sent = candidates
        return self.result

    def close(self):
        self.closed = True


class FakePicker:
    def __init__(self, returncode=0, output=""):
        self.process = FakeProcess(PickerResult(returncode=returncode, output=output))
        self.started_with = None

    def start(self, args):
        self.started_with = list(args)
        return self.process


class FakeLauncher:
    def __init__(self, error=None):
        self.launched = []
        self.error = error

    def launch(self, path, args):
        if self.error is not None:
            raise self.error
        self.launched.append((path, list(args)))


@pytest.fixture
def config(tmp_path: Path) -> Config:
    return Config.for_data_dir(tmp_path / "data")


def make_entry(title, source=SourceKind.PATH, path=None):
    return CatalogEntry(title=title, source=source, path=path or f"/bin/{title}")
