#===============================================================================
#  runmenu | picker.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Line protocol spoken with the external picker (wlines, dmenu, fzf...):
#  candidates go out as "<code>] <title>: " lines, the chosen line comes back
#  optionally followed by shell-quoted arguments.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import shlex
import subprocess
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Protocol, Sequence

from .errors import ArgumentSplitError, PickerError, UnmatchedSelectionError
from .models import CatalogEntry

logger = logging.getLogger(__name__)

DELIMITER = ":"


@dataclass(frozen=True)
class Selection:
    entry: CatalogEntry
    args: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class PickerResult:
    returncode: int
    output: str

    @property
    def cancelled(self) -> bool:
        return self.returncode != 0


def render_line(entry: CatalogEntry) -> str:
    return f"{entry.label}{DELIMITER} "


def render_candidates(entries: Iterable[CatalogEntry]) -> str:
    return "".join(render_line(e) + "\n" for e in entries)


def parse_selection(output: str, entries: Sequence[CatalogEntry]) -> Selection:
    """Map the picker's answer back to an entry plus trailing arguments."""
    line = output.strip()

    best: Optional[CatalogEntry] = None
    for e in entries:
        if line.startswith(e.label + DELIMITER):
            # "S] a: b" must beat "S] a" when both prefix the line
            if best is None or len(e.label) > len(best.label):
                best = e
    if best is None:
        raise UnmatchedSelectionError(f"Unknown choice '{line}'", line)

    tail = line[len(best.label) + len(DELIMITER):]
    try:
        args = shlex.split(tail)
    except ValueError as e:
        raise ArgumentSplitError(f"Can't parse arguments '{tail.strip()}': {e}", line) from e
    return Selection(entry=best, args=args)


# ----------------------------
# Picker process
# ----------------------------
class PickerProcess(Protocol):
    def exchange(self, candidates: str) -> PickerResult:
        ...

    def close(self) -> None:
        ...


class Picker(Protocol):
    def start(self, args: Sequence[str]) -> PickerProcess:
        ...


class _RunningPicker:
    def __init__(self, proc: subprocess.Popen):
        self._proc = proc

    def exchange(self, candidates: str) -> PickerResult:
        # Writes everything, closes stdin, then blocks until the picker exits.
        try:
            out, _ = self._proc.communicate(candidates)
        except OSError as e:
            raise PickerError(f"Couldn't communicate with picker: {e}") from e
        return PickerResult(returncode=self._proc.returncode, output=out or "")

    def close(self) -> None:
        """Stop a picker that will never receive its candidates."""
        if self._proc.poll() is None:
            self._proc.kill()
        # reaps the child and closes its pipes
        self._proc.communicate()


class SubprocessPicker:
    """Starts the picker as a child process with piped stdin/stdout."""

    def __init__(self, command: Sequence[str]):
        self.command = list(command)

    def start(self, args: Sequence[str]) -> PickerProcess:
        cmd = self.command + list(args)
        logger.debug("Starting picker: %s", cmd)
        try:
            proc = subprocess.Popen(
                cmd,
                stdin=subprocess.PIPE,
                stdout=subprocess.PIPE,
                text=True,
                encoding="utf-8",
                errors="replace",
            )
        except OSError as e:
            raise PickerError(f"Couldn't start picker {self.command[0]!r}: {e}") from e
        return _RunningPicker(proc)
