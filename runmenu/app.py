#===============================================================================
#  runmenu | app.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  The two user-facing operations: build the program index, and run the
#  picker -> launch -> remember cycle.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Sequence

from .config import Config
from .errors import SelectionError
from .frecency import rank_entries
from .fs_discovery import build_catalog, catalog_entries
from .launcher import Launcher, SystemLauncher
from .picker import Picker, Selection, SubprocessPicker, parse_selection, render_candidates
from .state import load_history, load_index, record_launch, save_history, save_index

logger = logging.getLogger(__name__)


class RunStatus(Enum):
    LAUNCHED = "launched"
    CANCELLED = "cancelled"
    UNMATCHED = "unmatched"


@dataclass(frozen=True)
class RunResult:
    status: RunStatus
    selection: Optional[Selection] = None
    message: str = ""


class RunMenu:
    """Wires discovery, persistence, ranking and the picker together."""

    def __init__(
        self,
        config: Config,
        picker: Optional[Picker] = None,
        launcher: Optional[Launcher] = None,
        clock: Callable[[], float] = time.time,
    ):
        self.config = config
        self.picker = picker or SubprocessPicker(config.picker_command)
        self.launcher = launcher or SystemLauncher()
        self.clock = clock

    def build_index(self) -> int:
        """Rebuild the index from scratch and return how many programs it holds."""
        entries = catalog_entries(build_catalog(self.config.roots))
        save_index(self.config.index_path, entries)
        logger.info("Indexed %d programs into %s", len(entries), self.config.index_path)
        return len(entries)

    def run(self, picker_args: Sequence[str] = ()) -> RunResult:
        # Start the picker first so its startup overlaps with loading the index.
        proc = self.picker.start(picker_args)

        try:
            entries = load_index(self.config.index_path)
            history = load_history(self.config.history_path)

            now = int(self.clock())
            ordered = rank_entries(entries, history, now)
        except BaseException:
            proc.close()
            raise

        result = proc.exchange(render_candidates(ordered))
        if result.cancelled:
            logger.info("Picker exited with status %d", result.returncode)
            return RunResult(RunStatus.CANCELLED)

        try:
            selection = parse_selection(result.output, ordered)
        except SelectionError as e:
            return RunResult(RunStatus.UNMATCHED, message=str(e))

        self.launcher.launch(selection.entry.path, selection.args)

        record_launch(history, selection.entry.key, now)
        save_history(self.config.history_path, history)
        return RunResult(RunStatus.LAUNCHED, selection=selection)
