#===============================================================================
#  runmenu | launcher.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Starts the chosen program detached from runmenu (fire-and-forget).
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import subprocess
import sys
from pathlib import Path
from typing import List, Optional, Protocol, Sequence

from .errors import LaunchError

logger = logging.getLogger(__name__)


class Launcher(Protocol):
    def launch(self, path: str, args: Sequence[str]) -> None:
        ...


def launch_command(path: str, args: Sequence[str], platform: Optional[str] = None) -> List[str]:
    """Command line used to start *path*.

    On Windows everything goes through `start` so shortcuts (.lnk) and
    scripts (.bat/.cmd) open the same way Explorer would open them.
    """
    platform = sys.platform if platform is None else platform
    if platform.startswith("win"):
        return ["cmd", "/c", "start", "", path, *args]
    return [path, *args]


class SystemLauncher:
    def launch(self, path: str, args: Sequence[str]) -> None:
        cmd = launch_command(path, args)
        logger.debug("Launching: %s", cmd)
        try:
            if sys.platform.startswith("win"):
                subprocess.Popen(cmd, shell=False)
            else:
                subprocess.Popen(cmd, cwd=str(Path(path).parent), start_new_session=True)
        except OSError as e:
            raise LaunchError(f"Couldn't start {path}: {e}") from e
