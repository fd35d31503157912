#===============================================================================
#  runmenu | cli.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Command line surface:  runmenu <index|run [args...]>
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import os
import sys
from typing import List, Optional

from dotenv import load_dotenv

from .app import RunMenu, RunStatus
from .config import Config
from .constants import ENV_DEBUG
from .errors import RunMenuError

USAGE = "runmenu <index|run [args...]>"


def usage() -> int:
    print(USAGE, file=sys.stderr)
    return 1


def setup_logging() -> None:
    logging.basicConfig(
        level=logging.DEBUG if os.getenv(ENV_DEBUG) else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def cmd_index(app: RunMenu) -> int:
    count = app.build_index()
    print(f"Indexed {count} programs")
    return 0


def cmd_run(app: RunMenu, picker_args: List[str]) -> int:
    result = app.run(picker_args)
    if result.status is RunStatus.CANCELLED:
        print("Exited")
        return 0
    if result.status is RunStatus.UNMATCHED:
        print(result.message, file=sys.stderr)
        return 1
    print(f'Starting "{result.selection.entry.path}"')
    return 0


def main(argv: Optional[List[str]] = None, app: Optional[RunMenu] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if not args or args[0] not in ("index", "run"):
        return usage()

    load_dotenv()
    setup_logging()

    try:
        if app is None:
            app = RunMenu(Config.from_environment())
        if args[0] == "index":
            return cmd_index(app)
        return cmd_run(app, args[1:])
    except RunMenuError as e:
        print(f"runmenu: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
