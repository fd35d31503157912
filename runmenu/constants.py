#===============================================================================
#  runmenu | constants.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Central place for file naming conventions, environment variable names and
#  the launchable extension allow-list.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

APP_NAME = "runmenu"
INDEX_FILE_NAME = "runmenu_index.json"
HISTORY_FILE_NAME = "runmenu_history.json"

DEFAULT_PICKER = "wlines"

# Relative to %AppData% / %ProgramData%
START_MENU_SUBDIR = "Microsoft/Windows/Start Menu/Programs"

# --- Environment ---
ENV_DATA_DIR = "RUNMENU_DATA_DIR"
ENV_PICKER = "RUNMENU_PICKER"
ENV_EXTRA_ROOTS = "RUNMENU_EXTRA_ROOTS"
ENV_DEBUG = "RUNMENU_DEBUG"

LAUNCHABLE_EXTENSIONS = frozenset({".exe", ".lnk", ".bat", ".cmd", ".com"})
