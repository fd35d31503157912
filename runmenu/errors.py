#===============================================================================
#  runmenu | errors.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Exception types raised by the core and translated to exit codes by the CLI.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations


class RunMenuError(RuntimeError):
    """Base class for every error runmenu reports to the user."""


class ConfigError(RunMenuError):
    """A required environment value is missing."""


class CorruptStateError(RunMenuError):
    """A persisted index or history document could not be parsed."""


class IndexMissingError(RunMenuError):
    """No index has been built yet."""


class PickerError(RunMenuError):
    """The picker program could not be started or talked to."""


class LaunchError(RunMenuError):
    """The OS refused to start the chosen program."""


class SelectionError(RunMenuError):
    """The picker answered with something we can't act on."""

    def __init__(self, message: str, line: str):
        super().__init__(message)
        self.line = line


class UnmatchedSelectionError(SelectionError):
    pass


class ArgumentSplitError(SelectionError):
    pass
