#===============================================================================
#  runmenu | config.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Resolves file locations, the picker command and the discovery roots from
#  the environment. Everything downstream receives an explicit Config.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import os
import shlex
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Mapping, Optional

from platformdirs import user_data_dir

from .constants import (
    APP_NAME,
    DEFAULT_PICKER,
    ENV_DATA_DIR,
    ENV_EXTRA_ROOTS,
    ENV_PICKER,
    HISTORY_FILE_NAME,
    INDEX_FILE_NAME,
    START_MENU_SUBDIR,
)
from .errors import ConfigError
from .models import SourceKind


@dataclass(frozen=True)
class DiscoveryRoot:
    path: Path
    source: SourceKind
    recursive: bool


@dataclass(frozen=True)
class Config:
    index_path: Path
    history_path: Path
    picker_command: List[str] = field(default_factory=lambda: [DEFAULT_PICKER])
    roots: List[DiscoveryRoot] = field(default_factory=list)

    @classmethod
    def for_data_dir(cls, data_dir: Path, **kwargs) -> "Config":
        return cls(
            index_path=data_dir / INDEX_FILE_NAME,
            history_path=data_dir / HISTORY_FILE_NAME,
            **kwargs,
        )

    @classmethod
    def from_environment(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        platform: Optional[str] = None,
    ) -> "Config":
        """Build the configuration once from environment variables.

        Resolution:
          - data dir: $RUNMENU_DATA_DIR, else the platform user data dir
          - picker: $RUNMENU_PICKER (shell-split), else "wlines"
          - roots: start menu folders (Windows, recursive), $RUNMENU_EXTRA_ROOTS
            (recursive), then every $PATH directory (non-recursive)
        """
        env = os.environ if environ is None else environ
        platform = sys.platform if platform is None else platform

        data_dir = env.get(ENV_DATA_DIR) or user_data_dir(APP_NAME, appauthor=False)

        picker = shlex.split(env.get(ENV_PICKER, "")) or [DEFAULT_PICKER]

        roots = start_menu_roots(env, platform)
        roots += extra_roots(env)
        roots += search_path_roots(env)

        return cls.for_data_dir(Path(data_dir), picker_command=picker, roots=roots)


def _require(env: Mapping[str, str], name: str) -> str:
    value = env.get(name)
    if value is None:
        raise ConfigError(f"Environment variable {name} is not set")
    return value


def start_menu_roots(env: Mapping[str, str], platform: str) -> List[DiscoveryRoot]:
    if not platform.startswith("win"):
        return []
    return [
        DiscoveryRoot(Path(_require(env, var)) / START_MENU_SUBDIR, SourceKind.START_MENU, True)
        for var in ("AppData", "ProgramData")
    ]


def extra_roots(env: Mapping[str, str]) -> List[DiscoveryRoot]:
    raw = env.get(ENV_EXTRA_ROOTS, "")
    return [
        DiscoveryRoot(Path(p), SourceKind.START_MENU, True)
        for p in raw.split(os.pathsep) if p
    ]


def search_path_roots(env: Mapping[str, str]) -> List[DiscoveryRoot]:
    raw = _require(env, "PATH")
    return [
        DiscoveryRoot(Path(p), SourceKind.PATH, False)
        for p in raw.split(os.pathsep) if p
    ]
