#===============================================================================
#  runmenu | models.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Shared data models: catalog entries, their provenance and usage history.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .errors import CorruptStateError


class SourceKind(Enum):
    """Where an entry was discovered. Value is (persisted tag, display code)."""

    START_MENU = ("StartMenu", "S")
    PATH = ("Path", "P")

    @property
    def tag(self) -> str:
        return self.value[0]

    @property
    def code(self) -> str:
        return self.value[1]

    @classmethod
    def from_tag(cls, tag: str) -> "SourceKind":
        for kind in cls:
            if kind.tag == tag:
                return kind
        raise CorruptStateError(f"Unknown source kind: {tag!r}")


@dataclass(frozen=True)
class CatalogEntry:
    """A launchable program found during indexing."""
    title: str            # path relative to its discovery root (not unique)
    source: SourceKind
    path: str             # absolute path as discovered

    @property
    def key(self) -> str:
        """Canonical identity: the case-folded absolute path."""
        return canonical_key(self.path)

    @property
    def label(self) -> str:
        return f"{self.source.code}] {self.title}"


@dataclass
class HistoryRecord:
    rank: int
    last_access: int      # unix seconds

    def touch(self, now: int) -> None:
        self.rank += 1
        self.last_access = now


def canonical_key(path: str) -> str:
    return path.casefold()
