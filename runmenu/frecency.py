#===============================================================================
#  runmenu | frecency.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Frequency + recency scoring used to order the picker's candidate list.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import math
from typing import Iterable, List, Mapping, Tuple

from .models import CatalogEntry, HistoryRecord


def frecency(record: HistoryRecord, now: float) -> float:
    """rank / (sqrt(seconds since last use) / 10 + 5). Future timestamps count as now."""
    elapsed = max(0.0, now - record.last_access)
    return record.rank / (math.sqrt(elapsed) / 10 + 5)


def rank_entries(
    entries: Iterable[CatalogEntry],
    history: Mapping[str, HistoryRecord],
    now: float,
) -> List[CatalogEntry]:
    """Return *entries* in display order.

    Order:
      1) programs with history, highest score first
      2) programs without history, by title
    Ties fall back to title, then canonical key.
    """
    def sort_key(e: CatalogEntry) -> Tuple[bool, float, str, str]:
        rec = history.get(e.key)
        if rec is None:
            return (True, 0.0, e.title, e.key)
        return (False, -frecency(rec, now), e.title, e.key)

    return sorted(entries, key=sort_key)
