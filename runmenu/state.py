#===============================================================================
#  runmenu | state.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Load/save of the persisted program index and launch history documents.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, Iterable, List

from .errors import CorruptStateError, IndexMissingError
from .models import CatalogEntry, HistoryRecord, SourceKind

logger = logging.getLogger(__name__)

History = Dict[str, HistoryRecord]


def _atomic_write(path: Path, data: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with tempfile.NamedTemporaryFile("w", delete=False, dir=path.parent, encoding="utf-8") as tmp:
        tmp_name = tmp.name
        try:
            tmp.write(data)
            tmp.flush()
            os.fsync(tmp.fileno())
        except BaseException:
            tmp.close()
            os.unlink(tmp_name)
            raise
    try:
        os.replace(tmp_name, path)
    except BaseException:
        os.unlink(tmp_name)
        raise


def _read_json(path: Path) -> Any:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise CorruptStateError(f"Can't read {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise CorruptStateError(f"{path} is not valid UTF-8: {e}") from e
    try:
        return json.loads(text)
    except ValueError as e:
        raise CorruptStateError(f"{path} is not valid JSON: {e}") from e


# ----------------------------
# Index
# ----------------------------
def save_index(index_path: Path, entries: Iterable[CatalogEntry]) -> None:
    """Replace the index document with *entries*."""
    data = [
        {"title": e.title, "source": e.source.tag, "abs_path": e.path}
        for e in entries
    ]
    _atomic_write(index_path, json.dumps(data, indent=2, ensure_ascii=False))


def load_index(index_path: Path) -> List[CatalogEntry]:
    if not index_path.exists():
        raise IndexMissingError(f"No index at {index_path}. Run 'runmenu index' first.")

    data = _read_json(index_path)
    if not isinstance(data, list):
        raise CorruptStateError(f"{index_path}: expected a list of programs")

    entries: List[CatalogEntry] = []
    for item in data:
        try:
            title, source, path = item["title"], item["source"], item["abs_path"]
        except (TypeError, KeyError) as e:
            raise CorruptStateError(f"{index_path}: malformed program record {item!r}") from e
        if not isinstance(title, str) or not isinstance(path, str) or not isinstance(source, str):
            raise CorruptStateError(f"{index_path}: malformed program record {item!r}")
        entries.append(CatalogEntry(title=title, source=SourceKind.from_tag(source), path=path))

    logger.info("Loaded %d indexed programs", len(entries))
    return entries


# ----------------------------
# History
# ----------------------------
def _is_count(v: Any) -> bool:
    return isinstance(v, int) and not isinstance(v, bool) and v >= 0


def load_history(history_path: Path) -> History:
    """Load launch history; a missing document is an empty history."""
    if not history_path.exists():
        return {}

    data = _read_json(history_path)
    if not isinstance(data, dict):
        raise CorruptStateError(f"{history_path}: expected an object keyed by path")

    history: History = {}
    for key, rec in data.items():
        if not isinstance(rec, dict) or not _is_count(rec.get("rank")) or not _is_count(rec.get("last_access")):
            raise CorruptStateError(f"{history_path}: malformed history record for {key!r}")
        history[key] = HistoryRecord(rank=rec["rank"], last_access=rec["last_access"])

    logger.info("Loaded history (%d records)", len(history))
    return history


def record_launch(history: History, key: str, now: int) -> HistoryRecord:
    """Count one launch of *key* at *now*; first launch starts at rank 1."""
    rec = history.get(key)
    if rec is None:
        rec = history[key] = HistoryRecord(rank=1, last_access=now)
    else:
        rec.touch(now)
    return rec


def save_history(history_path: Path, history: History) -> None:
    data = {
        k: {"rank": r.rank, "last_access": r.last_access}
        for k, r in history.items()
    }
    _atomic_write(history_path, json.dumps(data, indent=2, ensure_ascii=False))
