#===============================================================================
#  runmenu | fs_discovery.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Filesystem discovery of launchable programs (shortcuts, executables and
#  scripts) under the configured roots.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, List

from .config import DiscoveryRoot
from .constants import LAUNCHABLE_EXTENSIONS
from .models import CatalogEntry, SourceKind

logger = logging.getLogger(__name__)

Catalog = Dict[str, CatalogEntry]


def is_launchable(p: Path) -> bool:
    return p.suffix.lower() in LAUNCHABLE_EXTENSIONS


def scan_directory(
    catalog: Catalog,
    directory: Path,
    root: Path,
    source: SourceKind,
    recursive: bool,
) -> None:
    """Add every launchable file under *directory* to *catalog*.

    Rules:
    - Entries are visited in case-folded name order so the walk is repeatable
    - Files must carry a launchable extension (case-insensitive)
    - Subfolders are only entered when *recursive* is set
    - A folder that can't be listed is skipped, never fatal
    """
    try:
        items = sorted(directory.iterdir(), key=lambda p: (p.name.casefold(), p.name))
    except OSError as e:
        logger.debug("Skipping %s: %s", directory, e)
        return

    for item in items:
        try:
            if item.is_file():
                if is_launchable(item):
                    entry = CatalogEntry(
                        title=str(item.relative_to(root)),
                        source=source,
                        path=str(item.absolute()),
                    )
                    # later discoveries overwrite earlier ones
                    catalog[entry.key] = entry
            elif recursive and item.is_dir():
                scan_directory(catalog, item, root, source, True)
        except OSError as e:
            logger.debug("Skipping %s: %s", item, e)


def build_catalog(roots: Iterable[DiscoveryRoot]) -> Catalog:
    """Scan roots in order; return canonical key -> entry."""
    catalog: Catalog = {}
    for r in roots:
        scan_directory(catalog, r.path, r.path, r.source, r.recursive)
    return catalog


def catalog_entries(catalog: Catalog) -> List[CatalogEntry]:
    return [catalog[k] for k in sorted(catalog)]
