#!/usr/bin/env python3
"""
Package count module.
"""

import os
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Dict, List, Optional, Tuple

from .base import FactModule

logger = logging.getLogger("yaf.modules.packages")

MAX_WORKERS = 4


def count_entries(path: str, filter_func: Optional[Callable[[str], bool]] = None) -> int:
    """
    Count directory entries, treating a missing or unreadable directory as empty.

    Args:
        path: Directory to list
        filter_func: Function to filter entry names (should return True to count)

    Returns:
        Number of matching entries
    """
    try:
        names = os.listdir(path)
    except OSError:
        return 0
    if filter_func:
        names = [name for name in names if filter_func(name)]
    return len(names)


def default_sources(home: Optional[str] = None, root: str = "/") -> List[Tuple[str, str, Optional[Callable[[str], bool]]]]:
    """
    Return (manager, directory, filter) triples in display order.

    Several directories may feed the same manager; their counts are summed.
    """
    if home is None:
        home = os.environ.get("HOME", "")

    def under_root(path: str) -> str:
        return os.path.join(root, path.lstrip("/"))

    return [
        ("pacman", under_root("/var/lib/pacman/local"), None),
        ("xbps", under_root("/var/db/xbps"), None),
        ("apt", under_root("/var/lib/dpkg/info"), lambda name: name.endswith(".list")),
        ("flatpak", under_root("/var/lib/flatpak/app"), None),
        ("flatpak", os.path.join(home, ".local/share/flatpak/app"), None),
    ]


class PackageCountModule(FactModule):
    """Installed package counts per package manager."""

    def __init__(self, sources=None):
        super().__init__("pkgs", "Packages")
        self.sources = sources

    def counts(self) -> Dict[str, int]:
        """Query every source in parallel and sum the counts per manager."""
        sources = self.sources if self.sources is not None else default_sources()

        with ThreadPoolExecutor(max_workers=MAX_WORKERS) as executor:
            futures = [
                (manager, executor.submit(count_entries, path, filter_func))
                for manager, path, filter_func in sources
            ]
            totals: Dict[str, int] = {}
            for manager, future in futures:
                totals[manager] = totals.get(manager, 0) + future.result()

        logger.debug(f"Package counts: {totals}")
        return totals

    def collect(self) -> str:
        output = [f"{count} ({manager})" for manager, count in self.counts().items() if count > 0]
        if not output:
            raise ValueError("no supported package manager found")
        return ", ".join(output)
