from __future__ import annotations

"""
Template file discovery.

Walks a directory tree collecting files whose name ends with the template
suffix. Recursion stops at a fixed depth so that symlink cycles or very deep
trees cannot run away; directories beyond the bound are skipped silently.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from compilesoy.constants import MAX_DIR_TRAVERSAL_DEPTH, TEMPLATE_SUFFIX
from compilesoy.core.interfaces.fs import TemplateFileFinderProtocol
from compilesoy.logging.helpers import get_logger


@dataclass
class TemplateFileFinder(TemplateFileFinderProtocol):
    """Bounded-depth recursive finder for template source files."""

    suffix: str = TEMPLATE_SUFFIX
    max_depth: int = MAX_DIR_TRAVERSAL_DEPTH
    logger: Optional[logging.Logger] = None

    def _accepts(self, path: Path) -> bool:
        return path.is_file() and path.name.endswith(self.suffix)

    def _walk(self, directory: Path, depth: int, out: List[Path]) -> None:
        if depth > self.max_depth:
            (self.logger or get_logger("discovery")).debug(
                "depth limit reached, skipping %s", directory
            )
            return
        for entry in sorted(directory.iterdir(), key=lambda p: p.name):
            if entry.is_dir():
                self._walk(entry, depth + 1, out)
            elif self._accepts(entry):
                out.append(entry)

    def find(self, root: Path) -> List[Path]:
        """Return matching files under *root* in a stable, sorted order.

        Raises:
            FileNotFoundError: *root* does not exist.
        """
        root = Path(root)
        if not root.exists():
            raise FileNotFoundError(f"template root {root} does not exist")
        found: List[Path] = []
        if root.is_dir():
            self._walk(root, 0, found)
        elif self._accepts(root):
            found.append(root)
        (self.logger or get_logger("discovery")).info(
            "found %d template file(s) under %s", len(found), root
        )
        return found


def find_soy_files(root: Path | str) -> List[Path]:
    """Shortcut for `TemplateFileFinder().find(root)`."""
    return TemplateFileFinder().find(Path(root))
