from __future__ import annotations

from pathlib import Path
from typing import List, Protocol, runtime_checkable


@runtime_checkable
class TemplateFileFinderProtocol(Protocol):
    """Enumerate template source files below a root path."""

    def find(self, root: Path) -> List[Path]:
        ...
