from __future__ import annotations

from pathlib import Path
from typing import List, Protocol, Sequence, runtime_checkable


@runtime_checkable
class HtmlWriterProtocol(Protocol):
    def write_html(self, text: str) -> None:
        ...


@runtime_checkable
class JsWriterProtocol(Protocol):
    def write_js(self, sources: Sequence[str], files: Sequence[Path], out_dir: Path) -> List[Path]:
        """Write `sources[i]` next to the name of `files[i]` inside *out_dir*."""
        ...
