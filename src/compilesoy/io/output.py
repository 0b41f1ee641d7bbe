from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence, TextIO

from compilesoy.constants import JS_SUFFIX
from compilesoy.core.interfaces.output import HtmlWriterProtocol, JsWriterProtocol
from compilesoy.logging.helpers import get_logger


def js_output_path(out_dir: Path, template_file: Path) -> Path:
    """`out_dir/<template file name>.js`, e.g. `page.soy` -> `page.soy.js`."""
    return Path(out_dir) / f'{Path(template_file).name}{JS_SUFFIX}'


class StdoutWriter(HtmlWriterProtocol):
    """Print rendered HTML followed by a newline."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream

    def write_html(self, text: str) -> None:
        print(text, file=self._stream or sys.stdout)


class JsFileWriter(JsWriterProtocol):
    """Write one generated script per template file."""

    def __init__(self, *, logger: Optional[logging.Logger] = None) -> None:
        self._log = logger or get_logger('io.output')

    def write_js(self, sources: Sequence[str], files: Sequence[Path], out_dir: Path) -> List[Path]:
        if len(sources) != len(files):
            raise ValueError(
                f'got {len(sources)} JS source(s) for {len(files)} template file(s)'
            )
        out_dir = Path(out_dir)
        out_dir.mkdir(parents=True, exist_ok=True)
        written: List[Path] = []
        for source, template_file in zip(sources, files):
            target = js_output_path(out_dir, template_file)
            target.write_text(source, encoding='utf-8')
            self._log.info('wrote %s', target)
            written.append(target)
        return written
