from __future__ import annotations

from pathlib import Path
from typing import List, Mapping, Optional, Protocol, Sequence, runtime_checkable

from compilesoy.core.models import JsSrcOptions, ParamValue


@runtime_checkable
class TemplateCompilerProtocol(Protocol):
    """Compiled view over a fixed set of template files."""

    def render(self, template: str, params: Mapping[str, ParamValue]) -> str:
        """Render the fully-qualified *template* against *params*."""
        ...

    def compile_to_js(self, options: JsSrcOptions) -> List[str]:
        """Return one JavaScript source per input file, in input order."""
        ...


@runtime_checkable
class TemplateCompilerFactoryProtocol(Protocol):
    def __call__(self, files: Sequence[Path], *, root: Optional[Path] = None) -> TemplateCompilerProtocol:
        ...
