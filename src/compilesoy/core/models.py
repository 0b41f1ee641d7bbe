from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Literal, Mapping, Optional, Tuple, Union

OutputType = Literal['js', 'html']
LogFormat = Literal['text', 'json']

ParamValue = Union[str, List[str], Tuple[str, ...]]


@dataclass(frozen=True)
class Argument:
    """One parsed `(name, value)` pair; names may repeat."""
    name: str
    value: str


@dataclass(frozen=True)
class ParsedArgs:
    """Result of parsing the full token list.

    `config` holds the control options (before the separator) and `params`
    the render-time parameter tree (after it). `parse_args` hands out
    read-only mappings with tuples for repeated names.
    """
    config: Mapping[str, str] = field(default_factory=dict)
    params: Mapping[str, ParamValue] = field(default_factory=dict)


@dataclass(frozen=True)
class JsSrcOptions:
    """Switches for JavaScript source generation."""
    generate_jsdoc: bool = True
    provide_require: bool = True


@dataclass(frozen=True)
class CompilerConfig:
    """Validated control options for a single run."""
    soy_files: Path
    output_type: OutputType
    template: Optional[str] = None
    js_output_path: Optional[Path] = None
    js_options: JsSrcOptions = field(default_factory=JsSrcOptions)
    log_format: LogFormat = 'text'
    log_level: str = 'INFO'

    def as_dict(self) -> Dict[str, object]:
        return {
            'soy_files': str(self.soy_files),
            'output_type': self.output_type,
            'template': self.template,
            'js_output_path': str(self.js_output_path) if self.js_output_path else None,
            'generate_jsdoc': self.js_options.generate_jsdoc,
            'provide_require': self.js_options.provide_require,
        }
