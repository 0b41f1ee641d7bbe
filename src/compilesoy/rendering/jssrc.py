from __future__ import annotations

"""
jssrc – JavaScript source generation for compiled template files.

Each template file becomes one script. The script declares the file's
namespace (through `goog.provide` or plain object guards), stores the
template source as a private constant and exposes one function per macro:

    vit.page.header = function(opt_data) {
      return soy.renderJinja(vit.page.SOURCE_, 'header', opt_data);
    };

The client-side `soy.renderJinja` runtime is expected to evaluate the
Jinja-syntax source; this module only produces the wrapping.
"""

import json
import re
from dataclasses import dataclass, field
from typing import List, Tuple

from compilesoy.core.models import JsSrcOptions

_JS_IDENT_BAD = re.compile(r'[^A-Za-z0-9_$]')
RUNTIME_NAMESPACE = 'soy'
RUNTIME_RENDER_FN = 'soy.renderJinja'


@dataclass(frozen=True)
class MacroInfo:
    """Signature of one macro: required and defaulted argument names."""
    name: str
    required: Tuple[str, ...] = ()
    optional: Tuple[str, ...] = ()
    catch_kwargs: bool = False


@dataclass(frozen=True)
class TemplateUnit:
    """Everything the generator needs to know about one template file."""
    namespace: str
    filename: str
    source: str
    macros: Tuple[MacroInfo, ...] = ()
    free_vars: Tuple[str, ...] = field(default_factory=tuple)


def js_namespace(namespace: str) -> str:
    """Turn a dotted template namespace into a valid JS object path."""
    parts = []
    for part in namespace.split('.'):
        ident = _JS_IDENT_BAD.sub('_', part) or '_'
        if ident[0].isdigit():
            ident = '_' + ident
        parts.append(ident)
    return '.'.join(parts)


def _namespace_decl(ns: str, options: JsSrcOptions) -> List[str]:
    if options.provide_require:
        return [f"goog.provide('{ns}');", '', f"goog.require('{RUNTIME_NAMESPACE}');"]
    out: List[str] = []
    parts = ns.split('.')
    for i in range(1, len(parts) + 1):
        path = '.'.join(parts[:i])
        if i == 1:
            out.append(f"if (typeof {path} == 'undefined') {{ var {path} = {{}}; }}")
        else:
            out.append(f"if (typeof {path} == 'undefined') {{ {path} = {{}}; }}")
    return out


def _jsdoc(macro: MacroInfo) -> List[str]:
    lines = ['/**']
    opt_data = ' * @param {Object<string, *>=} opt_data'
    if macro.catch_kwargs:
        opt_data += ' Keys beyond the ones below reach the template too.'
    lines.append(opt_data)
    for name in macro.required:
        lines.append(f' * @param {{*}} opt_data.{name}')
    for name in macro.optional:
        lines.append(f' * @param {{*=}} opt_data.{name}')
    lines.append(' * @return {string}')
    lines.append(' * @notypecheck')
    lines.append(' */')
    return lines


def generate_js(unit: TemplateUnit, options: JsSrcOptions) -> str:
    """Return the JavaScript source for *unit*."""
    ns = js_namespace(unit.namespace)
    lines: List[str] = [
        f'// This file was automatically generated from {unit.filename}.',
        "// Please don't edit this file by hand.",
        '',
    ]
    if options.generate_jsdoc:
        lines.append('/**')
        lines.append(f' * @fileoverview Templates in namespace {ns}.')
        if unit.free_vars:
            lines.append(f" * Reads top-level data: {', '.join(unit.free_vars)}.")
        lines.append(' */')
        lines.append('')
    lines.extend(_namespace_decl(ns, options))
    lines.append('')
    if options.generate_jsdoc:
        lines.append('/** @private @const {string} */')
    lines.append(f'{ns}.SOURCE_ = {json.dumps(unit.source)};')

    for macro in unit.macros:
        lines.append('')
        lines.append('')
        if options.generate_jsdoc:
            lines.extend(_jsdoc(macro))
        lines.append(f'{ns}.{macro.name} = function(opt_data) {{')
        lines.append(f"  return {RUNTIME_RENDER_FN}({ns}.SOURCE_, '{macro.name}', opt_data);")
        lines.append('};')

    return '\n'.join(lines) + '\n'
