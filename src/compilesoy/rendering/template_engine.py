"""
template_engine – Jinja2-backed TemplateCompilerProtocol implementation.

A template file is a *namespace* named after its path relative to the
template root (``root/vit/page.soy`` -> ``vit.page``). Every exported macro
in the file is a *template* addressed as ``<namespace>.<macro>``. Asking for
a bare namespace renders the file as a whole.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from jinja2 import Environment, FileSystemLoader, StrictUndefined, nodes, select_autoescape
from jinja2 import meta
from jinja2.runtime import Macro

from compilesoy.constants import TEMPLATE_SUFFIX
from compilesoy.core.errors import TemplateNotFoundError
from compilesoy.core.interfaces.templating import TemplateCompilerProtocol
from compilesoy.core.models import JsSrcOptions, ParamValue
from compilesoy.logging.helpers import get_logger
from compilesoy.rendering.jssrc import MacroInfo, TemplateUnit, generate_js


def build_environment(root: Path) -> Environment:
    """Return the Jinja2 environment used for both HTML and JS output."""
    return Environment(
        loader=FileSystemLoader(str(root)),
        autoescape=select_autoescape(
            enabled_extensions=('html', 'htm', 'xml', TEMPLATE_SUFFIX.lstrip('.')),
            default_for_string=True,
        ),
        undefined=StrictUndefined,
        keep_trailing_newline=False,
    )


def _absolute(path: Path) -> Path:
    """Absolute, normalised path that keeps symlinked segments as written."""
    return Path(os.path.abspath(path))


def common_root(files: Sequence[Path]) -> Path:
    """Deepest directory that contains every file in *files*."""
    if not files:
        return Path.cwd()
    parents = [str(_absolute(f).parent) for f in files]
    return Path(os.path.commonpath(parents))


def namespace_for(path: Path, root: Path, suffix: str = TEMPLATE_SUFFIX) -> str:
    """Dotted namespace of *path* relative to *root*, without the suffix."""
    rel = _absolute(path).relative_to(_absolute(root))
    parts = list(rel.parts)
    if parts[-1].endswith(suffix):
        parts[-1] = parts[-1][: -len(suffix)]
    return '.'.join(parts)


def _macro_info(node: nodes.Macro) -> MacroInfo:
    names = [arg.name for arg in node.args]
    n_required = len(names) - len(node.defaults)
    catch_kwargs = any(
        isinstance(n, nodes.Name) and n.name == 'kwargs' for n in node.find_all(nodes.Name)
    )
    return MacroInfo(
        name=node.name,
        required=tuple(names[:n_required]),
        optional=tuple(names[n_required:]),
        catch_kwargs=catch_kwargs,
    )


class JinjaTemplateCompiler(TemplateCompilerProtocol):
    """Compile a fixed set of template files with Jinja2."""

    def __init__(
        self,
        files: Sequence[Path],
        *,
        root: Optional[Path] = None,
        environment: Optional[Environment] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._files: List[Path] = [_absolute(f) for f in files]
        self._root = _absolute(root) if root is not None else common_root(self._files)
        if self._root.is_file():
            self._root = self._root.parent
        self._env = environment or build_environment(self._root)
        self._log = logger or get_logger('templates')
        self._by_namespace: Dict[str, Path] = {}
        for f in self._files:
            self._by_namespace[namespace_for(f, self._root)] = f

    @property
    def files(self) -> List[Path]:
        return list(self._files)

    @property
    def namespaces(self) -> List[str]:
        return list(self._by_namespace)

    def _loader_name(self, path: Path) -> str:
        return path.relative_to(self._root).as_posix()

    def _resolve(self, template: str) -> Tuple[Path, Optional[str]]:
        if template in self._by_namespace:
            return self._by_namespace[template], None
        namespace, _, macro = template.rpartition('.')
        if namespace in self._by_namespace and macro:
            return self._by_namespace[namespace], macro
        raise TemplateNotFoundError(template)

    # -------- TemplateCompilerProtocol --------

    def render(self, template: str, params: Mapping[str, ParamValue]) -> str:
        """Render *template* with *params* as the template data.

        The file is loaded with the whole parameter tree as its context, so
        top-level expressions see every parameter. A macro receives only the
        arguments it declares, or everything when it reads ``kwargs``.
        """
        path, macro_name = self._resolve(template)
        tpl = self._env.get_template(self._loader_name(path))
        data: Dict[str, Any] = dict(params)
        self._log.debug('rendering %s from %s', template, path)
        if macro_name is None:
            return tpl.render(data)

        module = tpl.make_module(vars=data)
        macro = getattr(module, macro_name, None)
        if not isinstance(macro, Macro):
            raise TemplateNotFoundError(template)
        if macro.catch_kwargs:
            kwargs = data
        else:
            kwargs = {k: v for k, v in data.items() if k in macro.arguments}
        return str(macro(**kwargs))

    def _unit_for(self, path: Path) -> TemplateUnit:
        name = self._loader_name(path)
        source, filename, _ = self._env.loader.get_source(self._env, name)
        ast = self._env.parse(source, name, filename)
        # Compiling catches unknown filters and tests, which parsing alone does not.
        self._env.compile(ast, name, filename)
        macros = tuple(_macro_info(n) for n in ast.body if isinstance(n, nodes.Macro))
        free_vars = tuple(sorted(meta.find_undeclared_variables(ast)))
        return TemplateUnit(
            namespace=namespace_for(path, self._root),
            filename=path.name,
            source=source,
            macros=macros,
            free_vars=free_vars,
        )

    def compile_to_js(self, options: JsSrcOptions) -> List[str]:
        """Return one JS source per input file in input order.

        All files are parsed before any source is produced, so a syntax
        error anywhere yields no output at all.
        """
        units = [self._unit_for(p) for p in self._files]
        self._log.debug('compiled %d template file(s) to JS', len(units))
        return [generate_js(u, options) for u in units]


def jinja_compiler_factory(files: Sequence[Path], *, root: Optional[Path] = None) -> JinjaTemplateCompiler:
    """Default TemplateCompilerFactoryProtocol implementation."""
    return JinjaTemplateCompiler(files, root=root)
