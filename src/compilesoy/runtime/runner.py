from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Mapping, Optional

from compilesoy.core.interfaces.fs import TemplateFileFinderProtocol
from compilesoy.core.interfaces.logging import LoggerLikeProtocol
from compilesoy.core.interfaces.output import HtmlWriterProtocol, JsWriterProtocol
from compilesoy.core.interfaces.templating import TemplateCompilerFactoryProtocol
from compilesoy.core.models import CompilerConfig, ParamValue, ParsedArgs
from compilesoy.discovery.file_discovery import TemplateFileFinder
from compilesoy.io.output import JsFileWriter, StdoutWriter
from compilesoy.logging.helpers import get_logger
from compilesoy.parsing.arguments import params_summary
from compilesoy.rendering.template_engine import jinja_compiler_factory
from compilesoy.runtime.config import load_config


@dataclass
class SoyCompilerRunner:
    """Wire discovery, compilation and output for one invocation.

    Every collaborator is a Protocol so tests can swap in in-memory fakes.
    """

    finder: TemplateFileFinderProtocol = field(default_factory=TemplateFileFinder)
    compiler_factory: TemplateCompilerFactoryProtocol = jinja_compiler_factory
    html_writer: HtmlWriterProtocol = field(default_factory=StdoutWriter)
    js_writer: JsWriterProtocol = field(default_factory=JsFileWriter)
    logger: Optional[LoggerLikeProtocol] = None

    @property
    def log(self) -> LoggerLikeProtocol:
        return self.logger or get_logger('runner')

    def run(self, parsed: ParsedArgs) -> CompilerConfig:
        """Validate the control options, then execute them."""
        cfg = load_config(parsed.config)
        self.execute(cfg, parsed.params)
        return cfg

    def execute(self, cfg: CompilerConfig, params: Mapping[str, ParamValue]) -> Optional[List[Path]]:
        """Render HTML to the writer, or write JS files and return their paths."""
        self.log.debug('run configuration', extra={'context': cfg.as_dict()})
        files = self.finder.find(cfg.soy_files)
        root = cfg.soy_files if Path(cfg.soy_files).is_dir() else Path(cfg.soy_files).parent
        compiler = self.compiler_factory(files, root=root)

        if cfg.output_type == 'html':
            self.log.debug('template parameters: %s', params_summary(params))
            self.html_writer.write_html(compiler.render(cfg.template, params))
            return None

        sources = compiler.compile_to_js(cfg.js_options)
        return self.js_writer.write_js(sources, files, cfg.js_output_path)
