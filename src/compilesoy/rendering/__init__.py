from compilesoy.rendering.jssrc import MacroInfo, TemplateUnit, generate_js, js_namespace
from compilesoy.rendering.template_engine import (
    JinjaTemplateCompiler,
    build_environment,
    jinja_compiler_factory,
    namespace_for,
)

__all__ = [
    'MacroInfo',
    'TemplateUnit',
    'generate_js',
    'js_namespace',
    'JinjaTemplateCompiler',
    'build_environment',
    'jinja_compiler_factory',
    'namespace_for',
]
