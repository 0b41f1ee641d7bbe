from .fs import TemplateFileFinderProtocol
from .logging import LoggerFactoryProtocol, LoggerLikeProtocol
from .output import HtmlWriterProtocol, JsWriterProtocol
from .templating import TemplateCompilerFactoryProtocol, TemplateCompilerProtocol

__all__ = [
    'TemplateFileFinderProtocol',
    'LoggerFactoryProtocol',
    'LoggerLikeProtocol',
    'HtmlWriterProtocol',
    'JsWriterProtocol',
    'TemplateCompilerFactoryProtocol',
    'TemplateCompilerProtocol',
]
