# coding=utf-8
'''
Render HTML templates into HTTP responses.

    renderer = Renderer(Options(directory='views'))

    def handle(writer):
        # Assumes a template in ./views called "example.html".
        renderer.html(writer, 200, 'example', {'name': 'world'})
'''
__version__ = '0.1.0'

from .engine import Engine, Head, HTML, CONTENT_TYPE, CONTENT_TYPE_HTML
from .render import Renderer, Options
from .response import ResponseWriter, ResponseRecorder, http_error
from .templates import TemplateSet
from .utils import BufferPool, logger
from .utils.errors import RenderError, TemplateCompileError, TemplateExecutionError
