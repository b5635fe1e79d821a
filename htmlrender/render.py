'''
Render named HTML templates into HTTP responses.
'''
import codecs
import copy
from .engine import Head, HTML, CONTENT_TYPE_HTML
from .response import http_error
from .templates import TemplateSet, DEFAULT_DELIMS
from .utils import logger, BufferPool

DEFAULT_CHARSET = 'UTF-8'
DEFAULT_DIRECTORY = 'views'

class Options:
    '''Configuration of a `Renderer`.

    - directory: where templates are loaded from, default as `views`
    - asset: function returning the content of an asset path, used in place
      of the directory together with `asset_names`
    - asset_names: function listing all asset paths
    - funcs: list of mappings of helper functions made available to
      templates, applied in order
    - charset: appended to the Content-Type header, default as `UTF-8`
    - delims: start and end delimiters of template variables
    '''
    keys = 'directory', 'asset', 'asset_names', 'funcs', 'charset', 'delims'

    def __init__(self, directory='', asset=None, asset_names=None, funcs=None,
            charset='', delims=DEFAULT_DELIMS):
        self.directory = directory
        self.asset = asset
        self.asset_names = asset_names
        self.funcs = list(funcs or [])
        self.charset = charset
        self.delims = tuple(delims)

    @classmethod
    def from_dict(cls, data):
        unknown = set(data) - set(cls.keys)
        if unknown:
            raise ValueError('Unknown options: %s' % ', '.join(sorted(unknown)))
        return cls(**data)

    def __repr__(self):
        return '<Options directory={} charset={} assets={}>'.format(
            self.directory, self.charset, self.asset is not None)

def resolve_options(options=None):
    '''Return a copy of `options` with defaults filled in.'''
    if options is None:
        options = Options()
    elif isinstance(options, dict):
        options = Options.from_dict(options)
    else:
        options = copy.copy(options)
        options.funcs = list(options.funcs)
    if not options.charset:
        options.charset = DEFAULT_CHARSET
    if not options.directory:
        options.directory = DEFAULT_DIRECTORY
    return options

def charset_encoding(charset):
    try:
        return codecs.lookup(charset).name
    except LookupError:
        logger.warning('Unknown charset %s, encoding responses as utf-8', charset)
        return 'utf-8'

class Renderer:
    '''Provide functions for easily writing HTML templates out to a response.

    Templates are compiled once on construction. A broken template raises
    `TemplateCompileError` here rather than on first use.
    '''
    def __init__(self, options=None, pool=None):
        self.options = resolve_options(options)
        self.compiled_charset = '; charset=' + self.options.charset
        self.encoding = charset_encoding(self.options.charset)
        self.pool = BufferPool() if pool is None else pool
        self.templates = self.compile_templates()

    def compile_templates(self):
        opt = self.options
        if opt.asset is None or opt.asset_names is None:
            return TemplateSet.from_directory(opt.directory, opt.funcs, opt.delims)
        return TemplateSet.from_assets(
            opt.directory, opt.asset, opt.asset_names, opt.funcs, opt.delims)

    def template_lookup(self, name):
        '''Return the compiled template called `name`, or None.'''
        return self.templates.lookup(name)

    def render(self, writer, engine, data):
        '''Generic render path used by `html`, usable with custom engines.

        On failure a 500 response carrying the error message is written and
        the error is raised again.
        '''
        logger.debug('render %r', engine)
        try:
            engine.render(writer, data)
        except Exception as exc:
            logger.error('Render failed with %r: %s', engine, exc)
            try:
                http_error(writer, str(exc), 500)
            except OSError as write_exc:
                logger.warning('Cannot send error response: %s', write_exc)
            raise

    def html(self, writer, status, name, binding=None):
        '''Build up the response from template `name` and `binding`.'''
        head = Head(CONTENT_TYPE_HTML + self.compiled_charset, status)
        engine = HTML(head, name, self.templates, self.pool, self.encoding)
        return self.render(writer, engine, binding)
