'''
Compile a tree of HTML templates into a set addressable by name.
'''
import os
import posixpath
from collections.abc import Mapping
from jinja2 import Environment, DictLoader, TemplateNotFound, TemplateSyntaxError
from .utils import logger
from .utils.errors import TemplateCompileError, TemplateExecutionError, undefined_message

EXTENSION = '.html'
DEFAULT_DELIMS = '{{', '}}'

def file_ext(rel):
    '''Extension of the last path component, dot included, or an empty string.'''
    base = rel.replace(os.sep, '/').rpartition('/')[2]
    _, dot, ext = base.rpartition('.')
    return dot + ext if dot else ''

def template_name(rel, ext):
    name = rel[:len(rel) - len(ext)]
    return name.replace(os.sep, '/')

def decode_source(raw, path):
    if isinstance(raw, str):
        return raw
    try:
        return raw.decode('utf-8')
    except UnicodeDecodeError as exc:
        raise TemplateCompileError('%s: %s' % (path, exc), path) from exc

class TemplateSet:
    '''Compiled templates sharing one environment, so that they can include
    and extend each other by name.

    Nothing is added after construction; lookups and rendering may happen
    from any number of threads.
    '''
    def __init__(self, directory, funcs=(), delims=DEFAULT_DELIMS):
        self.directory = directory
        self.sources = {}
        self.templates = {}
        start, end = delims
        self.env = Environment(
            loader=DictLoader(self.sources),
            autoescape=True,
            auto_reload=False,
            variable_start_string=start,
            variable_end_string=end,
        )
        # Later mappings win on name clashes.
        for mapping in funcs:
            self.env.globals.update(mapping)
            self.env.filters.update(mapping)

    @classmethod
    def from_directory(cls, directory, funcs=(), delims=DEFAULT_DELIMS):
        '''Walk `directory` and compile every file with the template extension.

        A directory that does not exist leaves the set empty.
        '''
        templates = cls(directory, funcs, delims)
        for dirpath, dirnames, filenames in os.walk(directory):
            # Directories are never templates, even when named "*.html".
            dirnames.sort()
            for filename in sorted(filenames):
                path = os.path.join(dirpath, filename)
                rel = os.path.relpath(path, directory)
                ext = file_ext(rel)
                if ext != EXTENSION:
                    continue
                try:
                    with open(path, 'rb') as fp:
                        raw = fp.read()
                except OSError as exc:
                    logger.error('Cannot read template %s: %s', path, exc)
                    raise TemplateCompileError('%s: %s' % (path, exc), path) from exc
                templates.add(template_name(rel, ext), decode_source(raw, path), path)
        logger.info('Compiled %d templates from %s', len(templates), directory)
        return templates

    @classmethod
    def from_assets(cls, directory, asset, asset_names, funcs=(), delims=DEFAULT_DELIMS):
        '''Compile templates served by an asset provider.

        `asset_names()` lists every known path; only paths below `directory`
        are considered and `asset(path)` returns their content.
        '''
        templates = cls(directory, funcs, delims)
        for path in asset_names():
            if not path.startswith(directory):
                continue
            try:
                rel = posixpath.relpath(path, directory)
            except ValueError as exc:
                raise TemplateCompileError('%s: %s' % (path, exc), path) from exc
            if rel.startswith('..'):
                # a sibling sharing the prefix, e.g. "viewsextra/"
                continue
            ext = file_ext(rel)
            if ext != EXTENSION:
                continue
            logger.debug('Loading asset %s', path)
            try:
                raw = asset(path)
            except Exception as exc:
                logger.error('Cannot load asset %s: %s', path, exc)
                raise TemplateCompileError('%s: %s' % (path, exc), path) from exc
            templates.add(template_name(rel, ext), decode_source(raw, path), path)
        logger.info('Compiled %d templates from assets under %s', len(templates), directory)
        return templates

    def add(self, name, source, path=None):
        '''Compile `source` and register it as `name`, replacing any previous one.'''
        self.sources[name] = source
        try:
            code = self.env.compile(source, name, path)
        except TemplateSyntaxError as exc:
            logger.error('Cannot parse template %s: %s', name, exc)
            raise TemplateCompileError(
                'template: %s:%s: %s' % (name, exc.lineno, exc.message), path) from exc
        self.templates[name] = self.env.template_class.from_code(
            self.env, code, self.env.make_globals(None))
        logger.debug('Registered template %s', name)

    def lookup(self, name):
        return self.templates.get(name)

    def execute(self, out, name, binding, encoding='utf-8'):
        '''Render template `name` with `binding` into the byte stream `out`.

        The binding is available as `binding`; the keys of a mapping binding
        are also available as top-level names.
        '''
        template = self.templates.get(name)
        if template is None:
            raise TemplateExecutionError(undefined_message(name), name)
        context = {'binding': binding}
        if isinstance(binding, Mapping):
            # only string keys can be top-level names
            context.update((k, v) for k, v in binding.items() if isinstance(k, str))
        try:
            for chunk in template.generate(context):
                out.write(chunk.encode(encoding, 'xmlcharrefreplace'))
        except TemplateNotFound as exc:
            raise TemplateExecutionError(undefined_message(exc.name), name) from exc
        except Exception as exc:
            raise TemplateExecutionError('template: %s: %s' % (name, exc), name) from exc

    def names(self):
        return sorted(self.templates)

    def __contains__(self, name):
        return name in self.templates

    def __len__(self):
        return len(self.templates)
