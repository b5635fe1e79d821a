'''
Render engines turn data into a response of one content type.
'''
from .response import set_header
from .utils import logger

# Content-Type header name.
CONTENT_TYPE = 'Content-Type'
CONTENT_TYPE_HTML = 'text/html'

class Engine:
    '''Generic interface for all responses.'''
    def render(self, writer, data):
        raise NotImplementedError

    def __repr__(self):
        return '<{}>'.format(self.__class__.__name__)

class Head:
    def __init__(self, content_type, status):
        self.content_type = content_type
        self.status = status

    def write(self, writer):
        '''Output the header content.'''
        set_header(writer.headers, CONTENT_TYPE, self.content_type)
        writer.write_header(self.status)

class HTML(Engine):
    '''Built-in HTML renderer.'''
    def __init__(self, head, name, templates, pool, encoding='utf-8'):
        self.head = head
        self.name = name
        self.templates = templates
        self.pool = pool
        self.encoding = encoding

    def render(self, writer, binding):
        with self.pool.borrow() as out:
            self.templates.execute(out, self.name, binding, self.encoding)
            logger.debug('rendered %s, %d bytes', self.name, out.tell())
            self.head.write(writer)
            writer.write(out.getvalue())

    def __repr__(self):
        return '<HTML name={} status={}>'.format(self.name, self.head.status)
