import email.parser
import http.client
import asyncio
from urllib import parse
from ..utils import errors

class Request:
    def __init__(self, reader, keep_alive_timeout=120):
        self.reader = reader
        self.keep_alive_timeout = keep_alive_timeout
        self.requestline = None
        self.method = None
        self.path = None
        self.pathname = None
        self.query = None
        self.headers = None

    async def readline(self):
        return await asyncio.wait_for(self.reader.readline(), self.keep_alive_timeout)

    async def parse(self):
        requestline = await self.readline()
        if not requestline:
            return
        self.requestline = requestline.strip().decode('latin-1')
        if not self.requestline:
            return
        words = self.requestline.split(' ')
        if len(words) != 3:
            raise errors.HTTPError(400, 'Bad request syntax (%r)' % self.requestline)
        self.method, self.path, version = words
        if not version.startswith('HTTP/'):
            raise errors.HTTPError(400, 'Bad request version (%r)' % version)
        if version >= 'HTTP/2':
            raise errors.HTTPError(505, 'Invalid HTTP Version (%s)' % version)
        header_lines = []
        while True:
            line = await self.readline()
            if not line.strip():
                break
            header_lines.append(line.decode('latin-1'))
        try:
            parser = email.parser.Parser(_class=http.client.HTTPMessage)
            self.headers = parser.parsestr(''.join(header_lines))
        except http.client.LineTooLong:
            raise errors.HTTPError(400, 'Line too long')
        pathname, _, self.query = self.path.partition('?')
        self.pathname = parse.unquote(pathname)
        return True

    def template_name(self):
        '''Map the request path to a template name, `/` as `index`.'''
        name = self.pathname.lstrip('/')
        if not name or name.endswith('/'):
            name += 'index'
        return name

    def binding(self):
        return dict(parse.parse_qsl(self.query))
