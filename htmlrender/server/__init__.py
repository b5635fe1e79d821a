'''
A development server that previews templates over HTTP.

Every GET request renders the template named after the request path, with
query parameters as the binding.
'''
import asyncio
import email.utils
import http.client
from .. import __version__
from ..response import ResponseWriter, set_header, http_error
from ..utils import logger, errors
from .request import Request

class StreamResponseWriter(ResponseWriter):
    '''Write an HTTP/1.1 response straight to an asyncio stream.

    Body length is unknown when the header goes out, so the connection is
    closed after each response.
    '''
    server_version = 'htmlrender/' + __version__

    def __init__(self, stream, head_only=False):
        super().__init__()
        self.stream = stream
        self.head_only = head_only
        self.status = None
        self.written = 0

    def send_header(self, status):
        self.status = status
        reason = http.client.responses.get(status, '')
        set_header(self.headers, 'Connection', 'close')
        set_header(self.headers, 'Server', self.server_version)
        set_header(self.headers, 'Date', email.utils.formatdate(usegmt=True))
        header_lines = ['HTTP/1.1 %d %s\r\n' % (status, reason)]
        for key, value in self.headers.items():
            header_lines.append('%s: %s\r\n' % (key, value))
        header_lines.append('\r\n')
        self.stream.writelines(line.encode('latin-1', 'strict') for line in header_lines)

    def send_body(self, data):
        if self.head_only:
            return
        self.stream.write(data)
        self.written += len(data)

class PreviewServer:
    '''Serve template previews.

    Templates render synchronously inside the connection handler, which
    blocks the event loop while a page renders. Fine for development,
    not meant for production traffic.
    '''
    keep_alive_timeout = 120

    def __init__(self, renderer, host='', port=3000):
        self.renderer = renderer
        self.host = host
        self.port = port
        self.server = None

    async def handle(self, reader, writer):
        request = Request(reader, self.keep_alive_timeout)
        response = StreamResponseWriter(writer)
        try:
            if await request.parse():
                self.handle_request(request, response)
                await writer.drain()
        except errors.HTTPError as e:
            http_error(response, e.long_msg, e.status_code)
            await writer.drain()
        except (asyncio.TimeoutError, ConnectionError):
            pass
        finally:
            if request.requestline:
                peername = writer.get_extra_info('peername') or ('-',)
                logger.info('%s "%s" %s %d',
                    peername[0], request.requestline, response.status or '-', response.written)
            writer.close()

    def handle_request(self, request, response):
        if request.method not in ('GET', 'HEAD'):
            raise errors.HTTPError(405, 'Method not allowed (%s)' % request.method)
        response.head_only = request.method == 'HEAD'
        try:
            self.renderer.html(response, 200, request.template_name(), request.binding())
        except errors.RenderError as e:
            # the renderer has already answered with 500
            logger.debug('Preview of %s failed: %s', request.path, e)

    async def start(self):
        self.server = await asyncio.start_server(self.handle, self.host, self.port)
        for sock in self.server.sockets:
            hostname = sock.getsockname()
            logger.info('Serving on %s, port %d', *hostname[:2])
        return self.server

    async def serve_forever(self):
        await self.start()
        async with self.server:
            await self.server.serve_forever()

    def serve(self):
        asyncio.run(self.serve_forever())
