'''
Response writers that render engines write to.
'''
import io
import http.client
from .utils import logger

class ResponseWriter:
    '''The minimal response surface: mutable headers, a status, a body.

    Headers may be changed until `write_header` is called. Writing body
    data first implies status 200.
    '''
    def __init__(self):
        self.headers = http.client.HTTPMessage()
        self.wrote_header = False

    def write_header(self, status):
        if self.wrote_header:
            logger.warning('superfluous write_header call with status %d', status)
            return
        self.wrote_header = True
        self.send_header(status)

    def write(self, data):
        if not self.wrote_header:
            self.write_header(200)
        if isinstance(data, str):
            data = data.encode('utf-8')
        if data:
            self.send_body(data)
        return len(data)

    def send_header(self, status):
        raise NotImplementedError

    def send_body(self, data):
        raise NotImplementedError

class ResponseRecorder(ResponseWriter):
    '''Record the response in memory, e.g. for tests or to hand it to
    another server later.'''
    def __init__(self):
        super().__init__()
        self.code = 200
        self.body = io.BytesIO()
        self.snapshot = None

    def send_header(self, status):
        self.code = status
        self.snapshot = http.client.HTTPMessage()
        for key, value in self.headers.items():
            self.snapshot[key] = value

    def send_body(self, data):
        self.body.write(data)

    def header(self, key, default=None):
        headers = self.headers if self.snapshot is None else self.snapshot
        return headers.get(key, default)

    @property
    def text(self):
        return self.body.getvalue().decode('utf-8')

def set_header(headers, key, value):
    del headers[key]
    headers[key] = value

def http_error(writer, message, code):
    '''Reply with a plain-text error message and status code.'''
    set_header(writer.headers, 'Content-Type', 'text/plain; charset=utf-8')
    set_header(writer.headers, 'X-Content-Type-Options', 'nosniff')
    writer.write_header(code)
    writer.write(message + '\n')
