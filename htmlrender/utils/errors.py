class RenderError(Exception):
    '''Base class of all errors raised by htmlrender.'''

class TemplateCompileError(RenderError):
    def __init__(self, message, path=None):
        super().__init__(message)
        self.path = path

class TemplateExecutionError(RenderError):
    def __init__(self, message, name=None):
        super().__init__(message)
        self.name = name

def undefined_message(name):
    return '"%s" is undefined' % name

class HTTPError(Exception):
    def __init__(self, status_code, long_msg='Error occurred!'):
        super().__init__(long_msg)
        self.status_code = status_code
        self.long_msg = long_msg
