'''
Pool of reusable byte buffers.
'''
import io
import queue
import contextlib

class BufferPool:
    '''Keep up to `size` idle buffers around for reuse.

    Safe to share between threads: every buffer is held by at most one
    borrower between `get` and `put`.
    '''
    def __init__(self, size=64):
        self.size = size
        self.idle = queue.LifoQueue(maxsize=size)

    def get(self):
        try:
            return self.idle.get_nowait()
        except queue.Empty:
            return io.BytesIO()

    def put(self, buf):
        buf.seek(0)
        buf.truncate(0)
        try:
            self.idle.put_nowait(buf)
        except queue.Full:
            # discard, the pool is already at capacity
            pass

    @contextlib.contextmanager
    def borrow(self):
        buf = self.get()
        try:
            yield buf
        finally:
            self.put(buf)

    def __len__(self):
        return self.idle.qsize()
