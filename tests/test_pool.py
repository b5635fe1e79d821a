"""Tests for the buffer pool."""
import pytest
from htmlrender import BufferPool, Renderer, Options, ResponseRecorder, TemplateExecutionError
from conftest import data_path


class TestBufferPool:

    def test_reuse_is_reset(self):
        pool = BufferPool()
        buf = pool.get()
        buf.write(b'leftover')
        pool.put(buf)
        again = pool.get()
        assert again is buf
        assert again.getvalue() == b''

    def test_distinct_borrowers(self):
        pool = BufferPool()
        assert pool.get() is not pool.get()

    def test_capacity(self):
        pool = BufferPool(size=2)
        for buf in [pool.get() for _ in range(5)]:
            pool.put(buf)
        assert len(pool) == 2

    def test_borrow_returns_on_error(self):
        pool = BufferPool()
        with pytest.raises(RuntimeError):
            with pool.borrow() as buf:
                buf.write(b'partial')
                raise RuntimeError('boom')
        assert len(pool) == 1
        assert pool.get().getvalue() == b''


class TestRendererPool:

    def render(self, pool):
        return Renderer(Options(directory=data_path('basic')), pool=pool)

    def test_buffer_returned_after_success(self):
        pool = BufferPool()
        self.render(pool).html(ResponseRecorder(), 200, 'hello', 'gophers')
        assert len(pool) == 1

    def test_buffer_returned_after_failure(self):
        pool = BufferPool()
        render = self.render(pool)
        for _ in range(3):
            with pytest.raises(TemplateExecutionError):
                render.html(ResponseRecorder(), 200, 'nope', None)
        assert len(pool) == 1

    def test_separate_pools(self):
        first = Renderer(Options(directory=data_path('basic')))
        second = Renderer(Options(directory=data_path('basic')))
        assert first.pool is not second.pool
