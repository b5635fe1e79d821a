"""Tests for the console script."""
from click.testing import CliRunner
from htmlrender.cli import main
from conftest import data_path

runner = CliRunner()


def test_check():
    result = runner.invoke(main, ['check', '-r', data_path('basic')])
    assert result.exit_code == 0
    names = result.output.splitlines()
    for name in ('admin/index', 'greet', 'hello', 'local.html/page'):
        assert name in names


def test_check_broken():
    result = runner.invoke(main, ['check', '-r', data_path('broken')])
    assert result.exit_code == 1
    assert 'index' in result.output


def test_serve(monkeypatch):
    started = []

    def fake_serve(server):
        started.append(server)

    monkeypatch.setattr('htmlrender.cli.PreviewServer.serve', fake_serve)
    result = runner.invoke(main, ['serve', '-b', '127.0.0.1:8123', '-r', data_path('basic'), '--charset', 'latin-1'])
    assert result.exit_code == 0
    server, = started
    assert (server.host, server.port) == ('127.0.0.1', 8123)
    assert server.renderer.compiled_charset == '; charset=latin-1'
    assert server.renderer.template_lookup('hello') is not None


def test_serve_broken_templates():
    result = runner.invoke(main, ['serve', '-r', data_path('broken')])
    assert result.exit_code == 1
