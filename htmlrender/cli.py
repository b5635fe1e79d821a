# -*- coding: utf-8 -*-

"""Console script for htmlrender."""
import sys
import logging
import platform
import click
from . import __version__
from .render import Renderer, Options
from .server import PreviewServer
from .utils import logger, parse_addr
from .utils.errors import TemplateCompileError


def load_renderer(root, charset=''):
    try:
        return Renderer(Options(directory=root, charset=charset))
    except TemplateCompileError as e:
        raise click.ClickException(str(e))


@click.group()
@click.option('-v', '--verbose', is_flag=True, help='show debug messages')
def main(verbose):
    """Compile and preview HTML templates."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(asctime)s %(levelname)s: %(message)s')


@main.command()
@click.option('-r', '--root', default='views', help='the root directory of templates, default as `views`')
def check(root):
    """Compile all templates and list their names."""
    renderer = load_renderer(root)
    for name in renderer.templates.names():
        click.echo(name)


@main.command()
@click.option('-b', '--bind', default=':3000', help='the address to bind, default as `:3000`')
@click.option('-r', '--root', default='views', help='the root directory of templates, default as `views`')
@click.option('--charset', default='', help='charset of rendered pages, default as `UTF-8`')
def serve(bind, root, charset):
    """Serve templates for preview, `/admin/index` renders `admin/index.html`."""
    host, port = parse_addr(bind, default_port=3000)
    logger.info(
        'htmlrender v%s/%s %s',
        __version__, platform.python_implementation(), platform.python_version())
    renderer = load_renderer(root, charset)
    PreviewServer(renderer, host, port).serve()
    return 0


if __name__ == "__main__":
    sys.exit(main())  # pragma: no cover
