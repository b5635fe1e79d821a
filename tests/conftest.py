"""Shared fixtures for htmlrender tests."""
import os
import pytest
from htmlrender import Renderer, Options, ResponseRecorder

TESTDATA = os.path.join(os.path.dirname(__file__), 'testdata')


def data_path(*parts):
    return os.path.join(TESTDATA, *parts)


@pytest.fixture
def basic():
    """Renderer over the basic template tree."""
    return Renderer(Options(directory=data_path('basic')))


@pytest.fixture
def partials():
    """Renderer over templates that include and extend each other."""
    return Renderer(Options(directory=data_path('partials')))


@pytest.fixture
def recorder():
    return ResponseRecorder()
