import pytest

from typed_flags import FlagParser, FlagRegistry


@pytest.fixture
def registry():
    """A fresh, isolated registry for each test."""
    return FlagRegistry()


@pytest.fixture
def parser(registry):
    return FlagParser(registry)
