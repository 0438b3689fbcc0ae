import pytest

from connectfour.debug import debug, DebugLevel
from connectfour.game.board import Board


@pytest.fixture(autouse=True)
def quiet_logging():
    """Keep the shared logger at its default level between tests."""
    debug.configure(level=DebugLevel.WARNING, enabled=True, components=[])
    yield
    debug.configure(level=DebugLevel.WARNING, enabled=True, log_file="", components=[])


@pytest.fixture
def board():
    return Board()


@pytest.fixture
def output():
    return []
