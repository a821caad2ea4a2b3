import pytest

from postlisp.types.environment import Environment
from postlisp.interpreter import Interpreter


@pytest.fixture
def env():
    """Fresh environment with the baseline catalog installed."""
    return Environment()


@pytest.fixture
def interp():
    """Fresh evaluation session."""
    return Interpreter()
