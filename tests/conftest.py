import pytest

from notifications.core.sinks import BufferSink
from notifications.registry import create_default_registry, reset_registry


@pytest.fixture
def sink():
    return BufferSink()


@pytest.fixture
def registry(sink):
    return create_default_registry(sink=sink)


@pytest.fixture(autouse=True)
def _fresh_process_registry():
    reset_registry()
    yield
    reset_registry()
