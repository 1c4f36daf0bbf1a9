import pytest

from multibasekit.conf import settings


@pytest.fixture(autouse=True)
def _reset_settings():
    settings.reset()
    yield
    settings.reset()


@pytest.fixture
def sample_bins():
    hello_world = b"hello world"
    return [
        b"",
        b"\x00",
        b"\x00\x00",
        hello_world,
        b"\x00" + hello_world,
        b"\x00\x00" + hello_world,
        hello_world + b"\x00",
        bytes(range(1, 11)),
        b"Have you seen a six fingered man?",
        bytes(range(256)),
    ]
