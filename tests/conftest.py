"""Pytest fixtures for all tests."""

import random

import pytest
from httpx import AsyncClient, ASGITransport

from api.app import create_app
from config import Config, GeneratorConfig, LoggingConfig
from internal.logging import AsyncFileLogger
from service.minter import IdMinter
from sortid.generator import Generator


class FixedClock:
    """Clock returning a settable epoch millisecond value."""

    def __init__(self, millis):
        self.millis = millis

    def __call__(self):
        return self.millis

    def advance(self, millis):
        self.millis += millis


@pytest.fixture
def clock():
    """Clock pinned to 2024-01-01T00:00:00Z."""
    return FixedClock(1_704_067_200_000)


@pytest.fixture
def rng():
    """Seeded random source."""
    return random.Random(1234)


@pytest.fixture
def generator():
    """Default generator: base36, 4-char suffix, seconds."""
    return Generator()


@pytest.fixture
def gen_config():
    """Test generator config."""
    return GeneratorConfig(prefix="t_", base=62, length=6, precision="ms")


@pytest.fixture
def audit(tmp_path):
    """Audit logger writing under tmp_path."""
    return AsyncFileLogger(file_path=str(tmp_path / "audit.log"), queue_size=10)


@pytest.fixture
def minter(gen_config, audit):
    """Minter with a test config and audit trail."""
    return IdMinter(config=gen_config, audit=audit)


@pytest.fixture
def app(tmp_path, gen_config):
    """Create test FastAPI app."""
    config = Config(
        generator=gen_config,
        logging=LoggingConfig(file=str(tmp_path / "sortid.log"), crash_file=str(tmp_path / "crash.log")),
    )
    return create_app(config)


@pytest.fixture
async def client(app):
    """Create async test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
