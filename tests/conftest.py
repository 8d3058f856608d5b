"""Test configuration."""

import os
from collections.abc import Generator
from pathlib import Path

import pytest
from pytest import Config

from app.core.logging import configure_logging

# Load .env.test for tests when present
try:
    from dotenv import load_dotenv

    env_test_file = Path(__file__).parent.parent / ".env.test"
    if env_test_file.exists():
        load_dotenv(env_test_file, override=True)
except ImportError:
    # dotenv not available, skip loading
    pass

fixture = pytest.fixture

pytest_plugins: list[str] = [
    "tests.fixtures.upstream",
    "tests.fixtures.api",
]


@fixture(scope="session")
def project_root() -> Path:
    """Get the project root directory."""
    return Path(__file__).parent.parent


@fixture(scope="session", autouse=True)
def testing_environment() -> Generator[None, None, None]:
    """Flag the process as running under tests."""
    os.environ["TESTING"] = "true"
    yield


def pytest_configure(config: Config) -> None:
    """Configure pytest.

    Args:
        config: Pytest configuration object
    """
    configure_logging(testing=True)
    config.addinivalue_line("markers", "integration: mark test as an integration test")
