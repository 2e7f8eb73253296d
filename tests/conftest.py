from __future__ import annotations

import logging
import os
import tempfile
from collections.abc import Generator, Iterator
from pathlib import Path

import pytest

# Register fixture plugins from tests/fixtures/
pytest_plugins = [
    "tests.fixtures.hosts",
]


@pytest.fixture(autouse=True)
def configure_test_logging() -> Generator[None, None, None]:
    """Configure structlog for the test environment.

    Runs for every test so log output goes to stderr at WARNING level and
    does not mix with captured stdout.
    """
    from fluent_dialogs.logging import configure_logging

    configure_logging(level=logging.WARNING)
    yield


@pytest.fixture(autouse=True)
def reset_dialog_host() -> Generator[None, None, None]:
    """Make sure no test leaks an installed default host into the next."""
    from fluent_dialogs.host import reset_default_host

    reset_default_host()
    yield
    reset_default_host()


@pytest.fixture
def temp_dir() -> Iterator[Path]:
    """Create a temporary directory for test files.

    Also restores the working directory for tests that chdir into it.
    """
    original_cwd = os.getcwd()
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)
    os.chdir(original_cwd)


@pytest.fixture
def clean_env(temp_dir: Path) -> Generator[None, None, None]:
    """Remove FLUENT_DIALOGS_ variables and point HOME at a temp dir.

    Keeps a developer's own ~/.config/fluent-dialogs/config.yaml out of
    settings tests.
    """
    original_env = os.environ.copy()
    for key in list(os.environ.keys()):
        if key.startswith("FLUENT_DIALOGS_"):
            del os.environ[key]
    home = temp_dir / "home"
    home.mkdir()
    os.environ["HOME"] = str(home)
    yield
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def sample_settings_yaml() -> str:
    """Return sample fluent_dialogs.yaml content for testing."""
    return """
layout:
  anchor_min_width: 140

presentation:
  animation_duration: 0.5
  supports_preferred_action: false

verbosity: info
"""
