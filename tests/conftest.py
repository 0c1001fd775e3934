"""Pytest configuration and shared fixtures for the html2plain test suite."""

import logging
import os
from pathlib import Path

import pytest
from bs4 import BeautifulSoup
from hypothesis import Phase, Verbosity, settings

from html2plain.options import RenderOptions

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=200, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=50)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")
    config.addinivalue_line("markers", "fuzzing: Property-based tests using Hypothesis")


@pytest.fixture
def soup():
    """Return a helper that parses an HTML string with the default tree builder."""

    def _parse(html: str) -> BeautifulSoup:
        return BeautifulSoup(html, "html.parser")

    return _parse


@pytest.fixture
def pretty_options() -> RenderOptions:
    """Options with ASCII table drawing enabled."""
    return RenderOptions(pretty_tables=True)


@pytest.fixture
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test from an empty working directory so no config file is discovered."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("HTML2PLAIN_CONFIG", raising=False)
    return tmp_path


@pytest.fixture(autouse=True)
def restore_package_logger():
    """Undo handler and level changes made by configure_logging during a test."""
    package_logger = logging.getLogger("html2plain")
    handlers = package_logger.handlers[:]
    level = package_logger.level
    yield
    for handler in package_logger.handlers:
        if handler not in handlers:
            handler.close()
    package_logger.handlers[:] = handlers
    package_logger.setLevel(level)
