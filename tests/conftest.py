"""
Pytest configuration and shared fixtures.

This module provides central pytest configuration, custom markers,
and shared fixtures for the routecli test suite.
"""

import os
import shutil
import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest

from routecli.help import HelpRenderer
from routecli.router import Dispatcher, Router
from routecli.ui import BufferedOutput, reset_console
from tests.helpers.commands import build_domain_router

# =============================================================================
# Plugin Registration
# =============================================================================

pytest_plugins = [
    "tests.fixtures.logging",
]


# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, isolated, no external dependencies)"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests (several components together)"
    )
    config.addinivalue_line("markers", "property: Property-based tests (hypothesis)")
    config.addinivalue_line(
        "markers", "e2e: End-to-end tests (full application runs)"
    )


def pytest_collection_modifyitems(config, items):
    """Add the 'unit' marker to tests without another category marker."""
    for item in items:
        if not any(
            mark.name in ["integration", "e2e"] for mark in item.iter_markers()
        ):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Shared Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def clean_routecli_env() -> Generator[None, None, None]:
    """Hide ROUTECLI_* and color variables from the environment during a test."""
    names = ("NO_COLOR", "FORCE_COLOR")
    saved = {
        k: v for k, v in os.environ.items() if k.startswith("ROUTECLI_") or k in names
    }
    for key in saved:
        del os.environ[key]
    reset_console()
    yield
    for key in [k for k in os.environ if k.startswith("ROUTECLI_") or k in names]:
        del os.environ[key]
    os.environ.update(saved)
    reset_console()


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """
    Provide a temporary directory that is cleaned up after the test.

    Yields:
        Path: Temporary directory path
    """
    temp_path = Path(tempfile.mkdtemp(prefix="routecli-test-"))
    try:
        yield temp_path
    finally:
        shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def router() -> Router:
    """Router with the domain manager commands and categories registered."""
    return build_domain_router()


@pytest.fixture
def out() -> BufferedOutput:
    return BufferedOutput()


@pytest.fixture
def err() -> BufferedOutput:
    return BufferedOutput()


@pytest.fixture
def dispatcher(router: Router, out: BufferedOutput, err: BufferedOutput) -> Dispatcher:
    """Dispatcher over the domain router writing into memory buffers."""
    renderer = HelpRenderer(router.app_name, width=80, color=False)
    return Dispatcher(router, renderer=renderer, out=out, err=err)
