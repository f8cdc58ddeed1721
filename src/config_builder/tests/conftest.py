# ABOUTME: pytest configuration and shared fixtures for config builder tests
# ABOUTME: Configures timeouts and provides configuration trees and isolated environments

from pathlib import Path
from typing import Any, Callable, Dict

import pytest

from config_builder.config.logging import configure_for_testing
from config_builder.implementations.memory.config import InMemoryEnvironmentProvider
from tests.fixtures.config_tree import CONFIG_TREE, HOME, build_tree


def pytest_configure(config):
    """Configure pytest for config builder tests."""
    config.addinivalue_line("markers", "unit: Unit tests with 20-second timeout")
    config.addinivalue_line("markers", "integration: Integration tests with 60-second timeout")
    config.addinivalue_line("markers", "config: Configuration assembly tests")
    configure_for_testing()


def pytest_collection_modifyitems(config, items):
    """Modify test items to add appropriate timeouts based on test type."""
    for item in items:
        # Respect an explicit timeout marker
        if item.get_closest_marker("timeout"):
            continue

        if item.get_closest_marker("unit"):
            item.add_marker(pytest.mark.timeout(20))
        elif item.get_closest_marker("integration"):
            item.add_marker(pytest.mark.timeout(60))


@pytest.fixture
def config_root(tmp_path) -> Path:
    """A configuration root with defaults, E1, E2, E_Nested and E_Rogue environments."""
    return build_tree(tmp_path / "config", CONFIG_TREE)


@pytest.fixture
def make_tree(tmp_path) -> Callable[[Dict[str, Any]], Path]:
    """Factory building an arbitrary configuration tree in a fresh directory."""
    counter = {"n": 0}

    def _make(tree: Dict[str, Any]) -> Path:
        counter["n"] += 1
        return build_tree(tmp_path / f"tree{counter['n']}", tree)

    return _make


@pytest.fixture
def environ() -> InMemoryEnvironmentProvider:
    """An isolated environment with HOME set."""
    return InMemoryEnvironmentProvider({"HOME": HOME})
