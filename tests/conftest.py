"""Pytest configuration and shared fixtures for the tree2md test suite."""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

from tree2md.ast.nodes import Node
from tree2md.renderers.markdown import MarkdownRenderer

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")
    config.addinivalue_line("markers", "fuzzing: Property-based tests")


@pytest.fixture
def render():
    """Render a document tree with default options.

    Returns
    -------
    callable
        Function mapping a document node to its Markdown string.

    """
    renderer = MarkdownRenderer()

    def _render(document: Node) -> str:
        return renderer.render_to_string(document)

    return _render


@pytest.fixture(autouse=True)
def _isolate_config_env(monkeypatch):
    """Keep a developer's TREE2MD_CONFIG from leaking into tests."""
    monkeypatch.delenv("TREE2MD_CONFIG", raising=False)
