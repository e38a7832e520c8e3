"""Shared pytest configuration and fixtures for all tests."""

import pytest

from mdreflink.api.markdown.parse_markdown import parse_markdown
from mdreflink.api.reflink.AstInfoCollector import AstInfoCollector
from mdreflink.api.reflink.detect_conflicts import detect_conflicts

MARKERS = {
    "unit": "fast, isolated tests",
    "markdown": "Markdown parser/serializer",
    "reflink": "link transformation core",
    "config": "configuration models",
    "cli": "command line interface",
}


def pytest_configure(config):
    for name, description in MARKERS.items():
        config.addinivalue_line("markers", f"{name}: {description}")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        if "/unit/" in str(item.path):
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def collect():
    """Parse Markdown and run the collector and conflict detector on it.

    Returns a function ``text -> (tree, info, report)``.
    """

    def _collect(text: str):
        tree = parse_markdown(text)
        info = AstInfoCollector().collect(tree)
        return tree, info, detect_conflicts(info)

    return _collect


@pytest.fixture
def run_cmd():
    """Execute a cmd function and return the result with progress_callback executed."""

    def _run_cmd(cmd_func, *args, **kwargs):
        result = cmd_func(*args, **kwargs)
        list(result.progress_callback(result))
        return result

    return _run_cmd
