"""Pytest configuration and shared fixtures for the sitetoc test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings
from utils import build_docs_site

from sitetoc.pages import Page
from sitetoc.tree import Location, Tree

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)

# Load profile from environment or use default
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "fuzzing: Property-based tests")


@pytest.fixture
def docs_site() -> Tree[Page]:
    """Provide a small documentation site tree.

    Returns
    -------
    Tree[Page]
        Home page with a Guide (which has an Advanced sub-page) and an API page.

    """
    return build_docs_site()


@pytest.fixture
def home_location(docs_site) -> Location[Page]:
    """Provide a cursor on the site's home page."""
    return Location.of(docs_site)


@pytest.fixture
def guide_location(docs_site) -> Location[Page]:
    """Provide a cursor on the Guide page."""
    return Location.at(docs_site, [0])


@pytest.fixture
def advanced_location(docs_site) -> Location[Page]:
    """Provide a cursor on the Advanced page below the Guide."""
    return Location.at(docs_site, [0, 0])


@pytest.fixture
def api_location(docs_site) -> Location[Page]:
    """Provide a cursor on the API page."""
    return Location.at(docs_site, [1])
