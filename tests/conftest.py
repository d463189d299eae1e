"""Pytest configuration and fixtures for Chronospan tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so chronospan can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture
def new_year_2010():
    """Midnight on 2010-01-01, a common reference date."""
    from chronospan import DateTime

    return DateTime(2010, 1, 1)
