"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures required for testing multiple layers.
"""

from io import StringIO

import pytest

from src.services.path_service import KnightPathService


@pytest.fixture
def service() -> KnightPathService:
    """Fresh service per test. It's stateless, but this keeps tests independent if that ever changes."""
    return KnightPathService()


@pytest.fixture
def streams() -> tuple[StringIO, StringIO]:
    """In-memory stdout/stderr for the console shell"""
    return StringIO(), StringIO()
