"""pytest fixture plugin.

Usage::

    # conftest.py
    pytest_plugins = ["webdisk._pytest_plugin"]

This makes the ``disk`` fixture automatically available::

    def test_something(disk):
        disk.create_file("/a.txt", "hello")
        assert disk.read_file("/a.txt") == "hello"
"""

import pytest

from ._disk import Disk


@pytest.fixture
def disk() -> Disk:
    """An empty, opened :class:`Disk`.

    Provides an independent instance per test (function scope).
    """
    return Disk().open()
