"""Shared fixtures for groupset tests."""

from __future__ import annotations

import datetime
import os
import sys

import pytest

from groupset import Group


@pytest.fixture(autouse=True)
def _add_examples_to_path():
    """Ensure examples/ is importable."""
    examples_dir = os.path.join(os.path.dirname(__file__), "..", "examples")
    examples_dir = os.path.abspath(examples_dir)
    if examples_dir not in sys.path:
        sys.path.insert(0, examples_dir)
    yield
    if examples_dir in sys.path:
        sys.path.remove(examples_dir)


def day(month: int, dom: int) -> datetime.date:
    return datetime.date(2020, month, dom)


@pytest.fixture
def festivals() -> Group[datetime.date]:
    """Jan-7, Mar-3, May-5, Jul-7, Sep-9."""
    return Group.of(day(1, 7), day(3, 3), day(5, 5), day(7, 7), day(9, 9))


@pytest.fixture
def holidays() -> Group[datetime.date]:
    """Jan-1, May-5, Oct-10."""
    return Group.of(day(1, 1), day(5, 5), day(10, 10))
