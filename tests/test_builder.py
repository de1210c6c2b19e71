"""Tests for GroupBuilder."""

from __future__ import annotations

from groupset import Group, GroupBuilder


class TestFactories:
    def test_of(self):
        assert GroupBuilder.of(1, 2, 2) == Group.of(1, 2)

    def test_of_nothing(self):
        assert GroupBuilder.of().is_empty()

    def test_from_iterable(self):
        assert GroupBuilder.from_iterable(range(3)) == Group.of(0, 1, 2)


class TestIncremental:
    def test_add_and_extend_chain(self):
        g = GroupBuilder().add(1).extend([2, 3, 3]).add(1).build()
        assert g == Group.of(1, 2, 3)

    def test_len_counts_unique(self):
        b = GroupBuilder().extend("aab")
        assert len(b) == 2

    def test_build_snapshots(self):
        b = GroupBuilder().add("x")
        first = b.build()
        b.add("y")
        assert first == Group.of("x")
        assert b.build() == Group.of("x", "y")

    def test_empty_build(self):
        assert GroupBuilder().build() == Group()
