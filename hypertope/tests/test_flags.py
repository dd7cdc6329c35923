"""Tests for flags, flag indices and the union-find simplifiers."""
import numpy
import pytest

from hypertope._builders import symmetric_polygon, wythoff
from hypertope._flags import (ElementChange, Flag, FlagClass, FlagIndex,
                              Simplifier, build_chains)
from hypertope._groups import CyclicGroup, DihedralGroup


def rotation_flag_classes(n):
    """Two flag classes of the n-gon under its rotation group.

    Flag (0, g) holds vertex g and edge g, flag (1, g) vertex g + 1 and
    edge g.
    """
    return [
        FlagClass([ElementChange.right(1, 0), ElementChange.right(1, n - 1)]),
        FlagClass([ElementChange.right(0, 0), ElementChange.right(0, 1)]),
    ]


@pytest.fixture
def pentagon_index():
    return symmetric_polygon(5).flag_index()


@pytest.fixture
def cube_index():
    return wythoff([4, 3]).flag_index()


class TestFlagIndex:
    """Tests for the dense flag enumeration."""

    def test_size(self, pentagon_index):
        assert len(pentagon_index) == 10

    def test_slot_roundtrip(self, pentagon_index):
        for slot in range(len(pentagon_index)):
            assert pentagon_index.slot(pentagon_index.flag(slot)) == slot

    def test_scan_order_is_domain_major(self):
        index = FlagIndex(CyclicGroup(3), rotation_flag_classes(3))
        flags = [(f.class_number, f.domain) for f in index]
        assert flags == [(0, 0), (1, 0), (0, 1), (1, 1), (0, 2), (1, 2)]

    def test_order_is_class_major(self):
        """Every class 0 flag precedes every class 1 flag."""
        index = FlagIndex(CyclicGroup(3), rotation_flag_classes(3))
        order = index.order
        assert max(order[0::2]) < min(order[1::2])

    def test_order_matches_compare(self, cube_index):
        flags = list(cube_index)
        for a in range(0, len(flags), 7):
            for b in range(0, len(flags), 5):
                expected = cube_index.compare(flags[a], flags[b])
                got = numpy.sign(cube_index.order[a] - cube_index.order[b])
                assert expected == got

    def test_domain_outside_group(self, pentagon_index):
        with pytest.raises(ValueError):
            pentagon_index.slot(Flag(0, (9, 0)))

    def test_invalid_class_number(self, pentagon_index):
        with pytest.raises(ValueError):
            pentagon_index.slot(Flag(3, (0, 0)))

    def test_move_table_is_involution(self, cube_index):
        """Reflection generators swap flags in pairs."""
        for g in range(3):
            table = cube_index.move_table(g)
            assert numpy.array_equal(table[table], numpy.arange(48))
            assert numpy.all(table != numpy.arange(48))


class TestSimplifier:
    """Tests for union-find resolution, extension and merging."""

    def test_identity(self, pentagon_index):
        s = Simplifier.identity(pentagon_index)
        assert s.cosets() == 10
        assert all(s.is_representative(i) for i in range(10))

    def test_union_keeps_order_least_root(self, pentagon_index):
        s = Simplifier.identity(pentagon_index)
        order = pentagon_index.order
        a, b = 3, 8
        root = s.union(a, b)
        assert order[root] == min(order[a], order[b])
        assert s.find(a) == s.find(b) == root

    @pytest.mark.parametrize("generator", [0, 1])
    def test_extend_halves_dihedral_flags(self, pentagon_index, generator):
        s = Simplifier.identity(pentagon_index).extend(generator)
        assert s.cosets() == 5

    def test_extend_does_not_mutate(self, pentagon_index):
        s = Simplifier.identity(pentagon_index)
        s.extend(0)
        assert numpy.array_equal(s.parent, numpy.arange(10))

    def test_merge_is_join(self, pentagon_index):
        identity = Simplifier.identity(pentagon_index)
        s = identity.extend(0).merge(identity.extend(1))
        assert s.cosets() == 1

    def test_merge_with_identity(self, pentagon_index):
        identity = Simplifier.identity(pentagon_index)
        s = identity.extend(1)
        assert numpy.array_equal(s.merge(identity).parent, s.parent)

    def test_merge_different_indices(self, pentagon_index):
        other = symmetric_polygon(5).flag_index()
        with pytest.raises(ValueError):
            Simplifier.identity(pentagon_index).merge(
                Simplifier.identity(other))

    def test_lookup(self, pentagon_index):
        s = Simplifier.identity(pentagon_index).extend(0)
        flag = pentagon_index.flag(7)
        rep = s.lookup(flag)
        assert pentagon_index.compare(rep, flag) <= 0
        assert pentagon_index.compare(s.lookup(rep), rep) == 0


class TestSimplifierProperties:
    """Idempotence and representative minimality over a whole chain."""

    @pytest.fixture
    def chains(self, cube_index):
        return build_chains(cube_index, 3)

    def test_chain_cosets(self, chains):
        """Cosets of the cube's parabolic subgroups <r0..ri-1>."""
        ascending, descending = chains
        assert [s.cosets() for s in ascending] == [48, 24, 6, 1]
        assert [s.cosets() for s in descending] == [48, 24, 8, 1]

    def test_idempotent(self, chains):
        for s in chains[0] + chains[1]:
            for slot in range(len(s.index)):
                assert s.find(s.find(slot)) == s.find(slot)
            assert numpy.array_equal(s.parent[s.parent], s.parent)

    def test_minimal(self, cube_index, chains):
        """Representatives are <= the flag and <= its generator images."""
        ascending, _ = chains
        order = cube_index.order
        for i, s in enumerate(ascending):
            for slot in range(len(cube_index)):
                rep = s.find(slot)
                assert order[rep] <= order[slot]
                for g in range(i):
                    image = cube_index.move_table(g)[slot]
                    assert order[rep] <= order[image]
                    assert s.find(image) == rep

    def test_representative_is_class_minimum(self, chains):
        ascending, _ = chains
        s = ascending[2]
        order = s.index.order
        for rep in s.representatives():
            members = numpy.flatnonzero(s.parent == rep)
            assert order[rep] == order[members].min()


class TestTwoFlagClasses:
    """Simplifiers over a group with two flag classes per domain."""

    def test_cosets(self):
        index = FlagIndex(CyclicGroup(6), rotation_flag_classes(6))
        identity = Simplifier.identity(index)
        assert identity.cosets() == 12
        assert identity.extend(0).cosets() == 6
        assert identity.extend(1).cosets() == 6
        assert identity.extend(0).extend(1).cosets() == 1

    def test_representatives_are_class_zero(self):
        index = FlagIndex(CyclicGroup(4), rotation_flag_classes(4))
        s = Simplifier.identity(index).extend(1)
        for rep in s.representatives():
            assert index.flag(rep).class_number == 0


class TestDihedralFlags:
    def test_move(self):
        group = DihedralGroup(4)
        change = ElementChange.right(0, group.reflection(0))
        assert change.apply(group, (1, 0)) == (1, 1)
