"""
Flags, flag classes and simplifiers.

A flag is a pair ``(class_number, domain)`` where ``domain`` is an element of
the symmetry group. A flag class records, per generator ("change vertex",
"change edge", ...), which class and domain a flag of that class moves to.

A simplifier maps every flag to a canonical representative of the orbit
generated by some subset of the generators. Simplifiers are union-find
structures over a ``FlagIndex``: every flag of ``domains x classes`` gets a
dense integer slot and the simplifier stores one parent slot per flag. The
representative of a class is always its least flag in the flag order
(class number first, then the group's comparator).
"""
from __future__ import annotations

import functools
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, List, Sequence

import numpy as np


class Flag:
    """Combinatorial handle: a flag class number and a group element."""

    __slots__ = ("class_number", "domain")

    def __init__(self, class_number: int, domain: Any):
        self.class_number = class_number
        self.domain = domain

    def __repr__(self):
        return f"Flag({self.class_number}, {self.domain!r})"


@dataclass
class ElementChange:
    """How one generator transforms a flag of some class.

    :param new_class_number: Class number of the transformed flag.
    :param apply: ``apply(group, domain) -> domain`` of the transformed flag.
    """
    new_class_number: int
    apply: Callable[[Any, Any], Any]

    @classmethod
    def right(cls, new_class_number: int, element: Any) -> ElementChange:
        """Element change multiplying the domain on the right by ``element``."""
        return cls(new_class_number,
                   lambda group, domain: group.multiply(domain, element))


@dataclass
class FlagClass:
    element_changes: List[ElementChange] = field(default_factory=list)


def move_flag(group, flag_classes: Sequence[FlagClass], flag: Flag,
              generator: int) -> Flag:
    """Apply the element change of ``generator`` to ``flag``."""
    change = flag_classes[flag.class_number].element_changes[generator]
    return Flag(change.new_class_number, change.apply(group, flag.domain))


def compare_flags(group, flag1: Flag, flag2: Flag) -> int:
    """Order flags by class number, then by domain."""
    if flag1.class_number != flag2.class_number:
        return -1 if flag1.class_number < flag2.class_number else 1
    return group.compare(flag1.domain, flag2.domain)


class FlagIndex:
    """Dense enumeration of all flags of a group and a list of flag classes.

    The flag in slot ``i * n_classes + j`` has class ``j`` and the ``i``-th
    domain of ``group.enumerate_elements()``, so scanning the slots in
    increasing order scans domains in enumeration order and classes within
    each domain.
    """

    def __init__(self, group, flag_classes: Sequence[FlagClass]):
        self.group = group
        self.flag_classes = list(flag_classes)
        self.domains = list(group.enumerate_elements())
        self.n_classes = len(self.flag_classes)
        self.size = len(self.domains) * self.n_classes
        self._domain_index = {}
        for i, d in enumerate(self.domains):
            self._domain_index[group.key(d)] = i

        # Position of every flag in the flag order
        by_domain = sorted(
            range(len(self.domains)),
            key=functools.cmp_to_key(
                lambda i, j: group.compare(self.domains[i], self.domains[j])
            ),
        )
        domain_rank = np.empty(len(self.domains), dtype=np.intp)
        domain_rank[by_domain] = np.arange(len(self.domains))
        classes = np.tile(np.arange(self.n_classes), len(self.domains))
        self.order = (classes * len(self.domains)
                      + np.repeat(domain_rank, self.n_classes))

        self._move_tables = {}

    def __len__(self):
        return self.size

    def slot(self, flag: Flag) -> int:
        try:
            i = self._domain_index[self.group.key(flag.domain)]
        except KeyError:
            raise ValueError(
                f"{flag!r} has a domain outside the enumerated group"
            )
        if not 0 <= flag.class_number < self.n_classes:
            raise ValueError(f"{flag!r} has an invalid class number")
        return i * self.n_classes + flag.class_number

    def flag(self, slot: int) -> Flag:
        i, j = divmod(int(slot), self.n_classes)
        return Flag(j, self.domains[i])

    def __iter__(self):
        for slot in range(self.size):
            yield self.flag(slot)

    def compare(self, flag1: Flag, flag2: Flag) -> int:
        return compare_flags(self.group, flag1, flag2)

    def move(self, flag: Flag, generator: int) -> Flag:
        """Apply the element change of ``generator`` to ``flag``."""
        return move_flag(self.group, self.flag_classes, flag, generator)

    def move_table(self, generator: int) -> np.ndarray:
        """Slot of every flag after applying ``generator``, built once."""
        try:
            return self._move_tables[generator]
        except KeyError:
            table = np.empty(self.size, dtype=np.intp)
            for slot in range(self.size):
                table[slot] = self.slot(self.move(self.flag(slot), generator))
            self._move_tables[generator] = table
            return table


class Simplifier:
    """Union-find quotient map over the flags of a ``FlagIndex``."""

    def __init__(self, index: FlagIndex, parent: np.ndarray):
        self.index = index
        self.parent = parent

    @classmethod
    def identity(cls, index: FlagIndex) -> Simplifier:
        """Every flag is its own representative."""
        return cls(index, np.arange(index.size, dtype=np.intp))

    def copy(self) -> Simplifier:
        return Simplifier(self.index, self.parent.copy())

    def find(self, slot: int) -> int:
        """Representative slot of ``slot``, halving the path on the way."""
        parent = self.parent
        while parent[slot] != slot:
            parent[slot] = parent[parent[slot]]
            slot = parent[slot]
        return slot

    def union(self, a: int, b: int) -> int:
        """Join the classes of two slots; the order-least root survives."""
        ra = self.find(a)
        rb = self.find(b)
        if ra == rb:
            return ra
        order = self.index.order
        if order[ra] < order[rb]:
            self.parent[rb] = ra
            return ra
        self.parent[ra] = rb
        return rb

    def compress(self) -> Simplifier:
        """Point every slot directly at its representative."""
        parent = self.parent
        while True:
            grand = parent[parent]
            if np.array_equal(grand, parent):
                break
            parent = grand
        self.parent = parent
        return self

    def lookup(self, flag: Flag) -> Flag:
        return self.index.flag(self.find(self.index.slot(flag)))

    def is_representative(self, slot: int) -> bool:
        return self.parent[slot] == slot

    def representatives(self) -> np.ndarray:
        """Representative slots, in scan order."""
        return np.flatnonzero(self.parent == np.arange(self.index.size))

    def cosets(self) -> int:
        return len(self.representatives())

    def extend(self, generator: int) -> Simplifier:
        """New simplifier whose classes are also closed under ``generator``.

        Every flag is joined with its image under the generator; this
        simplifier is left untouched.
        """
        new = self.copy()
        table = self.index.move_table(generator)
        for slot in range(self.index.size):
            new.union(slot, table[slot])
        return new.compress()

    def merge(self, other: Simplifier) -> Simplifier:
        """New simplifier whose classes are the join of both simplifiers'."""
        if other.index is not self.index:
            raise ValueError("Cannot merge simplifiers over different flags")
        new = self.copy()
        for slot in range(self.index.size):
            new.union(slot, other.find(slot))
        return new.compress()


def build_chains(index: FlagIndex, rank: int):
    """Ascending and descending simplifier chains of a rank-``rank`` flag
    system.

    ``ascending[i]`` is generated by generators ``0 .. i-1`` and
    ``descending[i]`` by generators ``rank-1`` down to ``rank-i``.
    """
    identity = Simplifier.identity(index)

    ascending = [identity]
    for i in range(rank):
        ascending.append(ascending[-1].extend(i))
        logging.debug(f"Ascending simplifier {i + 1}: "
                      f"{ascending[-1].cosets()} cosets")

    descending = [identity]
    for i in range(rank):
        descending.append(descending[-1].extend(rank - (i + 1)))
        logging.debug(f"Descending simplifier {i + 1}: "
                      f"{descending[-1].cosets()} cosets")

    return ascending, descending
