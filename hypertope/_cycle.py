"""
Doubly linked cycle nodes stored in an arena.

Each node holds a payload value and two link slots. Nodes do not
necessarily have a notion of a "previous" and a "next" node, but when they
are linked with ``link_next`` slot 0 is the next node and slot 1 the
previous one. A node is referred to by its slot index in the arena, which
also serves as its id.
"""
from __future__ import annotations

from typing import Hashable, List, Optional


class MalformedBoundaryError(ValueError):
    """An edge set that does not describe a single closed cycle."""


class CycleArena:
    def __init__(self):
        self.values = []
        self.links: List[List[Optional[int]]] = []
        self.traversed: List[bool] = []
        self._by_value = {}

    def __len__(self):
        return len(self.values)

    def add(self, value) -> int:
        """Create a new unlinked node and return its id."""
        self.values.append(value)
        self.links.append([None, None])
        self.traversed.append(False)
        return len(self.values) - 1

    def node(self, value: Hashable) -> int:
        """Return the node holding ``value``, creating it on first use."""
        try:
            return self._by_value[value]
        except KeyError:
            self._by_value[value] = self.add(value)
            return self._by_value[value]

    def _attach(self, a: int, b: int) -> None:
        links = self.links[a]
        if links[0] is None:
            links[0] = b
        elif links[1] is None:
            links[1] = b
        else:
            raise MalformedBoundaryError(
                f"Vertex {self.values[a]!r} is linked to more than two "
                f"other vertices"
            )

    def link(self, a: int, b: int) -> None:
        """Link two nodes to each other, filling their first free slots."""
        self._attach(a, b)
        self._attach(b, a)

    def link_next(self, a: int, b: int) -> None:
        """Make ``b`` the next node of ``a``."""
        self.links[a][0] = b
        self.links[b][1] = a

    def cycle(self, start: int) -> list:
        """Walk all nodes reachable from ``start`` without backtracking.

        :param start: Node id to start from.
        :return: List of payload values in walk order.
        :raises MalformedBoundaryError: If a node has fewer than two links
                or the nodes do not form a single cycle.
        """
        for node, links in enumerate(self.links):
            if links[0] is None or links[1] is None:
                raise MalformedBoundaryError(
                    f"Vertex {self.values[node]!r} lies on an open boundary"
                )

        self.traversed = [False] * len(self.values)
        traversed = self.traversed
        cycle = [self.values[start]]
        traversed[start] = True
        node = self.links[start][0]
        while not traversed[node]:
            traversed[node] = True
            cycle.append(self.values[node])
            node0, node1 = self.links[node]
            node = node0 if traversed[node1] else node1

        if len(cycle) != len(self.values):
            raise MalformedBoundaryError(
                f"Edges split into more than one cycle ({len(cycle)} of "
                f"{len(self.values)} vertices reached)"
            )
        return cycle

    def ordered_cycle(self, start: int) -> list:
        """Walk the cycle following slot 0 only (see ``link_next``)."""
        self.traversed = [False] * len(self.values)
        traversed = self.traversed
        cycle = [self.values[start]]
        traversed[start] = True
        node = self.links[start][0]
        while node is not None and not traversed[node]:
            traversed[node] = True
            cycle.append(self.values[node])
            node = self.links[node][0]

        if node is None:
            raise MalformedBoundaryError("Ordered cycle is not closed")
        return cycle
