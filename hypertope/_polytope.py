"""
Explicit and symmetry-based polytopes.

``PolytopeC`` stores a polytope as its element list: level 0 holds the
vertices as ``Point`` objects and level d > 0 holds every d-element as the
list of indices of its facets in level d - 1. This mirrors the OFF file
format closely.

``PolytopeS`` stores a polytope through its symmetry group, the flag classes
of a single fundamental domain and one seed vertex per flag class. The
explicit form is recovered with ``PolytopeS.to_polytope_c``.
"""
from __future__ import annotations

import enum
import logging
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

import numpy as np

from hypertope._cycle import CycleArena, MalformedBoundaryError
from hypertope._flags import (Flag, FlagClass, FlagIndex, Simplifier,
                              build_chains, compare_flags, move_flag)
from hypertope._point import Point, distance, distance_sq

# Tolerance of the circumcenter computation
EPSILON = 1e-9


class InvalidElementError(IndexError):
    """Reference to an element that does not exist."""


class PolytopeType(enum.Enum):
    C = 0
    S = 1


class PolytopeB(ABC):
    """Common interface of every polytope representation."""

    #: The rank of the polytope
    dimensions: int
    #: The number of coordinates of the space the polytope lives in
    space_dimensions: int
    type: PolytopeType

    @abstractmethod
    def to_polytope_c(self) -> PolytopeC:
        raise NotImplementedError("This method is only implemented with an "
                                  "associated child of the base class.")

    @abstractmethod
    def scale(self, r: float) -> PolytopeB:
        raise NotImplementedError("This method is only implemented with an "
                                  "associated child of the base class.")

    @abstractmethod
    def move(self, P: Point, mult: float = 1.0) -> PolytopeB:
        raise NotImplementedError("This method is only implemented with an "
                                  "associated child of the base class.")

    @abstractmethod
    def gravicenter(self) -> Point:
        raise NotImplementedError("This method is only implemented with an "
                                  "associated child of the base class.")

    @abstractmethod
    def circumcenter(self) -> Optional[Point]:
        raise NotImplementedError("This method is only implemented with an "
                                  "associated child of the base class.")

    @abstractmethod
    def circumradius(self) -> Optional[float]:
        raise NotImplementedError("This method is only implemented with an "
                                  "associated child of the base class.")


class PolytopeC(PolytopeB):
    type = PolytopeType.C

    def __init__(self, element_list: list):
        """
        :param element_list: list, ``[vertices, edges, faces, ...]``. The
                vertices may be Points or coordinate sequences; every
                higher element is a sequence of indices into the previous
                level. The empty list is the nullitope.
        :raises InvalidElementError: If an element references an index that
                does not exist in the previous level.
        """
        if element_list:
            vertices = [v if isinstance(v, Point) else Point(v)
                        for v in element_list[0]]
            element_list = [vertices] + [[list(el) for el in level]
                                         for level in element_list[1:]]
        self.element_list = element_list
        self.dimensions = len(element_list) - 1

        if element_list and element_list[0]:
            self.space_dimensions = element_list[0][0].dimensions()
        else:
            self.space_dimensions = -1

        self._check_incidences()

    def __repr__(self):
        return f"PolytopeC(counts={self.element_counts()})"

    def _check_incidences(self) -> None:
        for d in range(1, len(self.element_list)):
            n_below = len(self.element_list[d - 1])
            for i, el in enumerate(self.element_list[d]):
                for j in el:
                    if not 0 <= j < n_below:
                        raise InvalidElementError(
                            f"Element {i} of rank {d} references element "
                            f"{j} of rank {d - 1}, which does not exist "
                            f"({n_below} elements)"
                        )

    @property
    def vertices(self) -> List[Point]:
        return self.element_list[0] if self.element_list else []

    def element_counts(self) -> List[int]:
        return [len(level) for level in self.element_list]

    def to_polytope_c(self) -> PolytopeC:
        return self

    def scale(self, r: float) -> PolytopeC:
        """Scale every vertex about the origin, in place."""
        for v in self.vertices:
            v.scale(r)
        return self

    def move(self, P: Point, mult: float = 1.0) -> PolytopeC:
        """Translate every vertex by ``mult * P``, in place."""
        Q = P.copy().scale(mult)
        for v in self.vertices:
            v.translate(Q)
        return self

    def recenter(self) -> PolytopeC:
        """Place the gravicenter at the origin."""
        return self.move(self.gravicenter(), -1)

    def gravicenter(self) -> Point:
        """Centroid of the vertices (the zero-dimensional point if empty)."""
        if not self.vertices:
            return Point(0)
        return Point(np.mean([v.coordinates for v in self.vertices], axis=0))

    def circumcenter(self, epsilon: float = EPSILON) -> Optional[Point]:
        """The point in the affine span of the vertices equidistant from all
        of them.

        Points are added one at a time while an orthogonal basis of their
        span (relative to the first vertex) and the circumcenter ``O`` of
        the points added so far are kept up to date.

        :param epsilon: Tolerance for span membership and equidistance.
        :return: The circumcenter, or None if it does not exist.
        """
        vertices = self.vertices
        if not vertices:
            return None

        P = vertices[0]
        vectors: List[Point] = []
        O = Point(P.dimensions())

        for vertex in vertices[1:]:
            Q = vertex.subtract(P)

            # Component of Q orthogonal to the span so far
            v = Q
            for w in vectors:
                v = v.subtract(Q.project(w))

            if v.magnitude() > epsilon:
                vectors.append(v)
                k = (distance_sq(O, Q) - O.sq_magnitude()) / (2 * Q.dot(v))
                O = O.add(v.copy().scale(k))
            elif abs(O.magnitude() - distance(O, Q)) > epsilon:
                return None

        return O.add(P)

    def circumradius(self, epsilon: float = EPSILON) -> Optional[float]:
        """Distance from the circumcenter to the vertices.

        :return: 0 for the nullitope, None if there is no circumcenter.
        """
        if not self.vertices:
            return 0.0
        center = self.circumcenter(epsilon)
        if center is None:
            return None
        return distance(center, self.vertices[0])

    def set_space_dimensions(self, dim: int) -> None:
        """Pad every vertex with zeros or drop trailing coordinates."""
        for v in self.vertices:
            v.resize(dim)
        self.space_dimensions = dim

    def face_to_vertices(self, i: int) -> List[int]:
        """Indices of the vertices of the i-th 2-face, in cyclic order.

        :param i: Index of the face in ``element_list[2]``.
        :raises InvalidElementError: If there is no such face.
        :raises MalformedBoundaryError: If the face's edges do not close into
                a single cycle.
        """
        if len(self.element_list) < 3 or not 0 <= i < len(self.element_list[2]):
            raise InvalidElementError(
                f"The polytope does not have a 2-face with index {i}"
            )

        face = self.element_list[2][i]
        if not face:
            raise MalformedBoundaryError(f"Face {i} has no edges")

        arena = CycleArena()
        for j in face:
            edge = self.element_list[1][j]
            if len(edge) != 2:
                raise MalformedBoundaryError(
                    f"Edge {j} of face {i} has {len(edge)} vertices"
                )
            arena.link(arena.node(edge[0]), arena.node(edge[1]))

        first = self.element_list[1][face[0]][0]
        return arena.cycle(arena.node(first))


class PolytopeS(PolytopeB):
    type = PolytopeType.S

    def __init__(self, symmetries, flag_classes: Sequence[FlagClass],
                 vertices: Sequence, dimensions: int):
        """
        A polytope described by a symmetry group acting on one fundamental
        domain.

        :param symmetries: SymmetryGroup, bundling the abstract group and
                its action on vertices (``symmetries.matrix``).
        :param flag_classes: list of FlagClass, the interactions between the
                flags of a single domain under the element-change operations.
        :param vertices: One seed vertex per flag class; the vertex of the
                flag ``(j, g)`` is ``g`` applied to ``vertices[j]``.
        :param dimensions: int, the rank of the polytope (the number of
                element-change generators).
        """
        self.symmetries = symmetries
        self.flag_classes = list(flag_classes)
        self.vertices = [v if isinstance(v, Point) else Point(v)
                         for v in vertices]
        self.dimensions = dimensions

        if len(self.vertices) != len(self.flag_classes):
            raise ValueError(
                f"Expected one seed vertex per flag class, got "
                f"{len(self.vertices)} vertices for "
                f"{len(self.flag_classes)} classes"
            )
        for j, fc in enumerate(self.flag_classes):
            if len(fc.element_changes) != dimensions:
                raise ValueError(
                    f"Flag class {j} has {len(fc.element_changes)} element "
                    f"changes, expected {dimensions}"
                )
            for change in fc.element_changes:
                if not 0 <= change.new_class_number < len(self.flag_classes):
                    raise ValueError(
                        f"Flag class {j} moves to nonexistent class "
                        f"{change.new_class_number}"
                    )

        self.space_dimensions = (self.vertices[0].dimensions()
                                 if self.vertices else -1)

    def __repr__(self):
        return (f"PolytopeS(rank={self.dimensions}, "
                f"group={getattr(self.symmetries, 'name', '?')}, "
                f"classes={len(self.flag_classes)})")

    def scale(self, r: float) -> PolytopeS:
        for v in self.vertices:
            v.scale(r)
        return self

    def move(self, P: Point, mult: float = 1.0) -> PolytopeS:
        raise NotImplementedError("PolytopeS.move is not implemented; "
                                  "convert with to_polytope_c() first")

    def gravicenter(self) -> Point:
        raise NotImplementedError("PolytopeS.gravicenter is not implemented; "
                                  "convert with to_polytope_c() first")

    def circumcenter(self) -> Optional[Point]:
        raise NotImplementedError("PolytopeS.circumcenter is not "
                                  "implemented; convert with to_polytope_c() "
                                  "first")

    def circumradius(self) -> Optional[float]:
        raise NotImplementedError("PolytopeS.circumradius is not "
                                  "implemented; convert with to_polytope_c() "
                                  "first")

    def flag_index(self) -> FlagIndex:
        return FlagIndex(self.symmetries, self.flag_classes)

    def move_flag(self, flag: Flag, generator: int) -> Flag:
        """Apply an element-change operation to a flag.

        :param flag: The flag to transform.
        :param generator: Index of the element that is changed.
        """
        return move_flag(self.symmetries, self.flag_classes, flag, generator)

    def compare_flags(self, flag1: Flag, flag2: Flag) -> int:
        return compare_flags(self.symmetries, flag1, flag2)

    def equal_flags(self, flag1: Flag, flag2: Flag) -> bool:
        return self.compare_flags(flag1, flag2) == 0

    @staticmethod
    def simplifier_cosets(simplifier: Simplifier) -> int:
        """Number of classes of a simplifier."""
        return simplifier.cosets()

    def simplifiers(self, index: Optional[FlagIndex] = None):
        """Element and intersection simplifiers of every rank.

        ``element[d]`` identifies flags sharing their d-element and
        ``intersection[d - 1]`` flags sharing both their (d-1)- and
        d-element.

        :return: ``(element, intersection)`` lists of Simplifiers.
        """
        if index is None:
            index = self.flag_index()
        n = self.dimensions
        ascending, descending = build_chains(index, n)

        element = []
        for i in range(n):
            element.append(ascending[i].merge(descending[n - (i + 1)]))
            logging.debug(f"Element simplifier {i}: "
                          f"{element[-1].cosets()} cosets")
        element.append(ascending[n])

        intersection = []
        for i in range(n - 1):
            intersection.append(ascending[i].merge(descending[n - (i + 2)]))
            logging.debug(f"Intersection simplifier {i}: "
                          f"{intersection[-1].cosets()} cosets")
        if n > 0:
            intersection.append(ascending[n - 1])

        return element, intersection

    def to_polytope_c(self) -> PolytopeC:
        """Enumerate every element of the polytope and its incidences."""
        index = self.flag_index()
        element, intersection = self.simplifiers(index)
        group = self.symmetries

        # Vertices are the representatives of the rank 0 simplifier
        vertices = []
        for slot in element[0].representatives():
            flag = index.flag(slot)
            vertices.append(self.vertices[flag.class_number].apply_matrix(
                group.matrix(flag.domain)))

        # Dense ids of the representatives of every rank, in scan order
        locations = []
        for simplifier in element:
            reps = simplifier.representatives()
            ids = np.full(index.size, -1, dtype=np.intp)
            ids[reps] = np.arange(len(reps))
            locations.append(ids)

        element_list = [vertices]
        for d in range(1, self.dimensions + 1):
            n_elements = element[d].cosets()
            # dicts keep the first-encounter order of the facet ids
            elements = [{} for _ in range(n_elements)]
            below, above = element[d - 1].parent, element[d].parent

            for slot in intersection[d - 1].representatives():
                facet_id = locations[d - 1][below[slot]]
                element_id = locations[d][above[slot]]
                elements[element_id][int(facet_id)] = None

            element_list.append([list(el) for el in elements])

        polytope = PolytopeC(element_list)
        logging.info(f"Converted rank {self.dimensions} polytope over "
                     f"{len(index.domains)} domains and {index.n_classes} "
                     f"flag classes: element counts "
                     f"{polytope.element_counts()}")
        return polytope
