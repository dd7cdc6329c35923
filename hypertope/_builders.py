"""
Ready-made polytopes.

Explicit (``PolytopeC``) builders for the trivial polytopes and the regular
polygons, and symmetry-based (``PolytopeS``) builders for the regular
polygons over a dihedral group and for every regular polytope with a linear
Schläfli symbol over its Coxeter group (Wythoff's construction with a single
flag class).
"""
from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from hypertope._flags import ElementChange, FlagClass
from hypertope._groups import (DihedralGroup, MatrixGroup,
                                coxeter_mirrors, reflection)
from hypertope._point import Point
from hypertope._polytope import PolytopeC, PolytopeS


def nullitope() -> PolytopeC:
    """The empty polytope, of rank -1."""
    return PolytopeC([])


def point() -> PolytopeC:
    """A single vertex in zero-dimensional space."""
    return PolytopeC([[Point(0)]])


def dyad(length: float = 1.0) -> PolytopeC:
    """A segment of the given length centred at the origin."""
    return PolytopeC([[Point([-length / 2]), Point([length / 2])], [[0, 1]]])


def regular_polygon(n: int, d: int = 1) -> PolytopeC:
    """The regular polygon {n/d} inscribed in the unit circle.

    :param n: Number of vertices, at least 2.
    :param d: Turning number; vertex k is joined to vertex k + d.
    :raises ValueError: If n < 2 or gcd(n, d) != 1 (a compound, not a
            polygon).
    """
    if n < 2:
        raise ValueError(f"A polygon needs at least 2 vertices, got {n}")
    if math.gcd(n, d) != 1:
        raise ValueError(f"{{{n}/{d}}} is a compound, not a polygon")

    angles = 2 * np.pi * np.arange(n) / n
    vertices = [Point([np.cos(a), np.sin(a)]) for a in angles]
    edges = [[k, (k + d) % n] for k in range(n)]
    return PolytopeC([vertices, edges, [list(range(n))]])


def symmetric_polygon(n: int) -> PolytopeS:
    """The regular n-gon as a symmetry-based polytope.

    The flags are the 2n elements of ``DihedralGroup(n)``. "Change vertex"
    reflects in the line at angle pi/n and "change edge" in the x-axis,
    on which the seed vertex (1, 0) lies.
    """
    group = DihedralGroup(n)
    flag_class = FlagClass([
        ElementChange.right(0, group.reflection(1)),
        ElementChange.right(0, group.reflection(0)),
    ])
    return PolytopeS(group, [flag_class], [Point([1.0, 0.0])], 2)


def wythoff(schlafli: Sequence[int], **kwargs) -> PolytopeS:
    """The regular polytope with a linear Schläfli symbol.

    Generator i is the reflection in mirror i of the Coxeter diagram; the
    seed vertex lies on every mirror except mirror 0 and has unit length,
    so the resulting polytope has circumradius 1.

    :param schlafli: e.g. ``[5]`` (pentagon), ``[4, 3]`` (cube),
            ``[3, 4, 3]`` (24-cell).
    :param kwargs: Passed to ``MatrixGroup`` (``decimals``, ``max_order``).
    """
    mirrors = coxeter_mirrors(schlafli)
    rank = len(mirrors)
    generators = [reflection(m) for m in mirrors]
    group = MatrixGroup(generators, **kwargs)

    target = np.zeros(rank)
    target[0] = 1.0
    seed = np.linalg.solve(mirrors, target)
    seed /= np.linalg.norm(seed)

    flag_class = FlagClass([ElementChange.right(0, g) for g in generators])
    return PolytopeS(group, [flag_class], [Point(seed)], rank)
