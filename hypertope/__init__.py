"""
Explicit and symmetry-based N-dimensional polytopes.

Usage::

    from hypertope import wythoff

    cube = wythoff([4, 3]).to_polytope_c()
    cube.element_counts()      # [8, 12, 6, 1]
    cube.face_to_vertices(0)   # vertex indices of the first square, in order
"""
from ._point import Point, distance, distance_sq
from ._cycle import CycleArena, MalformedBoundaryError
from ._flags import ElementChange, Flag, FlagClass, FlagIndex, Simplifier
from ._groups import (
    CyclicGroup,
    DihedralGroup,
    MatrixGroup,
    SymmetryGroup,
    coxeter_group,
    get_group,
)
from ._polytope import (
    EPSILON,
    InvalidElementError,
    PolytopeB,
    PolytopeC,
    PolytopeS,
    PolytopeType,
)
from ._builders import (
    dyad,
    nullitope,
    point,
    regular_polygon,
    symmetric_polygon,
    wythoff,
)
from ._off import save_off, to_off

__version__ = "0.1.0"

__all__ = [
    "Point",
    "distance",
    "distance_sq",
    "CycleArena",
    "MalformedBoundaryError",
    "ElementChange",
    "Flag",
    "FlagClass",
    "FlagIndex",
    "Simplifier",
    "SymmetryGroup",
    "MatrixGroup",
    "CyclicGroup",
    "DihedralGroup",
    "coxeter_group",
    "get_group",
    "EPSILON",
    "InvalidElementError",
    "PolytopeB",
    "PolytopeC",
    "PolytopeS",
    "PolytopeType",
    "nullitope",
    "point",
    "dyad",
    "regular_polygon",
    "symmetric_polygon",
    "wythoff",
    "to_off",
    "save_off",
]
