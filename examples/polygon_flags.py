"""
Polygons from flag classes.

The same pentagon described two ways: with one flag class over the
dihedral group (10 flags, one per fundamental domain) and with two flag
classes over the rotation group (5 domains, 2 flags each). The simplifier
chains show how the flags collapse into vertices, edges and the face.
"""
import numpy as np

from hypertope import (CyclicGroup, ElementChange, FlagClass, Point,
                       PolytopeS, symmetric_polygon)

n = 5

# --- One flag class over D_5 ---
S = symmetric_polygon(n)
element, intersection = S.simplifiers()
print(f"D_{n}: {len(S.flag_index())} flags")
print(f"  element cosets:      {[s.cosets() for s in element]}")
print(f"  intersection cosets: {[s.cosets() for s in intersection]}")

# --- Two flag classes over C_5 ---
flag_classes = [
    FlagClass([ElementChange.right(1, 0), ElementChange.right(1, n - 1)]),
    FlagClass([ElementChange.right(0, 0), ElementChange.right(0, 1)]),
]
seeds = [Point([1.0, 0.0]),
         Point([np.cos(2 * np.pi / n), np.sin(2 * np.pi / n)])]
R = PolytopeS(CyclicGroup(n), flag_classes, seeds, 2)

P = R.to_polytope_c()
print(f"C_{n}: edges {P.element_list[1]}")
print(f"  boundary of the face: {P.face_to_vertices(0)}")
