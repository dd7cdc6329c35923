"""
Regular polytopes from their symmetry groups.

Builds every regular polytope with a linear Schläfli symbol up to rank 4
through Wythoff's construction and prints its element counts, circumradius
and edge length.
"""
import logging

from hypertope import distance, wythoff

logging.basicConfig(level=logging.INFO)

SYMBOLS = {
    "pentagon": [5],
    "tetrahedron": [3, 3],
    "cube": [4, 3],
    "octahedron": [3, 4],
    "dodecahedron": [5, 3],
    "icosahedron": [3, 5],
    "5-cell": [3, 3, 3],
    "tesseract": [4, 3, 3],
    "16-cell": [3, 3, 4],
    "24-cell": [3, 4, 3],
}

for name, schlafli in SYMBOLS.items():
    S = wythoff(schlafli)
    P = S.to_polytope_c()
    a, b = P.element_list[1][0]
    print(f"{name:>13} {schlafli}: counts {P.element_counts()}, "
          f"circumradius {P.circumradius():.6f}, "
          f"edge {distance(P.vertices[a], P.vertices[b]):.6f}")
