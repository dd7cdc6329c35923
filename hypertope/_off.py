"""
OFF (Object File Format) output for polytopes of any rank.

The element counts header lists vertices, faces, edges and then the higher
elements, as Stella and the other OFF readers expect. Faces are written as
cyclically ordered vertex lists; elements of rank 3 and above as lists of
the indices of their facets.
"""
from __future__ import annotations

import logging
import os
from typing import List, Union

from hypertope._polytope import PolytopeB

ELEMENT_NAMES = ["Vertices", "Edges", "Faces", "Cells", "Tera", "Peta",
                 "Exa", "Zetta", "Yotta"]


def element_name(d: int) -> str:
    if d < len(ELEMENT_NAMES):
        return ELEMENT_NAMES[d]
    return f"{d}-elements"


def _format_coordinate(c: float) -> str:
    return repr(float(c) + 0.0)


def to_off(polytope: PolytopeB, comments: bool = False) -> str:
    """Render a polytope as OFF text.

    :param polytope: Any polytope; it is converted with ``to_polytope_c``.
    :param comments: If True, add comment lines naming each element type.
    :return: The OFF file contents.
    :raises ValueError: For the nullitope, or if the polytope lives in a
            space of more dimensions than its rank.
    """
    P = polytope.to_polytope_c()
    if P.dimensions < 0:
        raise ValueError("The nullitope has no OFF representation")
    if P.space_dimensions > P.dimensions:
        raise ValueError("The OFF format does not support polytopes in "
                         "spaces with more dimensions than themselves.")

    counts = P.element_counts()
    rank = P.dimensions
    data: List[str] = []

    if rank == 0:
        data.append("0OFF\n")
        return "".join(data)
    elif rank == 1:
        data.append("1OFF\n")
        if comments:
            data.append(f"# {element_name(0)}\n")
        data.append(f"{counts[0]}\n")
    elif rank == 2:
        data.append("2OFF\n")
        if comments:
            data.append(f"# {element_name(0)}, Components\n")
        data.append(f"{counts[0]} {counts[2]}\n")
    else:
        data.append("OFF\n" if rank == 3 else f"{rank}OFF\n")
        if comments:
            names = [element_name(0), element_name(2), element_name(1)]
            names += [element_name(d) for d in range(3, rank)]
            data.append("# " + ", ".join(names) + "\n")
        header = [counts[0], counts[2], counts[1]] + counts[3:rank]
        data.append(" ".join(str(c) for c in header) + "\n")

    # Vertices, zero padded up to the rank
    if comments:
        data.append(f"\n# {element_name(0)}\n")
    for v in P.element_list[0]:
        coords = [_format_coordinate(v[j]) if j < len(v) else "0"
                  for j in range(rank)]
        data.append(" ".join(coords) + "\n")

    # Faces, or components of a polygon
    if rank >= 2:
        if comments:
            name = "Components" if rank == 2 else element_name(2)
            data.append(f"\n# {name}\n")
        for i in range(counts[2]):
            vertices = P.face_to_vertices(i)
            data.append(" ".join(str(x) for x in [len(vertices)] + vertices)
                        + "\n")

    for d in range(3, rank):
        if comments:
            data.append(f"\n# {element_name(d)}\n")
        for el in P.element_list[d]:
            data.append(" ".join(str(x) for x in [len(el)] + list(el)) + "\n")

    return "".join(data)


def save_off(polytope: PolytopeB, fn: Union[str, os.PathLike],
             comments: bool = False) -> None:
    """Write ``to_off(polytope)`` to the file ``fn``."""
    text = to_off(polytope, comments=comments)
    with open(fn, "w") as f:
        f.write(text)
    logging.info(f"Saved polytope to {fn}")
