"""
Concrete symmetry groups for symmetry-based polytopes.

Provides a unified interface for the finite groups a ``PolytopeS`` is built
over. Groups:

- ``MatrixGroup``: closure of a set of orthogonal matrices (always available)
- ``CyclicGroup``: rotations of the plane by multiples of 2*pi/n
- ``DihedralGroup``: rotations and reflections of the regular n-gon
- ``coxeter_group``: the reflection group of a linear Coxeter diagram

Usage::

    from hypertope._groups import get_group

    group = get_group("dihedral", n=5)
    group = get_group("coxeter", schlafli=[4, 3])
"""
from __future__ import annotations

import logging
from typing import Any, Hashable, Protocol, Sequence, runtime_checkable

import numpy as np


# ---------------------------------------------------------------------------
# Protocol (structural typing interface)
# ---------------------------------------------------------------------------
@runtime_checkable
class SymmetryGroup(Protocol):
    """Protocol for the finite groups acting on flags and vertices."""

    name: str

    def identity(self) -> Any:
        """The identity element."""
        ...

    def compare(self, a: Any, b: Any) -> int:
        """Strict total order on elements, returning -1, 0 or 1."""
        ...

    def enumerate_elements(self) -> list:
        """All elements, in a fixed deterministic order."""
        ...

    def multiply(self, a: Any, b: Any) -> Any:
        """The product ``a * b``."""
        ...

    def matrix(self, a: Any) -> np.ndarray:
        """The linear map through which ``a`` acts on vertices."""
        ...

    def key(self, a: Any) -> Hashable:
        """A hashable value identifying ``a`` (equal keys iff compare == 0)."""
        ...


def _sign(a, b) -> int:
    return int(a > b) - int(a < b)


def rotation_matrix(angle: float) -> np.ndarray:
    c, s = np.cos(angle), np.sin(angle)
    return np.array([[c, -s], [s, c]])


# ---------------------------------------------------------------------------
# Matrix groups
# ---------------------------------------------------------------------------
class MatrixGroup:
    """Group generated by a set of orthogonal matrices.

    Elements are numpy arrays. Two matrices are the same element when
    their entries snap to the same multiple of 10**-decimals, and the
    total order is the lexicographic order of the snapped entries.
    """

    name = "matrix"

    def __init__(
        self,
        generators: Sequence[np.ndarray],
        decimals: int = 8,
        max_order: int = 100000,
    ):
        """
        :param generators: Square matrices of a common shape.
        :param decimals: Entries are snapped to multiples of 10**-decimals
                to identify equal elements.
        :param max_order: Enumeration budget; exceeding it raises ValueError.
        """
        self.generators = [np.asarray(g, dtype=float) for g in generators]
        if not self.generators:
            raise ValueError("A matrix group needs at least one generator")
        self.dim = self.generators[0].shape[0]
        for g in self.generators:
            if g.shape != (self.dim, self.dim):
                raise ValueError(
                    f"Generator of shape {g.shape} does not match "
                    f"({self.dim}, {self.dim})"
                )
        self.decimals = decimals
        self.max_order = max_order
        self._elements = None

    def identity(self) -> np.ndarray:
        return np.eye(self.dim)

    def key(self, a: np.ndarray) -> tuple:
        # Entries snapped to a grid of spacing 10**-decimals, as Python ints
        scaled = np.asarray(a, dtype=float).ravel() * 10.0 ** self.decimals
        return tuple(np.rint(scaled).astype(np.int64).tolist())

    def compare(self, a: np.ndarray, b: np.ndarray) -> int:
        return _sign(self.key(a), self.key(b))

    def multiply(self, a: np.ndarray, b: np.ndarray) -> np.ndarray:
        return a @ b

    def matrix(self, a: np.ndarray) -> np.ndarray:
        return a

    def enumerate_elements(self) -> list:
        """Breadth-first closure from the identity under right
        multiplication by the generators."""
        if self._elements is not None:
            return self._elements

        elements = [self.identity()]
        seen = {self.key(elements[0])}
        i = 0
        while i < len(elements):
            for g in self.generators:
                candidate = elements[i] @ g
                k = self.key(candidate)
                if k not in seen:
                    seen.add(k)
                    elements.append(candidate)
                    if len(elements) > self.max_order:
                        raise ValueError(
                            f"Group order exceeds max_order={self.max_order}; "
                            f"the generators may not generate a finite group"
                        )
            i += 1

        logging.debug(f"Enumerated matrix group of order {len(elements)}")
        self._elements = elements
        return elements

    def order(self) -> int:
        return len(self.enumerate_elements())


class CyclicGroup:
    """Cyclic group of order n acting on the plane by rotations."""

    name = "cyclic"

    def __init__(self, n: int):
        if n < 1:
            raise ValueError(f"Cyclic group order must be positive, got {n}")
        self.n = n

    def identity(self) -> int:
        return 0

    def key(self, a: int) -> int:
        return a

    def compare(self, a: int, b: int) -> int:
        return _sign(a, b)

    def multiply(self, a: int, b: int) -> int:
        return (a + b) % self.n

    def matrix(self, a: int) -> np.ndarray:
        return rotation_matrix(2 * np.pi * a / self.n)

    def enumerate_elements(self) -> list:
        return list(range(self.n))

    def order(self) -> int:
        return self.n


class DihedralGroup:
    """Symmetry group of the regular n-gon.

    The element ``(k, s)`` is ``r^k f^s`` where ``r`` is the rotation by
    2*pi/n and ``f`` the reflection in the x-axis.
    """

    name = "dihedral"

    def __init__(self, n: int):
        if n < 1:
            raise ValueError(f"Dihedral group needs n >= 1, got {n}")
        self.n = n

    def identity(self) -> tuple:
        return (0, 0)

    def key(self, a: tuple) -> tuple:
        return a

    def compare(self, a: tuple, b: tuple) -> int:
        return _sign(a, b)

    def multiply(self, a: tuple, b: tuple) -> tuple:
        k1, s1 = a
        k2, s2 = b
        k = k1 - k2 if s1 else k1 + k2
        return (k % self.n, s1 ^ s2)

    def matrix(self, a: tuple) -> np.ndarray:
        k, s = a
        m = rotation_matrix(2 * np.pi * k / self.n)
        if s:
            m = m @ np.array([[1.0, 0.0], [0.0, -1.0]])
        return m

    def enumerate_elements(self) -> list:
        return [(k, s) for k in range(self.n) for s in (0, 1)]

    def reflection(self, k: int) -> tuple:
        """Reflection in the line at angle k*pi/n."""
        return (k % self.n, 1)

    def order(self) -> int:
        return 2 * self.n


# ---------------------------------------------------------------------------
# Coxeter groups
# ---------------------------------------------------------------------------
def coxeter_mirrors(schlafli: Sequence[int]) -> np.ndarray:
    """Unit normals of the mirrors of a linear Coxeter diagram.

    Mirror i and mirror i+1 meet at an angle pi/schlafli[i]; all other pairs
    are orthogonal. The normals are the rows of the Cholesky factor of the
    Gram matrix.

    :param schlafli: Linear Schläfli symbol, e.g. ``[4, 3]`` for the cube.
    :return: Array of shape (rank, rank), one normal per row.
    :raises ValueError: If the diagram does not describe a finite group.
    """
    rank = len(schlafli) + 1
    gram = np.eye(rank)
    for i, p in enumerate(schlafli):
        if p < 2:
            raise ValueError(f"Invalid Schläfli entry {p}")
        gram[i, i + 1] = gram[i + 1, i] = -np.cos(np.pi / p)

    try:
        return np.linalg.cholesky(gram)
    except np.linalg.LinAlgError:
        raise ValueError(
            f"Schläfli symbol {list(schlafli)} does not describe a finite "
            f"(spherical) reflection group"
        )


def reflection(normal: np.ndarray) -> np.ndarray:
    """Householder reflection in the hyperplane orthogonal to ``normal``."""
    normal = np.asarray(normal, dtype=float)
    normal = normal / np.linalg.norm(normal)
    return np.eye(len(normal)) - 2 * np.outer(normal, normal)


def coxeter_group(schlafli: Sequence[int], **kwargs: Any) -> MatrixGroup:
    """The reflection group of a linear Coxeter diagram as a MatrixGroup.

    ``group.generators[i]`` is the reflection in mirror i.
    """
    mirrors = coxeter_mirrors(schlafli)
    return MatrixGroup([reflection(n) for n in mirrors], **kwargs)


_GROUPS = {
    "matrix": MatrixGroup,
    "cyclic": CyclicGroup,
    "dihedral": DihedralGroup,
    "coxeter": coxeter_group,
}


def get_group(name: str, **kwargs: Any) -> SymmetryGroup:
    """Get a symmetry group by name.

    Parameters
    ----------
    name : str
        Group family: ``"matrix"``, ``"cyclic"``, ``"dihedral"`` or
        ``"coxeter"``.
    **kwargs
        Passed to the group constructor (e.g. ``n=5`` or
        ``schlafli=[4, 3]``).

    Returns
    -------
    SymmetryGroup
        An instance satisfying the :class:`SymmetryGroup` protocol.
    """
    if name not in _GROUPS:
        raise ValueError(
            f"Unknown group {name!r}. Available: {list(_GROUPS.keys())}"
        )
    return _GROUPS[name](**kwargs)
