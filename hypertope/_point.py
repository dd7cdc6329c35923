"""
Fixed-length real vectors used as polytope vertices.

A ``Point`` wraps a float numpy array. ``scale`` and ``translate`` mutate the
point in place and return it (so that a polytope can rescale its own
vertices); every other operation returns a new point or a scalar.
"""
from __future__ import annotations

from typing import Iterable, Union

import numpy as np


class Point:
    def __init__(self, coordinates: Union[int, Iterable[float]]):
        """
        :param coordinates: int, builds the zero vector of that dimension, or
                an iterable of coordinates which is copied.
        """
        if isinstance(coordinates, (int, np.integer)):
            self.coordinates = np.zeros(int(coordinates), dtype=float)
        else:
            self.coordinates = np.array(coordinates, dtype=float).ravel()

    def dimensions(self) -> int:
        return self.coordinates.shape[0]

    def __len__(self):
        return self.coordinates.shape[0]

    def __getitem__(self, i):
        return self.coordinates[i]

    def __iter__(self):
        return iter(self.coordinates)

    def __repr__(self):
        return "Point({})".format(list(self.coordinates))

    def copy(self) -> Point:
        return Point(self.coordinates)

    def _check(self, other: Point) -> None:
        if other.coordinates.shape != self.coordinates.shape:
            raise ValueError(
                f"Dimension mismatch: {self.dimensions()} != "
                f"{other.dimensions()}"
            )

    # Pure operations
    def add(self, other: Point) -> Point:
        self._check(other)
        return Point(self.coordinates + other.coordinates)

    def subtract(self, other: Point) -> Point:
        self._check(other)
        return Point(self.coordinates - other.coordinates)

    def dot(self, other: Point) -> float:
        self._check(other)
        return float(np.dot(self.coordinates, other.coordinates))

    def sq_magnitude(self) -> float:
        return float(np.dot(self.coordinates, self.coordinates))

    def magnitude(self) -> float:
        return float(np.linalg.norm(self.coordinates))

    def project(self, other: Point) -> Point:
        """Component of this point along ``other``.

        :param other: Non-zero direction vector.
        :return: ``(self . other / |other|^2) other``
        """
        return Point(other.coordinates * (self.dot(other) / other.sq_magnitude()))

    def apply_matrix(self, matrix: np.ndarray) -> Point:
        """Return ``matrix @ self`` as a new point."""
        matrix = np.asarray(matrix, dtype=float)
        if matrix.shape[1] != self.dimensions():
            raise ValueError(
                f"Cannot apply a {matrix.shape} matrix to a "
                f"{self.dimensions()}-dimensional point"
            )
        return Point(matrix @ self.coordinates)

    def resize(self, dim: int) -> Point:
        """Truncate or zero-pad to ``dim`` coordinates, in place."""
        n = self.dimensions()
        if dim < n:
            self.coordinates = self.coordinates[:dim].copy()
        elif dim > n:
            self.coordinates = np.concatenate(
                [self.coordinates, np.zeros(dim - n)]
            )
        return self

    # In place operations
    def scale(self, r: float) -> Point:
        self.coordinates *= r
        return self

    def translate(self, other: Point) -> Point:
        self._check(other)
        self.coordinates += other.coordinates
        return self


def distance_sq(a: Point, b: Point) -> float:
    """Squared Euclidean distance between two points."""
    return a.subtract(b).sq_magnitude()


def distance(a: Point, b: Point) -> float:
    """Euclidean distance between two points."""
    return a.subtract(b).magnitude()
