"""Polygon faces stored as a flat, separator-terminated vertex index list."""

from __future__ import annotations

from collections.abc import Iterable

SEPARATOR = -1


class Faces:
    """Face and corner queries over a ``coordIndex`` array.

    Faces are sequences of vertex indices. Each face ends with a ``-1``
    separator. Every entry of the array is a corner, and that includes
    the separators.
    """

    def __init__(self, n_vertices: int, coord_index: Iterable[int]) -> None:
        self._coord_index: list[int] = []
        self._face_starts: list[int] = []
        self._corner_faces: list[int] = []
        max_vertex = n_vertices - 1
        face = 0
        for i, value in enumerate(coord_index):
            if face >= len(self._face_starts):
                self._face_starts.append(i)
            self._corner_faces.append(face)
            if value == SEPARATOR:
                # Separators record the face they close as -(face + 1).
                value = -(face + 1)
                face += 1
            elif value > max_vertex:
                max_vertex = value
            self._coord_index.append(value)
        self._n_vertices = max_vertex + 1

    @property
    def number_of_vertices(self) -> int:
        """The larger of the given vertex count and the highest index plus one."""
        return self._n_vertices

    @property
    def number_of_faces(self) -> int:
        return len(self._face_starts)

    @property
    def number_of_corners(self) -> int:
        """Length of the index array, separators included."""
        return len(self._coord_index)

    def is_valid_face_index(self, face: int) -> bool:
        return 0 <= face < self.number_of_faces

    def is_non_separator_corner(self, corner: int) -> bool:
        return (
            0 <= corner < self.number_of_corners
            and self._coord_index[corner] >= 0
        )

    def face_size(self, face: int) -> int:
        """Number of corners of ``face``, or 0 if it is not a valid face."""
        if not self.is_valid_face_index(face):
            return 0
        start = self._face_starts[face]
        if face + 1 < self.number_of_faces:
            end = self._face_starts[face + 1]
        else:
            end = self.number_of_corners
        return end - start - 1

    def face_first_corner(self, face: int) -> int:
        """Index of the first corner of ``face``."""
        if not self.is_valid_face_index(face):
            raise IndexError(f"invalid face index {face}")
        return self._face_starts[face]

    def face_vertex(self, face: int, j: int) -> int:
        """Vertex index stored at the ``j``-th corner of ``face``."""
        if not self.is_valid_face_index(face):
            raise IndexError(f"invalid face index {face}")
        if not 0 <= j < self.face_size(face):
            raise IndexError(f"invalid corner {j} of face {face}")
        return self._coord_index[self._face_starts[face] + j]

    def corner_face(self, corner: int) -> int:
        """Face that contains the non-separator ``corner``."""
        if not self.is_non_separator_corner(corner):
            raise IndexError(f"invalid or separator corner {corner}")
        return self._corner_faces[corner]

    def next_corner(self, corner: int) -> int:
        """Next corner in the cyclic order of the face containing ``corner``."""
        face = self.corner_face(corner)
        size = self.face_size(face)
        if size <= 0:
            raise IndexError(f"face {face} has no corners")
        start = self._face_starts[face]
        return (corner + 1 - start) % size + start