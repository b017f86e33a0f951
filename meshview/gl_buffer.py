"""Flattening of indexed face and line sets into drawable vertex buffers."""

from __future__ import annotations

import enum
from collections.abc import Sequence
from dataclasses import dataclass, field

Vec3 = tuple[float, float, float]


class BufferType(enum.Enum):
    """Which per-vertex attributes a buffer carries besides coordinates."""

    MATERIAL = 0
    MATERIAL_NORMAL = 1
    COLOR = 2
    COLOR_NORMAL = 3

    @classmethod
    def for_attributes(cls, has_color: bool, has_normal: bool) -> "BufferType":
        if has_color:
            return cls.COLOR_NORMAL if has_normal else cls.COLOR
        return cls.MATERIAL_NORMAL if has_normal else cls.MATERIAL


@dataclass
class VertexBuffer:
    """Unindexed vertex data, with optional normals and colors per vertex."""

    type: BufferType = BufferType.MATERIAL
    vertices: list[Vec3] = field(default_factory=list)
    normals: list[Vec3] = field(default_factory=list)
    colors: list[Vec3] = field(default_factory=list)
    has_faces: bool = False
    has_polylines: bool = False
    has_color: bool = False
    has_normal: bool = False

    @property
    def number_of_vertices(self) -> int:
        return len(self.vertices)

    @property
    def number_of_normals(self) -> int:
        return len(self.normals)

    @property
    def number_of_colors(self) -> int:
        return len(self.colors)

    @property
    def has_points(self) -> bool:
        """True when the buffer holds neither triangles nor line segments."""
        return not (self.has_faces or self.has_polylines)

    def interleaved(self) -> list[float]:
        """Floats per vertex: position, then normal and color when present."""
        out: list[float] = []
        with_normals = bool(self.normals)
        with_colors = bool(self.colors)
        for i, vertex in enumerate(self.vertices):
            out.extend(vertex)
            if with_normals:
                out.extend(self.normals[i])
            if with_colors:
                out.extend(self.colors[i])
        return out


def _vec3(data: Sequence[float], index: int) -> Vec3:
    if index < 0 or 3 * index + 2 >= len(data):
        raise IndexError(f"index {index} out of range for {len(data) // 3} triples")
    base = 3 * index
    return (float(data[base]), float(data[base + 1]), float(data[base + 2]))


def _spans(coord_index: Sequence[int]):
    """Yield (ordinal, start, end) for each separator-terminated run."""
    start = 0
    ordinal = 0
    for i, value in enumerate(coord_index):
        if value < 0:
            yield ordinal, start, i
            start = i + 1
            ordinal += 1


def face_set_buffer(
    coord: Sequence[float],
    coord_index: Sequence[int],
    normal: Sequence[float] = (),
    normal_index: Sequence[int] = (),
    normal_per_vertex: bool = True,
    color: Sequence[float] = (),
    color_index: Sequence[int] = (),
    color_per_vertex: bool = True,
) -> VertexBuffer:
    """Triangulate an indexed face set as fans, or emit its points if it has no faces."""
    has_faces = any(value < 0 for value in coord_index)
    has_normal = len(normal) > 0
    has_color = len(color) > 0
    buf = VertexBuffer(
        type=BufferType.for_attributes(has_color, has_normal),
        has_faces=has_faces,
        has_color=has_color,
        has_normal=has_normal,
    )

    if not has_faces:
        for iv in range(len(coord) // 3):
            buf.vertices.append(_vec3(coord, iv))
            if has_normal:
                buf.normals.append(_vec3(normal, iv))
            if has_color:
                buf.colors.append(_vec3(color, iv))
        return buf

    for face, i0, i1 in _spans(coord_index):
        face_normal: Vec3 | None = None
        face_color: Vec3 | None = None
        if has_normal and not normal_per_vertex:
            face_normal = _vec3(normal, normal_index[face] if normal_index else face)
        if has_color and not color_per_vertex:
            face_color = _vec3(color, color_index[face] if color_index else face)

        for j1 in range(i0 + 1, i1 - 1):
            corners = (i0, j1, j1 + 1)
            xs: list[Vec3] = []
            ns: list[Vec3] = []
            cs: list[Vec3] = []
            for corner in corners:
                iv = coord_index[corner]
                xs.append(_vec3(coord, iv))
                if has_normal:
                    if normal_per_vertex:
                        i_n = normal_index[corner] if normal_index else iv
                        ns.append(_vec3(normal, i_n))
                    else:
                        ns.append(face_normal)
                if has_color:
                    if color_per_vertex:
                        i_c = color_index[corner] if color_index else iv
                        cs.append(_vec3(color, i_c))
                    else:
                        cs.append(face_color)
            for k in (2, 1, 0):
                buf.vertices.append(xs[k])
                if has_normal:
                    buf.normals.append(ns[k])
                if has_color:
                    buf.colors.append(cs[k])
    return buf


def line_set_buffer(
    coord: Sequence[float],
    coord_index: Sequence[int],
    color: Sequence[float] = (),
    color_index: Sequence[int] = (),
    color_per_vertex: bool = True,
) -> VertexBuffer:
    """Split an indexed line set into segments, or emit its points if it has no polylines."""
    has_polylines = any(value < 0 for value in coord_index)
    has_color = len(color) > 0
    buf = VertexBuffer(
        type=BufferType.COLOR if has_color else BufferType.MATERIAL,
        has_polylines=has_polylines,
        has_color=has_color,
    )

    if not has_polylines:
        for iv in range(len(coord) // 3):
            buf.vertices.append(_vec3(coord, iv))
            if has_color:
                buf.colors.append(_vec3(color, color_index[iv] if color_index else iv))
        return buf

    for polyline, i0, i1 in _spans(coord_index):
        line_color: Vec3 | None = None
        if has_color and not color_per_vertex:
            line_color = _vec3(color, color_index[polyline] if color_index else polyline)

        for j0 in range(i0, i1 - 1):
            xs: list[Vec3] = []
            cs: list[Vec3] = []
            for corner in (j0, j0 + 1):
                iv = coord_index[corner]
                xs.append(_vec3(coord, iv))
                if has_color:
                    if color_per_vertex:
                        i_c = color_index[corner] if color_index else iv
                        cs.append(_vec3(color, i_c))
                    else:
                        cs.append(line_color)
            for k in (1, 0):
                buf.vertices.append(xs[k])
                if has_color:
                    buf.colors.append(cs[k])
    return buf