"""Vertex attribute layouts, draw primitives and screen handle geometry."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from meshview.gl_buffer import BufferType, Vec3, VertexBuffer

FLOAT_SIZE = 4


@dataclass(frozen=True)
class Attribute:
    """One vertex attribute inside an interleaved float buffer.

    ``offset`` and ``stride`` count floats, ``size`` is the number of
    components of the attribute.
    """

    name: str
    offset: int
    size: int
    stride: int

    @property
    def offset_bytes(self) -> int:
        return self.offset * FLOAT_SIZE

    @property
    def stride_bytes(self) -> int:
        return self.stride * FLOAT_SIZE


class Primitive(enum.Enum):
    """How the vertices of a buffer are assembled when drawn."""

    TRIANGLES = "triangles"
    LINES = "lines"
    POINTS = "points"


_LAYOUT_NAMES: dict[BufferType, tuple[str, ...]] = {
    BufferType.MATERIAL: ("vertex",),
    BufferType.MATERIAL_NORMAL: ("vertex", "vnormal"),
    BufferType.COLOR: ("vertex", "vcolor"),
    BufferType.COLOR_NORMAL: ("vertex", "vnormal", "vcolor"),
}


def attribute_layout(buffer_type: BufferType) -> tuple[Attribute, ...]:
    """Attributes, in buffer order, of an interleaved buffer of ``buffer_type``."""
    names = _LAYOUT_NAMES[buffer_type]
    stride = 3 * len(names)
    return tuple(
        Attribute(name=name, offset=3 * position, size=3, stride=stride)
        for position, name in enumerate(names)
    )


def primitive_for(buffer: VertexBuffer) -> Primitive:
    """Triangles for faces, lines for polylines, points otherwise."""
    if buffer.has_faces:
        return Primitive.TRIANGLES
    if buffer.has_polylines:
        return Primitive.LINES
    return Primitive.POINTS


def handle_quad(hx0: float, hy0: float, hx1: float, hy1: float) -> list[Vec3]:
    """Two triangles covering the rectangle spanned by the two corners, at z = 0."""
    return [
        (hx0, hy0, 0.0),
        (hx0, hy1, 0.0),
        (hx1, hy0, 0.0),
        (hx1, hy1, 0.0),
        (hx1, hy0, 0.0),
        (hx0, hy1, 0.0),
    ]


def clamp_point_size(value: float) -> float:
    """Point size or line width, with negative values raised to zero."""
    return 0.0 if value < 0.0 else value