"""Built-in demo mesh: an extruded ring with a diagonal bar across it."""

from __future__ import annotations

import math

from meshview.gl_buffer import Vec3

PI = 3.14159
NUM_SECTORS = 100
HALF_THICKNESS = 0.05
SCALE = 2.0
DIFFUSE_COLOR: Vec3 = (1.0, 0.6, 0.3)


def _unit_normal(a: Vec3, b: Vec3) -> Vec3:
    """Normalized cross product of ``a`` and ``b``, or zero if degenerate."""
    nx = a[1] * b[2] - a[2] * b[1]
    ny = a[2] * b[0] - a[0] * b[2]
    nz = a[0] * b[1] - a[1] * b[0]
    length = math.sqrt(nx * nx + ny * ny + nz * nz)
    if length < 1e-12:
        return (0.0, 0.0, 0.0)
    return (nx / length, ny / length, nz / length)


class LogoMesh:
    """Triangle mesh with one normal per face, built procedurally.

    ``coord`` and ``normal`` are flat lists of x, y, z triples and
    ``coord_index`` holds three vertex indices per triangle followed by
    a ``-1`` separator.
    """

    def __init__(self) -> None:
        self.name = "QtLogo"
        self.diffuse_color: Vec3 = DIFFUSE_COLOR
        self.normal_per_vertex = False
        self.coord: list[float] = []
        self.coord_index: list[int] = []
        self.normal: list[float] = []

        x1, y1 = 0.06, -0.14
        x2, y2 = 0.14, -0.06
        x3, y3 = 0.08, 0.00
        x4, y4 = 0.30, 0.22

        self._quad(x1, y1, x2, y2, y2, x2, y1, x1)
        self._quad(x3, y3, x4, y4, y4, x4, y3, x3)

        self._extrude(x1, y1, x2, y2)
        self._extrude(x2, y2, y2, x2)
        self._extrude(y2, x2, y1, x1)
        self._extrude(y1, x1, x1, y1)
        self._extrude(x3, y3, x4, y4)
        self._extrude(x4, y4, y4, x4)
        self._extrude(y4, x4, y3, x3)

        for i in range(NUM_SECTORS):
            angle1 = (i * 2 * PI) / NUM_SECTORS
            x5, y5 = 0.30 * math.sin(angle1), 0.30 * math.cos(angle1)
            x6, y6 = 0.20 * math.sin(angle1), 0.20 * math.cos(angle1)
            angle2 = ((i + 1) * 2 * PI) / NUM_SECTORS
            x7, y7 = 0.20 * math.sin(angle2), 0.20 * math.cos(angle2)
            x8, y8 = 0.30 * math.sin(angle2), 0.30 * math.cos(angle2)

            self._quad(x5, y5, x6, y6, x7, y7, x8, y8)
            self._extrude(x6, y6, x7, y7)
            self._extrude(x8, y8, x5, y5)

        self.coord = [value * SCALE for value in self.coord]

    @property
    def number_of_vertices(self) -> int:
        return len(self.coord) // 3

    @property
    def number_of_faces(self) -> int:
        return self.coord_index.count(-1)

    def bbox(self) -> tuple[Vec3, Vec3]:
        """Minimum and maximum corners of the axis-aligned bounding box."""
        if not self.coord:
            raise ValueError("mesh has no vertices")
        xs = self.coord[0::3]
        ys = self.coord[1::3]
        zs = self.coord[2::3]
        return (min(xs), min(ys), min(zs)), (max(xs), max(ys), max(zs))

    def _vertex(self, x: float, y: float, z: float) -> int:
        index = len(self.coord) // 3
        self.coord.extend((x, y, z))
        return index

    def _normal(self, n: Vec3) -> int:
        index = len(self.normal) // 3
        self.normal.extend(n)
        return index

    def _triangle(self, i0: int, i1: int, i2: int) -> None:
        self.coord_index.extend((i0, i1, i2, -1))

    def _quad(
        self,
        x1: float, y1: float, x2: float, y2: float,
        x3: float, y3: float, x4: float, y4: float,
    ) -> None:
        i1m = self._vertex(x1, y1, -HALF_THICKNESS)
        i2m = self._vertex(x2, y2, -HALF_THICKNESS)
        i3m = self._vertex(x3, y3, -HALF_THICKNESS)
        i4m = self._vertex(x4, y4, -HALF_THICKNESS)

        nm = _unit_normal((x2 - x1, y2 - y1, 0.0), (x4 - x1, y4 - y1, 0.0))
        self._triangle(i1m, i2m, i4m)
        self._normal(nm)
        self._triangle(i3m, i4m, i2m)
        self._normal(nm)

        i4p = self._vertex(x4, y4, HALF_THICKNESS)
        i3p = self._vertex(x3, y3, HALF_THICKNESS)
        i2p = self._vertex(x2, y2, HALF_THICKNESS)
        i1p = self._vertex(x1, y1, HALF_THICKNESS)

        np_ = _unit_normal((x2 - x4, y2 - y4, 0.0), (x1 - x4, y1 - y4, 0.0))
        self._triangle(i4p, i2p, i1p)
        self._normal(np_)
        self._triangle(i2p, i4p, i3p)
        self._normal(np_)

    def _extrude(self, x1: float, y1: float, x2: float, y2: float) -> None:
        i1p = self._vertex(x1, y1, HALF_THICKNESS)
        i1m = self._vertex(x1, y1, -HALF_THICKNESS)
        i2p = self._vertex(x2, y2, HALF_THICKNESS)
        i2m = self._vertex(x2, y2, -HALF_THICKNESS)

        n = _unit_normal((x2 - x1, y2 - y1, 0.0), (0.0, 0.0, -2 * HALF_THICKNESS))
        self._triangle(i1p, i2p, i1m)
        self._normal(n)
        self._triangle(i2m, i1m, i2p)
        self._normal(n)