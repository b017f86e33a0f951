"""Camera state for orbiting, zooming and projecting a scene."""

from __future__ import annotations

import math

from meshview.gl_buffer import Vec3

Matrix4 = tuple[tuple[float, ...], ...]

HOME_ANGLE_X = 10.0
HOME_ANGLE_Y = 10.0
HOME_ANGLE_Z = 0.0
VERTICAL_ANGLE = 10.0
HOME_DISTANCE = 5.0
MIN_DISTANCE = 0.25
NEAR_FACTOR = 1.0
FAR_FACTOR = 100.0
TRANSLATE_STEP_FACTOR = 0.001

IDENTITY: Matrix4 = (
    (1.0, 0.0, 0.0, 0.0),
    (0.0, 1.0, 0.0, 0.0),
    (0.0, 0.0, 1.0, 0.0),
    (0.0, 0.0, 0.0, 1.0),
)


def _matmul(a: Matrix4, b: Matrix4) -> Matrix4:
    columns = list(zip(*b))
    return tuple(
        tuple(sum(x * y for x, y in zip(row, col)) for col in columns) for row in a
    )


def _rotation(angle_degrees: float, axis: int) -> Matrix4:
    c = math.cos(math.radians(angle_degrees))
    s = math.sin(math.radians(angle_degrees))
    if axis == 0:
        return ((1.0, 0.0, 0.0, 0.0), (0.0, c, -s, 0.0), (0.0, s, c, 0.0), IDENTITY[3])
    if axis == 1:
        return ((c, 0.0, s, 0.0), (0.0, 1.0, 0.0, 0.0), (-s, 0.0, c, 0.0), IDENTITY[3])
    return ((c, -s, 0.0, 0.0), (s, c, 0.0, 0.0), (0.0, 0.0, 1.0, 0.0), IDENTITY[3])


class Camera:
    """Eye position, scene rotation and projection around a scene center.

    Matrices are row-major tuples of four rows.
    """

    def __init__(self, center: Vec3 = (0.0, 0.0, 0.0), bbox_diameter: float = 2.0) -> None:
        self.center: Vec3 = tuple(float(c) for c in center)  # type: ignore[assignment]
        self.bbox_diameter = float(bbox_diameter)
        self.up: Vec3 = (0.0, 1.0, 0.0)
        self.translate_step = TRANSLATE_STEP_FACTOR * self.bbox_diameter
        self.camera_translation: Vec3 = (0.0, 0.0, 0.0)
        self.eye: Vec3 = (0.0, 0.0, 0.0)
        self.view_rotation: Matrix4 = IDENTITY
        self.f_angle = 0.0
        self.reset_home()

    def zoom(self, value: float) -> None:
        """Move the eye along z, never closer to the center than a quarter diameter."""
        ex, ey, ez = self.eye
        ez += value
        minimum = MIN_DISTANCE * self.bbox_diameter
        if ez - self.center[2] < minimum:
            ez = self.center[2] + minimum
        self.eye = (ex, ey, ez)

    def reset_home(self) -> None:
        """Restore the home rotation and place the eye in front of the center."""
        self.view_rotation = _matmul(
            _matmul(_rotation(HOME_ANGLE_X, 0), _rotation(HOME_ANGLE_Y, 1)),
            _rotation(HOME_ANGLE_Z, 2),
        )
        self.f_angle = 0.0
        cx, cy, cz = self.center
        self.eye = (cx, cy, cz + HOME_DISTANCE * self.bbox_diameter)

    def projection_matrix(self, width: float, height: float) -> Matrix4:
        """Perspective projection for a viewport of the given size."""
        if width <= 0 or height <= 0:
            raise ValueError("viewport size must be positive")
        near = NEAR_FACTOR * self.bbox_diameter
        far = FAR_FACTOR * self.bbox_diameter
        if near == far:
            raise ValueError("near and far planes coincide")
        aspect = width / height
        half = math.radians(VERTICAL_ANGLE) / 2.0
        cotan = math.cos(half) / math.sin(half)
        clip = far - near
        return (
            (cotan / aspect, 0.0, 0.0, 0.0),
            (0.0, cotan, 0.0, 0.0),
            (0.0, 0.0, -(near + far) / clip, -(2.0 * near * far) / clip),
            (0.0, 0.0, -1.0, 0.0),
        )