"""State shared between the viewer canvas and its tool panel."""

from __future__ import annotations

from typing import Any

MAX_BBOX_DEPTH = 10


class ViewerData:
    """Current scene graph and bounding-box grid settings."""

    def __init__(self) -> None:
        self.scene_graph: Any = None
        self._bbox_depth = 0
        self.bbox_cube = True
        self.bbox_occupied = False
        self._bbox_scale = 1.05

    @property
    def bbox_depth(self) -> int:
        """Subdivision depth of the bounding-box grid, kept in 0..10."""
        return self._bbox_depth

    @bbox_depth.setter
    def bbox_depth(self, value: int) -> None:
        self._bbox_depth = min(max(value, 0), MAX_BBOX_DEPTH)

    @property
    def bbox_scale(self) -> float:
        """Scale applied to the bounding box, never negative."""
        return self._bbox_scale

    @bbox_scale.setter
    def bbox_scale(self, value: float) -> None:
        self._bbox_scale = max(value, 0.0)

    @property
    def grid_cells(self) -> int:
        """Number of cells in the bounding-box grid."""
        n = 1 << self._bbox_depth
        return n * n * n

    @property
    def grid_vertices(self) -> int:
        """Number of vertices in the bounding-box grid."""
        n = (1 << self._bbox_depth) + 1
        return n * n * n