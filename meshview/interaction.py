"""Mouse zones of the viewer canvas and what each zone does."""

from __future__ import annotations

import enum

BORDER_UP = 20
BORDER_DOWN = 20
BORDER_LEFT = 20
BORDER_RIGHT = 20

CENTER_ZONE = 4

_HOVER_MESSAGES: dict[int, str] = {
    0: "HOME",
    1: "",
    2: "Invert Normals",
    3: "Rotate Around Horizontal Axis | Translate Left-Right",
    4: "Rotate Object With Respect To Center",
    5: "Translate Object Along Viewing Direction",
    6: "Stop Animation",
    7: "Rotate Around Vertical Axis | Translate Up-Down",
    8: "Resume Animation",
}


class ReleaseAction(enum.Enum):
    """What happens when a mouse button is released over a zone."""

    NONE = "none"
    HOME = "home"
    INVERT_NORMALS = "invert_normals"
    STOP_ANIMATION = "stop_animation"
    RESTART_ANIMATION = "restart_animation"

    @property
    def status_message(self) -> str:
        """Status bar text shown while the action runs."""
        if self is ReleaseAction.STOP_ANIMATION:
            return "Stoping Animation"
        if self is ReleaseAction.RESTART_ANIMATION:
            return "Restarting Animation"
        return ""


_RELEASE_ACTIONS: dict[int, ReleaseAction] = {
    0: ReleaseAction.HOME,
    2: ReleaseAction.INVERT_NORMALS,
    6: ReleaseAction.STOP_ANIMATION,
    8: ReleaseAction.RESTART_ANIMATION,
}


def mouse_zone(x: int, y: int, width: int, height: int) -> int:
    """Zone 0..8 of a 3x3 grid: thin borders around a large center zone 4.

    Zones are numbered row by row from the top-left corner.
    """
    code_x = 0 if x < BORDER_LEFT else 2 if x >= width - BORDER_RIGHT else 1
    code_y = 0 if y < BORDER_UP else 2 if y >= height - BORDER_DOWN else 1
    return code_x + 3 * code_y


def hover_message(zone: int) -> str:
    """Status bar hint shown when the mouse moves over ``zone`` with no button down."""
    return _HOVER_MESSAGES.get(zone, "")


def press_message(
    zone: int, left: bool, right: bool, zone4_enabled: bool = True
) -> str | None:
    """Status bar text for a button press, or None when the text is left as is.

    The left button takes precedence over the right one.
    """
    if left:
        if zone == 1 or zone == 4:
            if not zone4_enabled:
                return None
            return "Rotating Light Source" if zone == 1 else "Rotating Object"
        if zone in (3, 7):
            return "Rotating Object"
        if zone == 5:
            return "Zooming"
        return ""
    if right:
        if zone in (3, 7):
            return "Translating Object"
        if zone == 4:
            return "Rotating Light Source" if zone4_enabled else None
        return ""
    return None


def release_action(zone: int) -> ReleaseAction:
    """Action triggered by releasing a mouse button over ``zone``."""
    return _RELEASE_ACTIONS.get(zone, ReleaseAction.NONE)


def handle_rect(
    zone: int, width: int, height: int
) -> tuple[float, float, float, float] | None:
    """Highlight rectangle (hx0, hy0, hx1, hy1) of ``zone`` in unit coordinates.

    The y axis points up. Returns None for the center zone, for unknown
    zones and for rectangles of zero width or height.
    """
    if width <= 0 or height <= 0:
        raise ValueError("viewport size must be positive")
    w = float(width)
    h = float(height)
    x0 = 0.0
    x1 = BORDER_LEFT / w
    x2 = (width - BORDER_RIGHT) / w
    x3 = 1.0
    y0 = 1.0
    y1 = (height - BORDER_UP) / h
    y2 = BORDER_DOWN / h
    y3 = 0.0
    rects = {
        0: (x0, y0, x1, y1),
        1: (x1, y0, x2, y1),
        2: (x2, y0, x3, y1),
        3: (x0, y1, x1, y2),
        5: (x2, y1, x3, y2),
        6: (x0, y2, x1, y3),
        7: (x1, y2, x2, y3),
        8: (x2, y2, x3, y3),
    }
    rect = rects.get(zone)
    if rect is None:
        return None
    hx0, hy0, hx1, hy1 = rect
    if hx0 == hx1 or hy0 == hy1:
        return None
    return rect