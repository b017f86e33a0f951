import pytest

from meshview.interaction import (
    ReleaseAction,
    handle_rect,
    hover_message,
    mouse_zone,
    press_message,
    release_action,
)


@pytest.mark.parametrize(
    "x, y, zone",
    [
        (0, 0, 0),
        (200, 5, 1),
        (395, 5, 2),
        (5, 200, 3),
        (200, 200, 4),
        (395, 200, 5),
        (5, 395, 6),
        (200, 395, 7),
        (395, 395, 8),
    ],
)
def test_mouse_zone_grid(x, y, zone):
    assert mouse_zone(x, y, 400, 400) == zone


def test_mouse_zone_border_edges():
    assert mouse_zone(19, 200, 400, 400) == 3
    assert mouse_zone(20, 200, 400, 400) == 4
    assert mouse_zone(379, 200, 400, 400) == 4
    assert mouse_zone(380, 200, 400, 400) == 5


def test_hover_messages():
    assert hover_message(0) == "HOME"
    assert hover_message(2) == "Invert Normals"
    assert hover_message(6) == "Stop Animation"
    assert hover_message(8) == "Resume Animation"
    assert hover_message(1) == ""
    assert hover_message(-1) == ""


def test_press_message_left():
    assert press_message(5, True, False) == "Zooming"
    assert press_message(3, True, False) == "Rotating Object"
    assert press_message(1, True, False, True) == "Rotating Light Source"
    assert press_message(1, True, False, False) is None
    assert press_message(0, True, False) == ""


def test_press_message_right():
    assert press_message(7, False, True) == "Translating Object"
    assert press_message(4, False, True, True) == "Rotating Light Source"
    assert press_message(4, False, True, False) is None
    assert press_message(5, False, True) == ""


def test_press_message_left_wins_and_no_button():
    assert press_message(4, True, True) == "Rotating Object"
    assert press_message(4, False, False) is None


def test_release_actions():
    assert release_action(0) is ReleaseAction.HOME
    assert release_action(2) is ReleaseAction.INVERT_NORMALS
    assert release_action(6) is ReleaseAction.STOP_ANIMATION
    assert release_action(8) is ReleaseAction.RESTART_ANIMATION
    assert release_action(4) is ReleaseAction.NONE
    assert ReleaseAction.STOP_ANIMATION.status_message == "Stoping Animation"
    assert ReleaseAction.RESTART_ANIMATION.status_message == "Restarting Animation"
    assert ReleaseAction.HOME.status_message == ""


def test_handle_rect_center_and_unknown():
    assert handle_rect(4, 400, 400) is None
    assert handle_rect(9, 400, 400) is None


@pytest.mark.parametrize("zone", [0, 1, 2, 3, 5, 6, 7, 8])
def test_handle_rect_inside_unit_square(zone):
    rect = handle_rect(zone, 400, 300)
    assert rect is not None
    for value in rect:
        assert 0.0 <= value <= 1.0
    hx0, hy0, hx1, hy1 = rect
    assert hx0 < hx1
    assert hy0 > hy1


def test_handle_rects_tile_edges():
    top_left = handle_rect(0, 400, 400)
    top = handle_rect(1, 400, 400)
    left = handle_rect(3, 400, 400)
    assert top_left[2] == top[0]
    assert top_left[3] == left[1]
    assert top_left[:2] == (0.0, 1.0)
    assert handle_rect(8, 400, 400)[2:] == (1.0, 0.0)


def test_handle_rect_degenerate_is_none():
    # a 40-pixel-wide canvas leaves no room for the middle column
    assert handle_rect(1, 40, 400) is None


def test_handle_rect_rejects_empty_viewport():
    with pytest.raises(ValueError):
        handle_rect(0, 0, 400)