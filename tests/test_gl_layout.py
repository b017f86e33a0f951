import pytest

from meshview.gl_buffer import BufferType, face_set_buffer, line_set_buffer
from meshview.gl_layout import (
    Primitive,
    attribute_layout,
    clamp_point_size,
    handle_quad,
    primitive_for,
)

SQUARE = [0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 1.0, 1.0, 0.0, 0.0, 1.0, 0.0]


def test_handle_quad_has_six_vertices_at_zero_depth():
    quad = handle_quad(0.1, 0.2, 0.3, 0.4)
    assert len(quad) == 6
    assert all(z == 0.0 for _, _, z in quad)


def test_handle_quad_covers_all_four_corners():
    quad = handle_quad(0.1, 0.2, 0.3, 0.4)
    corners = {(x, y) for x, y, _ in quad}
    assert corners == {(0.1, 0.2), (0.1, 0.4), (0.3, 0.2), (0.3, 0.4)}


def test_handle_quad_first_triangle_order():
    quad = handle_quad(0.0, 1.0, 0.5, 0.75)
    assert quad[:3] == [(0.0, 1.0, 0.0), (0.0, 0.75, 0.0), (0.5, 1.0, 0.0)]


@pytest.mark.parametrize(
    "buffer_type,names",
    [
        (BufferType.MATERIAL, ["vertex"]),
        (BufferType.MATERIAL_NORMAL, ["vertex", "vnormal"]),
        (BufferType.COLOR, ["vertex", "vcolor"]),
        (BufferType.COLOR_NORMAL, ["vertex", "vnormal", "vcolor"]),
    ],
)
def test_attribute_layout_names(buffer_type, names):
    assert [a.name for a in attribute_layout(buffer_type)] == names


@pytest.mark.parametrize("buffer_type", list(BufferType))
def test_attribute_layout_is_contiguous(buffer_type):
    layout = attribute_layout(buffer_type)
    offset = 0
    for attribute in layout:
        assert attribute.offset == offset
        offset += attribute.size
    assert all(a.stride == offset for a in layout)
    assert layout[0].offset == 0


def test_attribute_layout_byte_sizes():
    normal = attribute_layout(BufferType.COLOR_NORMAL)[1]
    assert normal.offset_bytes == 12
    assert normal.stride_bytes == 36


@pytest.mark.parametrize(
    "kwargs",
    [
        {},
        {"normal": [0.0, 0.0, 1.0] * 4},
        {"color": [1.0, 0.5, 0.0] * 4},
        {"normal": [0.0, 0.0, 1.0] * 4, "color": [1.0, 0.5, 0.0] * 4},
    ],
)
def test_layout_stride_matches_interleaved_buffer(kwargs):
    buf = face_set_buffer(SQUARE, [0, 1, 2, 3, -1], **kwargs)
    stride = attribute_layout(buf.type)[0].stride
    assert len(buf.interleaved()) == stride * buf.number_of_vertices


def test_primitive_for_faces():
    buf = face_set_buffer(SQUARE, [0, 1, 2, -1])
    assert primitive_for(buf) is Primitive.TRIANGLES


def test_primitive_for_polylines():
    buf = line_set_buffer(SQUARE, [0, 1, 2, -1])
    assert primitive_for(buf) is Primitive.LINES


def test_primitive_for_points():
    assert primitive_for(face_set_buffer(SQUARE, [])) is Primitive.POINTS
    assert primitive_for(line_set_buffer(SQUARE, [])) is Primitive.POINTS


@pytest.mark.parametrize("value,expected", [(-1.0, 0.0), (0.0, 0.0), (4.0, 4.0), (2.5, 2.5)])
def test_clamp_point_size(value, expected):
    assert clamp_point_size(value) == expected