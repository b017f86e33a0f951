# meshview

Building blocks for a polygon mesh viewer. The package is plain Python and
has no third-party dependencies.

## Modules

- `meshview.faces`: `Faces(n_vertices, coord_index)` builds a face table
  from a flat index list in which `-1` ends each face. Every entry is a
  corner, and that includes the separators. It has these properties:
  `number_of_vertices`, which is the larger of the given count and the
  highest index plus one, `number_of_faces` and `number_of_corners`. It has
  these methods: `is_valid_face_index`, `is_non_separator_corner`,
  `face_size`, `face_first_corner`, `face_vertex`, `corner_face` and
  `next_corner`. For an invalid face, `face_size` returns 0. The other
  lookups raise `IndexError` when given an invalid face, an invalid corner
  or a separator corner.
- `meshview.viewer_data`: `ViewerData` holds the current `scene_graph`
  (any object, or `None`) and the bounding-box grid settings. These are
  `bbox_depth`, which is clamped to 0..10, `bbox_cube`, `bbox_occupied`,
  and `bbox_scale`, which is never negative and defaults to 1.05. The
  properties `grid_cells` and `grid_vertices` give the size of the grid.
- `meshview.gl_buffer`: `face_set_buffer(...)` splits each face of an
  indexed face set into a triangle fan. `line_set_buffer(...)` splits each
  polyline of an indexed line set into separate segments. Normals and
  colours may be indexed or not, and bound per vertex (or per corner) or per
  face (or per polyline). When the index list has no separators, the
  coordinates are emitted as points. The result is a `VertexBuffer`. Its
  `BufferType` (`MATERIAL`, `MATERIAL_NORMAL`, `COLOR`, `COLOR_NORMAL`)
  says which attributes it carries, and `interleaved()` returns the flat
  float stream, with position, then normal, then colour for each vertex.
- `meshview.gl_layout`: `attribute_layout(buffer_type)` gives the
  `Attribute` entries of an interleaved buffer, each with a name, an offset,
  a size and a stride counted in floats, plus `offset_bytes` and
  `stride_bytes`. `primitive_for(buffer)` chooses the `Primitive`:
  triangles, lines or points. `handle_quad(hx0, hy0, hx1, hy1)` gives the
  six vertices of two triangles that cover a rectangle.
  `clamp_point_size(value)` raises negative sizes to zero.
- `meshview.logo`: `LogoMesh()` builds the demo mesh. It is an extruded
  ring with a diagonal bar and one normal per triangle. `bbox()` returns its
  minimum and maximum corners.
- `meshview.navigation`: `Camera(center, bbox_diameter)` keeps the eye
  position and the home rotation. `zoom(value)` moves the eye along z but
  keeps it at least a quarter of the diameter from the centre.
  `reset_home()` restores the home view. `projection_matrix(width, height)`
  returns a row-major perspective matrix with a 10° vertical field of view.
- `meshview.interaction`: `mouse_zone(x, y, width, height)` maps a
  position to one of the nine zones of a 3×3 grid. The grid has 20-pixel
  borders and zone 4 is the centre. `hover_message(zone)` and
  `press_message(zone, left, right, zone4_enabled)` give status-bar text.
  `release_action(zone)` returns a `ReleaseAction`: home, invert normals,
  stop animation or restart animation. `handle_rect(zone, width, height)`
  gives the highlight rectangle of a border zone in unit coordinates.

## Example

```python
from meshview.faces import Faces
from meshview.gl_buffer import face_set_buffer

faces = Faces(4, [0, 1, 2, -1, 0, 2, 3, -1])
faces.number_of_faces    # 2
faces.face_size(1)       # 3
faces.corner_face(5)     # 1
faces.next_corner(2)     # 0

coord = [0, 0, 0, 1, 0, 0, 1, 1, 0, 0, 1, 0]
buf = face_set_buffer(coord, [0, 1, 2, 3, -1])
buf.number_of_vertices   # 6  (two triangles)
buf.type                 # BufferType.MATERIAL
```

## What it does not do

The package does not open a window or draw anything. It does not compile
shaders, talk to a graphics API or run an event loop. It has no command to
start, and it cannot read or write mesh files. It works out the data and
the decisions a viewer needs, and leaves rendering and file input and
output to the code that uses it.

## Testing

```
pip install "meshview[test]"
pytest
```