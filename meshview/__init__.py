"""Face tables, vertex buffers, attribute layouts, a demo mesh, camera and mouse zones for a mesh viewer."""

__version__ = "0.1.0"
__all__ = [
    "faces",
    "viewer_data",
    "gl_buffer",
    "gl_layout",
    "logo",
    "navigation",
    "interaction",
]