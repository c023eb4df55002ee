"""Game-loop building blocks: colors, geometry, shader includes, storage, animation, input, files and profiling."""

__version__ = "0.1.0"

__all__ = [
    "animation",
    "color",
    "files",
    "geometry",
    "input",
    "mouse_camera",
    "shaders",
    "storage",
    "telemetry",
]