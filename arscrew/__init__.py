"""Building blocks for games: errors, a value holder, bit sets, vectors, quaternions, events, coroutines, interpolation, animation and a camera."""

__version__ = "0.1.0"

__all__ = [
    "errors",
    "any",
    "bit",
    "vector",
    "quaternion",
    "event",
    "coroutine",
    "interpolation",
    "animation",
    "camera",
]