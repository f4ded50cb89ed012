"""A 2D camera whose position never goes below zero on either axis."""

from __future__ import annotations

from arscrew.vector import Vector

__all__ = ["Camera"]


class Camera:
    """A view rectangle of fixed size positioned in world space."""

    __slots__ = ("_size", "_position")

    def __init__(self, width: float, height: float) -> None:
        self._size = Vector(width, height)
        self._position = Vector(0, 0)

    @property
    def position(self) -> Vector:
        """Top-left corner of the view (a copy)."""
        return Vector(*self._position)

    @property
    def size(self) -> Vector:
        """Width and height of the view (a copy)."""
        return Vector(*self._size)

    def _clamp(self) -> None:
        self._position.x = max(0.0, self._position.x)
        self._position.y = max(0.0, self._position.y)

    def move(self, offset: Vector) -> None:
        """Shift the camera by ``offset``, clamping at zero."""
        self._position += offset
        self._clamp()

    def set_position(self, position: Vector) -> None:
        """Place the camera at ``position``, clamping at zero."""
        self._position = Vector(*position)
        self._clamp()

    def rect(self) -> tuple[int, int, int, int]:
        """The view as an integer (x, y, width, height) rectangle."""
        return (
            int(self._position.x),
            int(self._position.y),
            int(self._size.x),
            int(self._size.y),
        )