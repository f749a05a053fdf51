"""A 2D camera that centres its view on a world position."""

from __future__ import annotations

Matrix = tuple[tuple[float, float, float], tuple[float, float, float], tuple[float, float, float]]


class Camera2D:
    """Camera with a fixed working size, a position and a scale."""

    def __init__(self, x: float, y: float, width: float, height: float) -> None:
        self.work_size: tuple[float, float] = (width, height)
        self._pos: tuple[float, float] = (x, y)
        self._scale: tuple[float, float] = (1.0, 1.0)
        self._transform: Matrix = ((1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0))
        self._dirty = True

    @property
    def pos(self) -> tuple[float, float]:
        return self._pos

    @property
    def scale(self) -> tuple[float, float]:
        return self._scale

    def set_position(self, x: float, y: float) -> None:
        if self._pos != (x, y):
            self._pos = (x, y)
            self._dirty = True

    def pos_add_x(self, x: float) -> None:
        self._pos = (self._pos[0] + x, self._pos[1])
        self._dirty = True

    def pos_add_y(self, y: float) -> None:
        self._pos = (self._pos[0], self._pos[1] + y)
        self._dirty = True

    def set_position_to_center(self) -> None:
        self.set_position(self.work_size[0] * 0.5, self.work_size[1] * 0.5)

    def set_scale(self, x: float, y: float) -> None:
        if self._scale != (x, y):
            self._scale = (x, y)
            self._dirty = True

    def set_zoom(self, factor: float) -> None:
        self.set_scale(factor, factor)

    def transform(self) -> Matrix:
        """Return the 3x3 world-to-screen matrix, recomputing it if needed."""
        if self._dirty:
            self._dirty = False
            sx, sy = self._scale
            tx = self._pos[0] - self.work_size[0] * 0.5 / sx
            ty = self._pos[1] - self.work_size[1] * 0.5 / sy
            self._transform = (
                (sx, 0.0, -sx * tx),
                (0.0, sy, -sy * ty),
                (0.0, 0.0, 1.0),
            )
        return self._transform

    def world_to_screen(self, x: float, y: float) -> tuple[float, float]:
        """Map a world point to the camera's working-space coordinates."""
        (a, _, c), (_, e, f), _ = self.transform()
        return (a * x + c, e * y + f)