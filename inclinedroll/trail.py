"""A bounded trail of recent positions that fades toward its oldest point."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass

MIN_SQUARED_STEP = 0.01


@dataclass(frozen=True)
class Color:
    """An 8-bit RGB colour."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b):
            if not 0 <= channel <= 255:
                raise ValueError(f"colour channel out of range: {channel}")


class Trail:
    """Keeps at most ``max_points`` positions, dropping the oldest when full."""

    def __init__(self, color: Color, max_points: int) -> None:
        if max_points < 1:
            raise ValueError("max_points must be at least 1")
        self.primary_color = color
        self.max_points = max_points
        self._points: deque[tuple[float, float]] = deque(maxlen=max_points)
        self.last_x = 0.0
        self.last_y = 0.0

    @property
    def points(self) -> list[tuple[float, float]]:
        """Stored points, oldest first."""
        return list(self._points)

    def update(self, x: float, y: float) -> None:
        """Record a new position unless it is too close to the last one."""
        dx = x - self.last_x
        dy = y - self.last_y
        if dx * dx + dy * dy < MIN_SQUARED_STEP:
            return
        self._points.append((x, y))
        self.last_x = x
        self.last_y = y

    def colored_points(self) -> list[tuple[tuple[float, float, float], tuple[float, float]]]:
        """Points with their colours in 0..1, darkest first; empty below two points."""
        size = len(self._points)
        if size < 2:
            return []
        base = (
            self.primary_color.r / 255.0,
            self.primary_color.g / 255.0,
            self.primary_color.b / 255.0,
        )
        result = []
        for i, point in enumerate(self._points):
            multiplier = i / size
            result.append((tuple(channel * multiplier for channel in base), point))
        return result

    def __len__(self) -> int:
        return len(self._points)