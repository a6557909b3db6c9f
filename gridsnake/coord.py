"""Grid coordinates and movement directions."""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple


class Direction(Enum):
    """Input direction for a turn.

    ``CENTER`` means "no new input" and is never stored as a heading.
    """

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"

    @classmethod
    def parse(cls, raw: Direction | Heading | str) -> Direction:
        """Convert a heading, direction or string into a Direction."""
        if isinstance(raw, Direction):
            return raw
        if isinstance(raw, Heading):
            return cls(raw.value)
        try:
            return cls(str(raw).strip().lower())
        except ValueError as e:
            raise ValueError(f"Invalid direction: {raw!r}") from e


class Heading(Enum):
    """Direction of travel. Only the four real directions exist here."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def opposite(self) -> Heading:
        return _OPPOSITE[self]

    @property
    def direction(self) -> Direction:
        return Direction(self.value)

    def resolve(self, requested: Direction) -> Heading:
        """Return the heading after applying a requested direction.

        Center and the exact reverse keep the current heading; any other
        direction replaces it.
        """
        if requested is Direction.CENTER:
            return self
        new = Heading(requested.value)
        if new is self.opposite:
            return self
        return new


_OPPOSITE = {
    Heading.UP: Heading.DOWN,
    Heading.DOWN: Heading.UP,
    Heading.LEFT: Heading.RIGHT,
    Heading.RIGHT: Heading.LEFT,
}

# (dx, dy) per direction; y grows downwards
DELTAS = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
    Direction.CENTER: (0, 0),
}


class Coord(NamedTuple):
    """Cell position on the board, ``(x, y)`` with the origin top-left."""

    x: int
    y: int

    def in_bounds(self, size: int) -> bool:
        return 0 <= self.x < size and 0 <= self.y < size

    def step(self, direction: Direction | Heading) -> Coord | None:
        """Move one cell in ``direction``.

        Returns None when the move would take a coordinate below zero.
        Moving down or right may leave the board on the far side; callers
        check that with ``in_bounds``.
        """
        if isinstance(direction, Heading):
            direction = direction.direction
        dx, dy = DELTAS[direction]
        x, y = self.x + dx, self.y + dy
        if x < 0 or y < 0:
            return None
        return Coord(x, y)

    def __add__(self, direction):  # type: ignore[override]
        if not isinstance(direction, (Direction, Heading)):
            return NotImplemented
        moved = self.step(direction)
        if moved is None:
            raise ValueError(f"Cannot move {direction.value} from {tuple(self)}")
        return moved
