"""Directional sensor features around the snake's head.

Every vector has one slot per ray, in ``SENSOR_DIRECTIONS`` order:
left, up-left, up, up-right, right, down-right, down, down-left.
Values are normalized by the board size; ``1.0`` means nothing was found.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from gridsnake.coord import Coord, Direction

if TYPE_CHECKING:
    from gridsnake.engine import SnakeGame

SENSOR_DIRECTIONS = (
    "left",
    "up_left",
    "up",
    "up_right",
    "right",
    "down_right",
    "down",
    "down_left",
)

# Unit steps composing one move along each ray. Diagonals take the vertical
# step first.
RAY_STEPS: tuple[tuple[Direction, ...], ...] = (
    (Direction.LEFT,),
    (Direction.UP, Direction.LEFT),
    (Direction.UP,),
    (Direction.UP, Direction.RIGHT),
    (Direction.RIGHT,),
    (Direction.DOWN, Direction.RIGHT),
    (Direction.DOWN,),
    (Direction.DOWN, Direction.LEFT),
)

NUM_SENSORS = len(SENSOR_DIRECTIONS)


def wall_distance(game: SnakeGame) -> np.ndarray:
    """Distance from the head to the board edge along each ray."""
    size = game.size
    x, y = game.head
    left = x / size
    up = y / size
    right = (size - 1 - x) / size
    down = (size - 1 - y) / size
    return np.array(
        [
            left,
            min(up, left),
            up,
            min(up, right),
            right,
            min(down, right),
            down,
            min(down, left),
        ],
        dtype=np.float32,
    )


def _advance(cell: Coord, steps: tuple[Direction, ...]) -> Coord | None:
    for direction in steps:
        moved = cell.step(direction)
        if moved is None:
            return None
        cell = moved
    return cell


def body_distance(game: SnakeGame) -> np.ndarray:
    """Distance from the head to the first body cell along each ray.

    A ray that leaves the board without touching the body reads 1.0.
    """
    size = game.size
    free = game.free_cells
    result = np.ones(NUM_SENSORS, dtype=np.float32)

    for slot, steps in enumerate(RAY_STEPS):
        cell: Coord | None = game.head
        for step in range(1, size):
            cell = _advance(cell, steps)
            if cell is None or not cell.in_bounds(size):
                break
            if cell not in free:
                result[slot] = step / size
                break

    return result


def food_distance(game: SnakeGame) -> np.ndarray:
    """Distance from the head to the food, only along the eight rays.

    Food that is not on a row, column or diagonal through the head gives
    no signal at all.
    """
    size = game.size
    result = np.ones(NUM_SENSORS, dtype=np.float32)
    hx, hy = game.head
    fx, fy = game.food
    dx, dy = fx - hx, fy - hy

    if dx == 0 and dy == 0:
        return result
    if dx != 0 and dy != 0 and abs(dx) != abs(dy):
        return result

    horizontal = "" if dx == 0 else ("left" if dx < 0 else "right")
    vertical = "" if dy == 0 else ("up" if dy < 0 else "down")
    name = "_".join(part for part in (vertical, horizontal) if part)
    result[SENSOR_DIRECTIONS.index(name)] = max(abs(dx), abs(dy)) / size
    return result


def sensor_vector(game: SnakeGame) -> np.ndarray:
    """Wall, body and food vectors concatenated into one feature vector."""
    return np.concatenate([wall_distance(game), body_distance(game), food_distance(game)])
