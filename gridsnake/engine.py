from __future__ import annotations

import logging
from collections import deque
from enum import Enum
from typing import Optional

import numpy as np

from gridsnake import sensors
from gridsnake.coord import Coord, Direction, Heading
from gridsnake.free_cells import BoardFull, FreeCellIndex
from gridsnake.state import GameState

logger = logging.getLogger(__name__)


class TurnResult(Enum):
    """Outcome of a single turn."""

    CONTINUES = "continues"
    TERMINATED = "terminated"

    def __bool__(self) -> bool:
        return self is TurnResult.CONTINUES


class SnakeGame:
    """Snake game state machine on a square board.

    Owns the body, heading, food and RNG. Callers drive it with ``turn`` and
    read the state between turns; rendering and pacing live outside.
    """

    def __init__(self, seed: int = 0, size: int = 10):
        """Initialize the game.

        Args:
            seed: Seed for the food placement RNG
            size: Width/height of the board in cells, at least 2

        Raises:
            ValueError: If ``size`` is smaller than 2
        """
        if size < 2:
            raise ValueError(f"Board size must be at least 2, got {size}")

        self.seed = seed
        self.size = size
        self._rng = np.random.default_rng(seed)

        # Snake starts at the horizontal center line, length 2, facing right
        center = size // 2
        self._body: deque[Coord] = deque([
            Coord(center, center - 1),      # Head
            Coord(center - 1, center - 1),  # Tail
        ])
        self._heading = Heading.RIGHT
        self._free = FreeCellIndex.full_board(size, self._body)

        self.score = 0
        self.steps = 0
        self.game_over = False
        self.death_reason: Optional[str] = None

        self._food = self._place_food()
        logger.debug("New game seed=%s size=%s food=%s", seed, size, self._food)

    @property
    def heading(self) -> Heading:
        return self._heading

    @property
    def head(self) -> Coord:
        return self._body[0]

    @property
    def body(self) -> tuple[Coord, ...]:
        """Body cells, head first."""
        return tuple(self._body)

    @property
    def food(self) -> Coord:
        return self._food

    @property
    def free_cells(self) -> FreeCellIndex:
        return self._free

    @property
    def alive(self) -> bool:
        return not self.game_over

    def length(self) -> int:
        return len(self._body)

    def current_heading(self) -> Heading:
        return self._heading

    def _place_food(self) -> Coord:
        # Food stays in the free set: it is not part of the snake
        return self._free.pick_uniform(self._rng)

    def _terminate(self, reason: str) -> TurnResult:
        self.game_over = True
        self.death_reason = reason
        logger.debug(
            "Game over after %d steps: %s (length %d)", self.steps, reason, len(self._body)
        )
        return TurnResult.TERMINATED

    def turn(self, direction: Direction | Heading | str = Direction.CENTER) -> TurnResult:
        """Advance the game by one move.

        Args:
            direction: Requested direction. Center, or the reverse of the
                current heading, keeps the snake going straight.

        Returns:
            CONTINUES while the snake is alive, TERMINATED once it hit a wall,
            itself, or filled the board. Further calls keep returning
            TERMINATED.
        """
        if self.game_over:
            return TurnResult.TERMINATED

        self._heading = self._heading.resolve(Direction.parse(direction))
        self.steps += 1

        new_head = self.head.step(self._heading)
        if new_head is None or not new_head.in_bounds(self.size):
            return self._terminate("wall")

        # The tail has not moved yet, so it still counts as occupied
        if new_head not in self._free:
            return self._terminate("self")

        self._body.appendleft(new_head)
        self._free.remove(new_head)

        if new_head == self._food:
            self.score += 1
            try:
                self._food = self._place_food()
            except BoardFull:
                return self._terminate("board_full")
            logger.debug("Food eaten at %s, new food at %s", new_head, self._food)
        else:
            self._free.insert(self._body.pop())

        return TurnResult.CONTINUES

    def wall_distance(self) -> np.ndarray:
        return sensors.wall_distance(self)

    def body_distance(self) -> np.ndarray:
        return sensors.body_distance(self)

    def food_distance(self) -> np.ndarray:
        return sensors.food_distance(self)

    def sensor_vector(self) -> np.ndarray:
        """All three sensor vectors concatenated (wall, body, food)."""
        return sensors.sensor_vector(self)

    def get_state(self) -> GameState:
        """Get the current game state.

        Returns:
            Current GameState
        """
        return GameState(
            snake=[tuple(c) for c in self._body],
            food=tuple(self._food),
            direction=self._heading.value,
            score=self.score,
            steps=self.steps,
            game_over=self.game_over,
            death_reason=self.death_reason,
            width=self.size,
            height=self.size,
        )
