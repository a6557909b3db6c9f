from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple


@dataclass
class GameState:
    """Snapshot of a Snake game for renderers and debugging."""

    snake: List[Tuple[int, int]]  # List of (x, y) tuples, head first
    food: Tuple[int, int]  # (x, y) position of food
    direction: str = "right"  # Current heading: "up", "down", "left", "right"
    score: int = 0  # Food eaten so far
    steps: int = 0  # Turns taken
    game_over: bool = False  # Whether the game has ended
    death_reason: Optional[str] = None  # "wall", "self", "board_full"
    width: int = 10  # Board width
    height: int = 10  # Board height

    def to_dict(self) -> dict:
        """Convert GameState to a dictionary for JSON serialization."""
        return {
            "snake": [{"x": x, "y": y} for x, y in self.snake],
            "food": {"x": self.food[0], "y": self.food[1]},
            "direction": self.direction,
            "score": self.score,
            "steps": self.steps,
            "game_over": self.game_over,
            "death_reason": self.death_reason,
            "width": self.width,
            "height": self.height,
        }

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        * = food
        H = snake head
        o = snake body
        Row 0 is printed first, matching screen coordinates.
        """
        board = [['.' for _ in range(self.width)] for _ in range(self.height)]

        fx, fy = self.food
        if 0 <= fx < self.width and 0 <= fy < self.height:
            board[fy][fx] = '*'

        for idx, (x, y) in enumerate(self.snake):
            if 0 <= x < self.width and 0 <= y < self.height:
                board[y][x] = 'H' if idx == 0 else 'o'

        return "\n".join(''.join(row) for row in board)
