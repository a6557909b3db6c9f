from collections import deque

import pytest

from gridsnake.coord import Coord, Heading
from gridsnake.engine import SnakeGame
from gridsnake.free_cells import FreeCellIndex


def all_cells(size):
    return {Coord(x, y) for x in range(size) for y in range(size)}


@pytest.fixture
def arrange():
    """Build a game with a hand-placed body, heading and food."""

    def _arrange(body, heading=Heading.RIGHT, food=None, size=10, seed=0):
        game = SnakeGame(seed=seed, size=size)
        cells = [Coord(*c) for c in body]
        game._body = deque(cells)
        game._free = FreeCellIndex.full_board(size, cells)
        game._heading = heading
        if food is None:
            game._food = game._free.pick_uniform(game._rng)
        else:
            game._food = Coord(*food)
        return game

    return _arrange
