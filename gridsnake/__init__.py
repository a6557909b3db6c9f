"""Grid snake game engine with directional sensors."""

from gridsnake.config import GameConfig, load_config
from gridsnake.coord import Coord, Direction, Heading
from gridsnake.engine import SnakeGame, TurnResult
from gridsnake.free_cells import BoardFull, FreeCellIndex
from gridsnake.sensors import SENSOR_DIRECTIONS
from gridsnake.state import GameState

__all__ = [
    "BoardFull",
    "Coord",
    "Direction",
    "FreeCellIndex",
    "GameConfig",
    "GameState",
    "Heading",
    "SENSOR_DIRECTIONS",
    "SnakeGame",
    "TurnResult",
    "load_config",
]
