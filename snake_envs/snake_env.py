"""Snake environment exposing the engine's sensor vectors as observations."""

from __future__ import annotations

import copy
import logging
from typing import Any

import numpy as np

from gridsnake.config import GameConfig
from gridsnake.coord import Heading
from gridsnake.engine import SnakeGame
from gridsnake.sensors import NUM_SENSORS
from snake_envs.base import BaseGameEnv, GameMetadata
from snake_envs.registry import GameRegistry

logger = logging.getLogger(__name__)


class SensorSnakeEnv(BaseGameEnv):
    """Gymnasium-style Snake environment with 24 sensor features.

    Observation is ``wall ‖ body ‖ food`` distances, eight rays each.
    Episode seeds advance by one on every reset without an explicit seed,
    so a run of episodes is reproducible from the first seed.
    """

    ACTION_MAP = {0: Heading.UP, 1: Heading.DOWN, 2: Heading.LEFT, 3: Heading.RIGHT}
    ACTION_NAMES = ["up", "down", "left", "right"]

    FOOD_REWARD = 10.0
    DEATH_PENALTY = -10.0
    STEP_PENALTY = -0.01

    def __init__(self, size: int = 10, seed: int = 0, max_steps: int | None = None):
        self.size = size
        self._max_steps = max_steps or size * size * 10
        self._game = SnakeGame(seed=seed, size=size)
        self._next_seed = seed
        self._step_count = 0
        self._done = False

        self.metadata = GameMetadata(
            name="snake",
            action_space_size=len(self.ACTION_MAP),
            action_names=self.ACTION_NAMES,
            observation_shape=(3 * NUM_SENSORS,),
            max_episode_steps=self._max_steps,
        )

    @classmethod
    def from_config(cls, config: GameConfig) -> SensorSnakeEnv:
        return cls(size=config.size, seed=config.seed, max_steps=config.max_steps)

    @property
    def game(self) -> SnakeGame:
        return self._game

    def reset(self, seed: int | None = None) -> tuple[np.ndarray, dict[str, Any]]:
        """Start a new game."""
        if seed is None:
            seed = self._next_seed
        self._next_seed = seed + 1

        self._game = SnakeGame(seed=seed, size=self.size)
        self._step_count = 0
        self._done = False

        return self.get_observation(), self._info()

    def step(self, action: int) -> tuple[np.ndarray, float, bool, bool, dict[str, Any]]:
        """Execute one turn.

        Raises:
            RuntimeError: If the episode already ended
            ValueError: If ``action`` is not a valid action index
        """
        if self._done:
            raise RuntimeError("Call reset() before step() after episode end")
        if action not in self.ACTION_MAP:
            raise ValueError(f"Invalid action: {action}. Expected one of {list(self.ACTION_MAP)}")

        score_before = self._game.score
        result = self._game.turn(self.ACTION_MAP[action])
        self._step_count += 1

        terminated = not result
        truncated = not terminated and self._step_count >= self._max_steps

        if terminated and self._game.death_reason != "board_full":
            reward = self.DEATH_PENALTY
        elif self._game.score > score_before:
            reward = self.FOOD_REWARD
        else:
            reward = self.STEP_PENALTY

        if terminated or truncated:
            self._done = True
            logger.info(
                "Episode finished after %d steps: score=%d length=%d reason=%s",
                self._step_count,
                self._game.score,
                self._game.length(),
                self._game.death_reason or "truncated",
            )

        return self.get_observation(), reward, terminated, truncated, self._info()

    def get_valid_actions(self) -> list[int]:
        """Every action except reversing into the body."""
        reverse = self._game.heading.opposite
        return [a for a, heading in self.ACTION_MAP.items() if heading is not reverse]

    def clone(self) -> SensorSnakeEnv:
        """Deep copy including the game's RNG state."""
        new_env = SensorSnakeEnv(size=self.size, max_steps=self._max_steps)
        new_env._game = copy.deepcopy(self._game)
        new_env._next_seed = self._next_seed
        new_env._step_count = self._step_count
        new_env._done = self._done
        return new_env

    def render_state(self) -> dict[str, Any]:
        return self._game.get_state().to_dict()

    def get_observation(self) -> np.ndarray:
        return self._game.sensor_vector()

    def _info(self) -> dict[str, Any]:
        return {
            "score": self._game.score,
            "length": self._game.length(),
            "death_reason": self._game.death_reason,
        }


GameRegistry.register("snake", SensorSnakeEnv)
