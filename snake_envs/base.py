"""Base environment interface for driving the engine from an agent."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

import numpy as np


@dataclass
class GameMetadata:
    """Metadata about an environment."""

    name: str
    action_space_size: int
    action_names: list[str]
    observation_shape: tuple[int, ...]
    max_episode_steps: int = 1000


class BaseGameEnv(ABC):
    """Gymnasium-style base class for environments built on the engine.

    Observations are numpy arrays, actions are integer indices.
    """

    metadata: GameMetadata

    @abstractmethod
    def reset(self, seed: int | None = None) -> tuple[np.ndarray, dict[str, Any]]:
        """Start a new episode.

        Args:
            seed: Optional random seed for reproducibility

        Returns:
            observation: Initial observation
            info: Additional information dict
        """

    @abstractmethod
    def step(self, action: int) -> tuple[np.ndarray, float, bool, bool, dict[str, Any]]:
        """Execute one turn.

        Args:
            action: Integer action index

        Returns:
            observation: New observation
            reward: Reward for this step
            terminated: Episode ended in the game (wall, self, board full)
            truncated: Episode ended due to step limit
            info: Additional info (score, length, ...)
        """

    @abstractmethod
    def get_valid_actions(self) -> list[int]:
        """Return the action indices that change or keep the heading."""

    @abstractmethod
    def clone(self) -> BaseGameEnv:
        """Create an independent deep copy of the environment."""

    @abstractmethod
    def render_state(self) -> dict[str, Any]:
        """Return a JSON-ready state dict for a renderer."""

    @property
    def action_space_size(self) -> int:
        """Number of possible actions."""
        return self.metadata.action_space_size

    @property
    def observation_shape(self) -> tuple[int, ...]:
        """Shape of the observation array."""
        return self.metadata.observation_shape

    def get_observation(self) -> np.ndarray:
        """Get current observation without stepping."""
        raise NotImplementedError("Subclass must implement get_observation()")
