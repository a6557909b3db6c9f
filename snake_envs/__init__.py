"""Agent-facing environments built on the gridsnake engine."""

from snake_envs.base import BaseGameEnv, GameMetadata
from snake_envs.registry import GameRegistry
from snake_envs.snake_env import SensorSnakeEnv

__all__ = ["BaseGameEnv", "GameMetadata", "GameRegistry", "SensorSnakeEnv"]
