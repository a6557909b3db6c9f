"""Registry of environment factories."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from gridsnake.config import GameConfig
from snake_envs.base import BaseGameEnv


class GameRegistry:
    """Maps environment names to factories."""

    _games: dict[str, Callable[..., BaseGameEnv]] = {}

    @classmethod
    def register(cls, name: str, factory: Callable[..., BaseGameEnv]) -> None:
        """Register an environment factory.

        Args:
            name: Unique environment identifier
            factory: Callable that creates an environment from keyword args
        """
        cls._games[name] = factory

    @classmethod
    def create(
        cls, name: str, config: GameConfig | dict[str, Any] | None = None
    ) -> BaseGameEnv:
        """Create an environment instance.

        Args:
            name: Environment identifier
            config: GameConfig, or keyword arguments for the factory

        Returns:
            Environment instance
        """
        if name not in cls._games:
            raise ValueError(f"Unknown game: {name}. Available: {list(cls._games.keys())}")

        if isinstance(config, GameConfig):
            config = config.to_dict()
        return cls._games[name](**(config or {}))

    @classmethod
    def list_games(cls) -> list[str]:
        return list(cls._games.keys())

    @classmethod
    def has_game(cls, name: str) -> bool:
        return name in cls._games
