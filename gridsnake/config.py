"""Game configuration loaded from YAML and environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]
from dotenv import load_dotenv

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent / "configs" / "default.yaml"

# Environment variable -> config field
ENV_OVERRIDES = {
    "GRIDSNAKE_SIZE": "size",
    "GRIDSNAKE_SEED": "seed",
    "GRIDSNAKE_MAX_STEPS": "max_steps",
}


@dataclass
class GameConfig:
    """Settings for a game instance."""

    size: int = 10
    seed: int = 0
    max_steps: int | None = None  # Episode step limit, None for size * size * 10

    def __post_init__(self) -> None:
        if self.size < 2:
            raise ValueError(f"size must be at least 2, got {self.size}")
        if self.seed < 0:
            raise ValueError(f"seed must be non-negative, got {self.seed}")
        if self.max_steps is not None and self.max_steps <= 0:
            raise ValueError(f"max_steps must be positive, got {self.max_steps}")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GameConfig:
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown config keys: {sorted(unknown)}. Available: {sorted(known)}")
        return cls(**data)

    def to_dict(self) -> dict[str, Any]:
        return {"size": self.size, "seed": self.seed, "max_steps": self.max_steps}


def load_config(config_path: str | Path | None = None) -> GameConfig:
    """Load game configuration.

    Values come from the YAML file (its ``game`` section when present), then
    from ``GRIDSNAKE_*`` environment variables, which may also be set in a
    ``.env`` file.

    Args:
        config_path: YAML file to read, defaults to configs/default.yaml

    Returns:
        Validated GameConfig
    """
    load_dotenv()

    path = Path(config_path) if config_path is not None else DEFAULT_CONFIG_PATH
    data: dict[str, Any] = {}
    if path.exists():
        with open(path) as f:
            loaded = yaml.safe_load(f) or {}
        if not isinstance(loaded, dict):
            raise ValueError(f"Config file {path} must contain a mapping")
        data = dict(loaded.get("game", loaded) or {})
    elif config_path is not None:
        raise FileNotFoundError(f"Config file not found: {path}")

    for env_name, key in ENV_OVERRIDES.items():
        raw = os.environ.get(env_name)
        if raw is None or raw == "":
            continue
        try:
            data[key] = int(raw)
        except ValueError as e:
            raise ValueError(f"{env_name} must be an integer, got {raw!r}") from e

    return GameConfig.from_dict(data)
