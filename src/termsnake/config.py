# src/termsnake/config.py
from dataclasses import dataclass, replace
import os
from typing import Optional

from dotenv import find_dotenv, load_dotenv

# ----- Grid -----
GRID_W, GRID_H = 25, 20
CELL_SIZE = 24

# ----- Colors -----
BG     = (20, 20, 24)
BORDER = (70, 190, 200)
GREEN  = (80, 200, 80)
HEAD   = (150, 250, 150)
RED    = (200, 70, 70)
TEXT   = (220, 220, 230)
YELLOW = (230, 210, 90)

# Height of the score bar under the board, in pixels
STATUS_H = 28

ENV_PREFIX = "TERMSNAKE_"


def _env_int(name: str, default: Optional[int]) -> Optional[int]:
    v = os.getenv(ENV_PREFIX + name)
    if v is None or v.strip() == "":
        return default
    try:
        return int(v)
    except ValueError:
        return default


# ----- Tunables -----
@dataclass(frozen=True)
class Config:
    width: int = GRID_W
    height: int = GRID_H
    tick_ms: int = 120
    reward: int = 10
    cell_size: int = CELL_SIZE
    seed: Optional[int] = None
    input_buffer: int = 1

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None) -> "Config":
        """Build a config from TERMSNAKE_* variables (a .env file is loaded first)."""
        load_dotenv(dotenv_path or find_dotenv(usecwd=True))
        cfg = cls(
            width=_env_int("WIDTH", GRID_W),
            height=_env_int("HEIGHT", GRID_H),
            tick_ms=_env_int("TICK_MS", 120),
            reward=_env_int("REWARD", 10),
            cell_size=_env_int("CELL_SIZE", CELL_SIZE),
            seed=_env_int("SEED", None),
        )
        return cfg.validate()

    def override(self, **changes) -> "Config":
        """Copy with the given fields replaced; None values are skipped."""
        changes = {k: v for k, v in changes.items() if v is not None}
        return replace(self, **changes).validate()

    def validate(self) -> "Config":
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Grid must be at least 1x1, got {self.width}x{self.height}")
        if self.tick_ms <= 0:
            raise ValueError(f"tick_ms must be positive, got {self.tick_ms}")
        if self.reward < 0:
            raise ValueError(f"reward must not be negative, got {self.reward}")
        if self.cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {self.cell_size}")
        if self.input_buffer < 1:
            raise ValueError(f"input_buffer must be at least 1, got {self.input_buffer}")
        return self

    @property
    def tick_seconds(self) -> float:
        return self.tick_ms / 1000.0


CFG = Config()
