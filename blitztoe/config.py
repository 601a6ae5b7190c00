# blitztoe/config.py
from dataclasses import dataclass, field
from typing import Tuple
import os
import tomllib

from blitztoe.core.board import Player

FIRST_PLAYERS = {"ai": Player.AI, "human": Player.HUMAN}


@dataclass
class GameConfig:
    ai_mark: str = "X"
    human_mark: str = "O"
    empty_mark: str = "."
    first_player: str = "ai"  # the AI moves first unless told otherwise

    @property
    def marks(self) -> Tuple[str, str, str]:
        return self.ai_mark, self.human_mark, self.empty_mark

    @property
    def starting_player(self) -> Player:
        try:
            return FIRST_PLAYERS[self.first_player.lower()]
        except KeyError:
            raise ValueError(f"first_player must be 'ai' or 'human', got {self.first_player!r}") from None


@dataclass
class UIConfig:
    engine_name: str = "BlitzToe"
    show_nodes: bool = True


@dataclass
class Config:
    game: GameConfig = field(default_factory=GameConfig)
    ui: UIConfig = field(default_factory=UIConfig)
    log_level: str = "INFO"

    @staticmethod
    def load_from_toml(path: str = "config.toml") -> "Config":
        cfg = Config()
        if not os.path.exists(path):
            return cfg
        with open(path, "rb") as f:
            raw = tomllib.load(f)
        for section in ("game", "ui"):
            for k, v in raw.get(section, {}).items():
                if hasattr(getattr(cfg, section), k):
                    setattr(getattr(cfg, section), k, v)
        if "log_level" in raw:
            cfg.log_level = str(raw["log_level"])
        return cfg


# single globally importable config instance
CONFIG = Config.load_from_toml(os.environ.get("BLITZTOE_CONFIG_TOML", "config.toml"))
# allow env override of the log level for quick debugging
if os.environ.get("BLITZTOE_LOG_LEVEL"):
    CONFIG.log_level = os.environ["BLITZTOE_LOG_LEVEL"].upper()
