from dataclasses import dataclass, field
import os
import tomllib

from loguru import logger


@dataclass
class SearchConfig:
    default_limit: int = 5000  # cap used when solve() is called without one


@dataclass
class BoardConfig:
    default_size: int = 8
    default_queens: int = 8
    default_limit: int = 1000  # "find all" cap
    min_size: int = 1
    max_size: int = 20
    max_limit: int = 100000


@dataclass
class UIConfig:
    app_name: str = "N-Queens Visualizer"
    queen_glyph: str = "Q"
    empty_glyph: str = "."
    search_delay_ms: int = 10


@dataclass
class Config:
    search: SearchConfig = field(default_factory=SearchConfig)
    board: BoardConfig = field(default_factory=BoardConfig)
    ui: UIConfig = field(default_factory=UIConfig)
    log_level: str = "INFO"

    @staticmethod
    def load_from_toml(path: str = "config.toml") -> "Config":
        cfg = Config()
        if not os.path.exists(path):
            return cfg
        with open(path, "rb") as f:
            raw = tomllib.load(f)
        for section in ("search", "board", "ui"):
            target = getattr(cfg, section)
            for k, v in raw.get(section, {}).items():
                if hasattr(target, k):
                    setattr(target, k, v)
        if "log_level" in raw:
            cfg.log_level = str(raw["log_level"]).upper()
        return cfg


# single globally importable config instance
CONFIG = Config.load_from_toml(os.environ.get("KQUEENS_CONFIG_TOML", "config.toml"))
# allow env override of the engine's default limit for quick debugging
_override_limit = os.environ.get("KQUEENS_SEARCH_LIMIT")
if _override_limit:
    try:
        CONFIG.search.default_limit = int(_override_limit)
    except ValueError:
        logger.warning(f"Ignoring KQUEENS_SEARCH_LIMIT={_override_limit!r}: not an integer")
