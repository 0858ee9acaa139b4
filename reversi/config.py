# reversi/config.py
from dataclasses import dataclass, field
import os
import tomllib

@dataclass
class DisplayConfig:
    black: str = "◯"
    white: str = "●"
    empty: str = "-"
    marked: str = "*"

@dataclass
class Config:
    display: DisplayConfig = field(default_factory=DisplayConfig)
    log_level: str = "WARNING"

    @staticmethod
    def load_from_toml(path: str = "reversi.toml") -> "Config":
        cfg = Config()
        if not os.path.exists(path):
            return cfg
        with open(path, "rb") as f:
            raw = tomllib.load(f)
        for k, v in raw.get("display", {}).items():
            if hasattr(cfg.display, k):
                setattr(cfg.display, k, str(v))
        if "log_level" in raw:
            cfg.log_level = str(raw["log_level"]).upper()
        return cfg

# single globally importable config instance
CONFIG = Config.load_from_toml(os.environ.get("REVERSI_CONFIG_TOML", "reversi.toml"))
if os.environ.get("REVERSI_LOG_LEVEL"):
    CONFIG.log_level = os.environ["REVERSI_LOG_LEVEL"].upper()
