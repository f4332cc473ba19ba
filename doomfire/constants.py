# Host window settings, read from the environment at import
import os
from typing import NamedTuple, Optional

from doomfire.exceptions import ConfigurationError



class FireConfig(NamedTuple):
    width: int
    height: int
    cell_size: int
    tick_ms: int
    seed: Optional[int]


def _env_int(environ, name, default):
    raw = environ.get(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from None


def load_config(environ=None) -> FireConfig:
    """Read the window/simulation settings from environment variables."""
    environ = os.environ if environ is None else environ
    config = FireConfig(
        width=_env_int(environ, "FIRE_WIDTH", 800),
        height=_env_int(environ, "FIRE_HEIGHT", 600),
        cell_size=_env_int(environ, "FIRE_CELL_SIZE", 12),
        tick_ms=_env_int(environ, "FIRE_TICK_MS", 50),
        seed=_env_int(environ, "FIRE_SEED", None),
    )
    for name in ("width", "height", "cell_size", "tick_ms"):
        if getattr(config, name) <= 0:
            raise ConfigurationError(f"{name} must be positive, got {getattr(config, name)}")
    return config


_config = load_config()
FIRE_WIDTH = _config.width
FIRE_HEIGHT = _config.height
FIRE_CELL_SIZE = _config.cell_size
FIRE_TICK_MS = _config.tick_ms
FIRE_SEED = _config.seed
