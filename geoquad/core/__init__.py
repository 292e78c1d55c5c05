from . import logger
from .settings import DEFAULT_CONFIG, QuadtreeConfig, apply_config, load_config

__all__ = ["logger", "DEFAULT_CONFIG", "QuadtreeConfig", "apply_config", "load_config"]
