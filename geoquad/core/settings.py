from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Dict, Optional, Union

from . import logger


@dataclass(frozen=True)
class QuadtreeConfig:
    """Shape parameters shared by every node of one tree.

    ``capacity`` is the number of points a leaf holds before it splits and
    ``max_depth`` is the depth at which leaves stop splitting and overflow
    instead. Changing either after points exist is the caller's problem:
    the structure already built is not revisited.
    """

    capacity: int = 8
    max_depth: int = 6
    debug: bool = False

    def __post_init__(self) -> None:
        if self.capacity < 1:
            raise ValueError(f"capacity must be >= 1, got {self.capacity}")
        if self.max_depth < 0:
            raise ValueError(f"max_depth must be >= 0, got {self.max_depth}")

    def to_dict(self) -> Dict[str, object]:
        return {"capacity": self.capacity, "max_depth": self.max_depth, "debug": self.debug}

    @classmethod
    def from_dict(cls, data: Dict[str, object]) -> "QuadtreeConfig":
        return cls(
            capacity=int(data.get("capacity", cls.capacity)),
            max_depth=int(data.get("max_depth", cls.max_depth)),
            debug=bool(data.get("debug", cls.debug)),
        )


DEFAULT_CONFIG = QuadtreeConfig()


def load_config(raw: Optional[Union[str, Dict[str, object]]]) -> QuadtreeConfig:
    if not raw:
        return DEFAULT_CONFIG

    if isinstance(raw, str):
        try:
            data = json.loads(raw)
        except json.JSONDecodeError:
            logger.logger.warning("Ignoring malformed quadtree config")
            return DEFAULT_CONFIG
    else:
        data = raw

    if not isinstance(data, dict):
        return DEFAULT_CONFIG
    return QuadtreeConfig.from_dict(data)


def apply_config(config: QuadtreeConfig) -> None:
    logger.set_debug(config.debug)
