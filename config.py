"""
YAML configuration for the all-pairs engine.

Example file:

    algebra: widest_path
    track_next_hops: true
    log_level: INFO
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping
import logging

from errors import ConfigError
from floyd_warshall_engine import FloydWarshallEngine
from path_algebra import ALGEBRAS, get_algebra


@dataclass(frozen=True)
class EngineConfig:
    algebra: str = "shortest_path"
    track_next_hops: bool = False
    log_level: str = "WARNING"


def parse_config(data: Mapping[str, Any] | None) -> EngineConfig:
    """Validate an already-decoded mapping and build an EngineConfig."""
    if data is None:
        return EngineConfig()
    if not isinstance(data, Mapping):
        raise ConfigError(f"engine config must be a mapping, got {type(data).__name__}")

    unknown = set(data) - {"algebra", "track_next_hops", "log_level"}
    if unknown:
        raise ConfigError(f"unknown config keys: {', '.join(sorted(unknown))}")

    algebra = data.get("algebra", EngineConfig.algebra)
    if not isinstance(algebra, str):
        raise ConfigError(f"algebra must be a preset name, got {algebra!r}")
    if algebra not in ALGEBRAS:
        raise ConfigError(f"unknown path algebra {algebra!r} (known: {', '.join(sorted(ALGEBRAS))})")

    track = data.get("track_next_hops", EngineConfig.track_next_hops)
    if not isinstance(track, bool):
        raise ConfigError(f"track_next_hops must be a boolean, got {track!r}")

    level = str(data.get("log_level", EngineConfig.log_level)).upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigError(f"unknown log level {level!r}")

    return EngineConfig(algebra=algebra, track_next_hops=track, log_level=level)


def load_config(path: Path) -> EngineConfig:
    import yaml  # type: ignore

    try:
        data = yaml.safe_load(Path(path).read_text())
    except yaml.YAMLError as exc:
        raise ConfigError(f"cannot parse {path}: {exc}") from exc
    return parse_config(data)


def configure_logging(config: EngineConfig) -> None:
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def build_engine(config: EngineConfig) -> FloydWarshallEngine:
    """Engine configured with the named algebra preset."""
    return FloydWarshallEngine(get_algebra(config.algebra), track_next_hops=config.track_next_hops)
