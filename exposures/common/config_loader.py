"""Configuration loading and validation."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from exposures.common.errors import ConfigError
from exposures.common.fs import read_yaml
from exposures.common.models import Vocabulary
from exposures.common.schema import validate_feed_config

FEED_CONFIG_FILENAME = "feed.yml"


@dataclass(frozen=True)
class FeedConfig:
    min_fields: int
    vocabulary: Vocabulary


def _deep_merge(base: Any, overlay: Any) -> Any:
    if isinstance(base, dict) and isinstance(overlay, dict):
        merged = dict(base)
        for key, value in overlay.items():
            if key in merged:
                merged[key] = _deep_merge(merged[key], value)
            else:
                merged[key] = value
        return merged
    return overlay


def _load_yaml_with_overlay(path: Path, overlay_path: Path | None) -> dict:
    if not path.exists():
        raise ConfigError(f"Missing config file: {path}")
    base = read_yaml(path)
    if overlay_path is None or not overlay_path.exists():
        return base
    overlay = read_yaml(overlay_path)
    return _deep_merge(base, overlay)


def load_feed_config(
    config_dir: Path,
    *,
    allow_unknown: bool = False,
    overlay_config_dir: Path | None = None,
) -> FeedConfig:
    overlay_path = None
    if overlay_config_dir is not None:
        overlay_path = overlay_config_dir / FEED_CONFIG_FILENAME
    cfg = validate_feed_config(
        _load_yaml_with_overlay(config_dir / FEED_CONFIG_FILENAME, overlay_path),
        allow_unknown=allow_unknown,
    )
    vocabulary = cfg["vocabulary"]
    return FeedConfig(
        min_fields=cfg["feed"]["min_fields"],
        vocabulary=Vocabulary(
            statuses=tuple(vocabulary["statuses"]),
            contacts=tuple(vocabulary["contacts"]),
            states=tuple(vocabulary["states"]),
            suburb_literals=tuple(vocabulary["suburb_literals"]),
        ),
    )
