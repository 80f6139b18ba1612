"""Minimal strict schemas for YAML config validation."""

from __future__ import annotations

from exposures.common.errors import ConfigError


def _assert_required_keys(obj: dict, required: set[str], ctx: str) -> None:
    if not isinstance(obj, dict):
        raise ConfigError(f"{ctx} must be a mapping")
    missing = required - set(obj)
    if missing:
        missing_str = ", ".join(sorted(missing))
        raise ConfigError(f"Missing keys in {ctx}: {missing_str}")


def _assert_no_unknown_keys(obj: dict, known: set[str], ctx: str, allow_unknown: bool) -> None:
    if allow_unknown:
        return
    unknown = set(obj) - known
    if unknown:
        unknown_str = ", ".join(sorted(unknown))
        raise ConfigError(f"Unknown keys in {ctx}: {unknown_str}")


def _assert_string_list(value: object, ctx: str, *, allow_empty: bool = False) -> None:
    if not isinstance(value, list) or not all(isinstance(item, str) and item for item in value):
        raise ConfigError(f"{ctx} must be a list of non-empty strings")
    if not value and not allow_empty:
        raise ConfigError(f"{ctx} must be a non-empty list")


def validate_feed_config(cfg: dict, *, allow_unknown: bool = False) -> dict:
    top_required = {"feed", "vocabulary"}
    _assert_required_keys(cfg, top_required, "feed config")
    _assert_no_unknown_keys(cfg, top_required, "feed config", allow_unknown)

    _assert_required_keys(cfg["feed"], {"min_fields"}, "feed")
    _assert_no_unknown_keys(cfg["feed"], {"min_fields"}, "feed", allow_unknown)
    min_fields = cfg["feed"]["min_fields"]
    if isinstance(min_fields, bool) or not isinstance(min_fields, int) or min_fields < 1:
        raise ConfigError("feed.min_fields must be a positive integer")

    vocabulary_keys = {"statuses", "contacts", "states", "suburb_literals"}
    _assert_required_keys(cfg["vocabulary"], vocabulary_keys, "vocabulary")
    _assert_no_unknown_keys(cfg["vocabulary"], vocabulary_keys, "vocabulary", allow_unknown)
    for key in ("statuses", "contacts", "states"):
        _assert_string_list(cfg["vocabulary"][key], f"vocabulary.{key}")
    _assert_string_list(cfg["vocabulary"]["suburb_literals"], "vocabulary.suburb_literals", allow_empty=True)

    return cfg
