import pytest

from exposures.common.errors import ConfigError
from exposures.common.schema import validate_feed_config


def _valid() -> dict:
    return {
        "feed": {"min_fields": 9},
        "vocabulary": {
            "statuses": ["New"],
            "contacts": ["Close"],
            "states": ["ACT"],
            "suburb_literals": [],
        },
    }


def test_validate_feed_config_accepts_valid_config():
    cfg = _valid()
    assert validate_feed_config(cfg) is cfg


def test_validate_feed_config_missing_keys():
    cfg = _valid()
    del cfg["vocabulary"]["contacts"]
    with pytest.raises(ConfigError, match="Missing keys in vocabulary: contacts"):
        validate_feed_config(cfg)


def test_validate_feed_config_unknown_keys():
    cfg = _valid()
    cfg["extra"] = True
    with pytest.raises(ConfigError, match="Unknown keys in feed config: extra"):
        validate_feed_config(cfg)
    assert validate_feed_config(cfg, allow_unknown=True) is cfg


@pytest.mark.parametrize("value", [0, -1, "9", True])
def test_validate_feed_config_rejects_bad_min_fields(value):
    cfg = _valid()
    cfg["feed"]["min_fields"] = value
    with pytest.raises(ConfigError, match="min_fields"):
        validate_feed_config(cfg)


def test_validate_feed_config_rejects_empty_vocabulary():
    cfg = _valid()
    cfg["vocabulary"]["states"] = []
    with pytest.raises(ConfigError, match="vocabulary.states"):
        validate_feed_config(cfg)


def test_validate_feed_config_rejects_non_mapping():
    with pytest.raises(ConfigError, match="must be a mapping"):
        validate_feed_config(None)
