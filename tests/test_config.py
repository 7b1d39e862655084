from __future__ import annotations

import pytest

from botcore.bootstrap import build_client
from botcore.config.loader import ClientConfig, load_config, load_config_from_env


def test_defaults() -> None:
    cfg = load_config()
    assert cfg == ClientConfig()
    assert cfg.partial_channels is True
    assert cfg.emit_deprecated_alias is True
    assert cfg.log_level == "INFO"


def test_load_from_mapping() -> None:
    cfg = load_config(
        {
            "partial_channels": "no",
            "emit_deprecated_alias": False,
            "log_level": "debug",
            "diagnostic_templates": {"unknown_interaction_type": "kind={{ value }}"},
        }
    )
    assert cfg.partial_channels is False
    assert cfg.emit_deprecated_alias is False
    assert cfg.log_level == "DEBUG"
    assert cfg.diagnostic_templates["unknown_interaction_type"] == "kind={{ value }}"


def test_unknown_keys_rejected() -> None:
    with pytest.raises(ValueError, match="Unknown config keys: shards"):
        load_config({"shards": 2})


def test_bad_bool_rejected() -> None:
    with pytest.raises(ValueError, match="partial_channels"):
        load_config({"partial_channels": "maybe"})


def test_load_from_env() -> None:
    cfg = load_config_from_env(
        environ={
            "BOTCORE_PARTIAL_CHANNELS": "0",
            "BOTCORE_EMIT_DEPRECATED_ALIAS": "true",
            "BOTCORE_LOG_LEVEL": "warning",
            "OTHER": "x",
        }
    )
    assert cfg.partial_channels is False
    assert cfg.emit_deprecated_alias is True
    assert cfg.log_level == "WARNING"


def test_build_client_applies_config() -> None:
    client = build_client({"partial_channels": False})
    client.actions.interaction_create.handle({"type": 99, "channel_id": "1"})
    assert len(client.channels) == 0
