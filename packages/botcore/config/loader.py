from __future__ import annotations

import os
from dataclasses import dataclass, field, fields
from typing import Any, Mapping, Optional


_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class ClientConfig:
    # cache channels referenced by interactions as partials
    partial_channels: bool = True

    # also emit on the deprecated `interaction` alias channel
    emit_deprecated_alias: bool = True

    log_level: str = "INFO"

    # diagnostic template key -> jinja2 source (see botcore.diagnostics)
    diagnostic_templates: Mapping[str, str] = field(default_factory=dict)


def _as_bool(key: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise ValueError(f"Config '{key}' expects a boolean, got {value!r}")


def load_config(raw: Optional[Mapping[str, Any]] = None) -> ClientConfig:
    """
    Build a ClientConfig from a plain mapping (file/db/env blob).
    Unknown keys are rejected.
    """
    raw = dict(raw or {})
    known = {f.name for f in fields(ClientConfig)}
    unknown = set(raw) - known
    if unknown:
        raise ValueError(f"Unknown config keys: {', '.join(sorted(unknown))}")

    kwargs: dict[str, Any] = {}
    for key in ("partial_channels", "emit_deprecated_alias"):
        if key in raw:
            kwargs[key] = _as_bool(key, raw[key])

    if "log_level" in raw:
        kwargs["log_level"] = str(raw["log_level"]).upper()

    if "diagnostic_templates" in raw:
        templates = raw["diagnostic_templates"]
        if not isinstance(templates, Mapping):
            raise ValueError("Config 'diagnostic_templates' expects a mapping")
        kwargs["diagnostic_templates"] = {str(k): str(v) for k, v in templates.items()}

    return ClientConfig(**kwargs)


def load_config_from_env(prefix: str = "BOTCORE_", environ: Optional[Mapping[str, str]] = None) -> ClientConfig:
    """
    BOTCORE_PARTIAL_CHANNELS, BOTCORE_EMIT_DEPRECATED_ALIAS, BOTCORE_LOG_LEVEL.
    """
    env = os.environ if environ is None else environ
    raw: dict[str, Any] = {}
    for key in ("partial_channels", "emit_deprecated_alias", "log_level"):
        value = env.get(prefix + key.upper())
        if value is not None:
            raw[key] = value
    return load_config(raw)
