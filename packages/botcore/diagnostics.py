from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional

from jinja2 import Environment, StrictUndefined, Template, TemplateError

from .contracts.errors import UnrecognizedDiscriminant

logger = logging.getLogger(__name__)


DEFAULT_TEMPLATES: Mapping[str, str] = {
    "unknown_interaction_type": "[INTERACTION] Received interaction with unknown type: {{ value }}",
    "unknown_command_type": (
        "[INTERACTION] Received application command interaction with unknown type: {{ value }}"
    ),
    "unknown_component_type": "[INTERACTION] Received component interaction with unknown type: {{ value }}",
}


class DiagnosticTemplates:
    """
    Renders debug-channel messages from Jinja2 templates.

    Overrides come from client config. A template that fails to compile or
    render falls back to the built-in one, so rendering never raises.
    """

    def __init__(self, overrides: Optional[Mapping[str, str]] = None) -> None:
        self._env = Environment(undefined=StrictUndefined, autoescape=False)
        self._sources: Dict[str, str] = {**DEFAULT_TEMPLATES, **dict(overrides or {})}
        self._compiled: Dict[str, Template] = {}

    def render(self, key: str, **variables: Any) -> str:
        try:
            return self._template(key, self._sources.get(key)).render(**variables)
        except Exception:
            logger.exception("Diagnostic template %s failed, using default", key)

        default_src = DEFAULT_TEMPLATES.get(key)
        if default_src is None:
            return f"[{key}] {variables}"
        return self._env.from_string(default_src).render(**variables)

    def describe(self, signal: UnrecognizedDiscriminant) -> str:
        return self.render(signal.template_key, value=signal.value, field=signal.field, scope=signal.scope)

    def _template(self, key: str, source: Optional[str]) -> Template:
        if source is None:
            raise TemplateError(f"Template '{key}' not found")

        tpl = self._compiled.get(key)
        if tpl is None:
            tpl = self._env.from_string(source)
            self._compiled[key] = tpl
        return tpl
