"""JSON config store adapter.

Implements the core ConfigStorePort using a single JSON file, and notifies
subscribers after every successful write so callers never have to poll.
"""

from __future__ import annotations

from dataclasses import replace
import json
import logging
import os
from typing import Any, Callable, Optional
import uuid

from core.config import ChecklistConfig, ConfigError, OutputConfig, default_config, thaw
from core.models import Template
from core.ports import ConfigListener
from core.rules_engine import build_templates

LOGGER = logging.getLogger(__name__)


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    section = data.get(name) or {}
    if not isinstance(section, dict):
        raise ConfigError(f"{name} section must be a JSON object")
    return section


def config_from_dict(data: dict[str, Any]) -> ChecklistConfig:
    """Build a ChecklistConfig from the flat, user-friendly file schema.

    Missing sections fall back to the defaults, so partial files (and
    imports) merge over the shipped configuration.
    """

    if not isinstance(data, dict):
        raise ConfigError("Config root must be a JSON object")

    defaults = default_config()
    user = _section(data, "user")
    output = _section(data, "output")
    logging_cfg = _section(data, "logging")
    _section(logging_cfg, "file")

    if "templates" in data:
        raw_templates = data.get("templates") or []
        if not isinstance(raw_templates, list):
            raise ConfigError("templates must be a list")
        templates = tuple(build_templates(raw_templates))
    else:
        templates = defaults.templates

    return ChecklistConfig(
        responsible_name=str(user.get("name") or ""),
        templates=templates,
        output=OutputConfig(code_prefix=str(output.get("code_prefix") or defaults.output.code_prefix)),
        logging=logging_cfg,
    )


def config_to_dict(config: ChecklistConfig) -> dict[str, Any]:
    return {
        "user": {"name": config.responsible_name},
        "output": {"code_prefix": config.output.code_prefix},
        "templates": [template.to_dict() for template in config.templates],
        "logging": thaw(config.logging),
    }


def _read_json(path: str) -> dict[str, Any]:
    with open(path, "r", encoding="utf-8") as handle:
        try:
            return json.load(handle)
        except json.JSONDecodeError as exc:
            raise ConfigError(f"Invalid JSON in {path}: {exc}") from exc


def _write_json(path: str, data: dict[str, Any]) -> None:
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(path, "w", encoding="utf-8") as handle:
        json.dump(data, handle, ensure_ascii=False, indent=2)
        handle.write("\n")


class JsonConfigStore:
    """Thin JSON wrapper that satisfies the ConfigStorePort contract."""

    def __init__(self, path: str) -> None:
        self._path = path
        self._listeners: list[ConfigListener] = []

    @property
    def path(self) -> str:
        return self._path

    def load(self) -> ChecklistConfig:
        """Return the stored config, or the defaults when no file exists yet."""

        if not os.path.exists(self._path):
            return default_config()
        return config_from_dict(_read_json(self._path))

    def save(self, config: ChecklistConfig) -> None:
        _write_json(self._path, config_to_dict(config))
        LOGGER.info("Config saved to %s (%s templates)", self._path, len(config.templates))
        self._notify(config)

    def reset(self) -> ChecklistConfig:
        """Drop the stored file and fall back to the defaults."""

        if os.path.exists(self._path):
            os.remove(self._path)
        config = default_config()
        LOGGER.info("Config reset to defaults")
        self._notify(config)
        return config

    def export_to(self, path: str) -> None:
        _write_json(path, config_to_dict(self.load()))

    def import_from(self, path: str) -> ChecklistConfig:
        config = config_from_dict(_read_json(path))
        self.save(config)
        return config

    def set_responsible_name(self, name: str) -> ChecklistConfig:
        config = replace(self.load(), responsible_name=name.strip())
        self.save(config)
        return config

    def add_template(
        self,
        name: str,
        code: str,
        conditions: Optional[dict[str, str]] = None,
        comment: str = "",
    ) -> Template:
        """Append a template; order of insertion is the matching order."""

        if not name.strip() or not code.strip():
            raise ConfigError("Template name and code are required")
        template = Template(
            id=uuid.uuid4().hex,
            name=name.strip(),
            conditions=dict(conditions or {}),
            code=code.strip(),
            comment=comment,
        )
        config = self.load()
        self.save(replace(config, templates=config.templates + (template,)))
        return template

    def update_template(self, template: Template) -> None:
        if not template.name.strip() or not template.code.strip():
            raise ConfigError("Template name and code are required")
        config = self.load()
        if not any(existing.id == template.id for existing in config.templates):
            raise ConfigError(f"Unknown template id: {template.id}")
        templates = tuple(template if existing.id == template.id else existing for existing in config.templates)
        self.save(replace(config, templates=templates))

    def remove_template(self, template_id: str) -> bool:
        config = self.load()
        templates = tuple(existing for existing in config.templates if existing.id != template_id)
        if len(templates) == len(config.templates):
            return False
        self.save(replace(config, templates=templates))
        return True

    def subscribe(self, listener: ConfigListener) -> Callable[[], None]:
        """Register a listener and return a callable that removes it."""

        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _notify(self, config: ChecklistConfig) -> None:
        for listener in list(self._listeners):
            listener(config)
