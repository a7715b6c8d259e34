"""Core configuration dataclasses.

We keep config parsing outside the core, but these dataclasses define the
shape the core expects so adapters and app layers can build safely.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

from core.models import Template

DEFAULT_CODE_PREFIX = "CHK"


class ConfigError(ValueError):
    """Raised when a config file or template definition is unusable."""


def _freeze(value: Any) -> Any:
    if isinstance(value, Mapping):
        return MappingProxyType({key: _freeze(item) for key, item in value.items()})
    if isinstance(value, list):
        return tuple(_freeze(item) for item in value)
    return value


def thaw(value: Any) -> Any:
    """Turn a frozen settings section back into plain, JSON-ready values."""

    if isinstance(value, Mapping):
        return {key: thaw(item) for key, item in value.items()}
    if isinstance(value, tuple):
        return [thaw(item) for item in value]
    return value


@dataclass(frozen=True)
class OutputConfig:
    """Fallback code settings consumed by the rule matcher."""

    code_prefix: str = DEFAULT_CODE_PREFIX


@dataclass(frozen=True)
class ChecklistConfig:
    """Everything the engine's caller needs from the settings store."""

    responsible_name: str = ""
    templates: tuple[Template, ...] = ()
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "logging", _freeze(self.logging))

    def __hash__(self) -> int:
        return hash((self.responsible_name, self.templates, self.output))


def default_templates() -> tuple[Template, ...]:
    return (
        Template(
            id="1",
            name="Hotline Aprovado",
            conditions={"fase": "Hotline", "card_aprovado": "Sim", "temos_hotline": "Sim"},
            code="HTSPT1",
            comment="Enviar ciclo 1 de hotline",
        ),
    )


def default_config() -> ChecklistConfig:
    return ChecklistConfig(templates=default_templates())
