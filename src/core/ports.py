"""Ports (interfaces) used around the core engine.

Ports define the minimal contracts for configuration adapters so that the
engine's callers can be reused with different backends.
"""

from __future__ import annotations

from typing import Callable, Protocol

from core.config import ChecklistConfig

ConfigListener = Callable[[ChecklistConfig], None]


class ConfigStorePort(Protocol):
    """Configuration operations required by a checklist session."""

    def load(self) -> ChecklistConfig:
        ...

    def save(self, config: ChecklistConfig) -> None:
        ...

    def subscribe(self, listener: ConfigListener) -> Callable[[], None]:
        ...
