"""Core domain models.

These dataclasses are shared across the core and adapters to avoid tight
coupling to any storage or presentation-specific types.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class Contact:
    """A validated contact extracted from pasted text."""

    name: str
    email: str


@dataclass(frozen=True)
class Question:
    """One checklist question as shown by the form layer."""

    id: str
    question: str
    options: tuple[str, ...]
    section: str
    required: bool = False


@dataclass(frozen=True)
class Template:
    """Named condition set plus the code/comment emitted when it matches."""

    id: str
    name: str
    conditions: Mapping[str, str] = field(default_factory=dict)
    code: str = ""
    comment: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "conditions", MappingProxyType(dict(self.conditions)))

    def __hash__(self) -> int:
        return hash((self.id, self.name, tuple(sorted(self.conditions.items())), self.code, self.comment))

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "conditions": dict(self.conditions),
            "code": self.code,
            "comment": self.comment,
        }


@dataclass(frozen=True)
class RawRow:
    """Columnar view of one pasted line."""

    raw_line: str
    columns: tuple[str, ...]
    should_ignore: bool
    name: str
    email: str


@dataclass(frozen=True)
class TemplateMatch:
    """Result of template matching, either a template hit or the fallback."""

    code: str
    suggestion: str
    matched: bool
    template_name: Optional[str] = None


@dataclass(frozen=True)
class GeneratedOutputs:
    """Snapshot returned by the engine for one set of inputs."""

    code: str
    suggestion: str
    comment: str
    contacts: tuple[Contact, ...]
    matched: bool
    template_name: Optional[str] = None
