"""Core checklist processing pipeline.

This module is presentation-agnostic. It composes contact extraction,
template matching and comment rendering into one output snapshot, so any
frontend can regenerate outputs on every input change.
"""

from __future__ import annotations

from datetime import datetime
import logging
from typing import Callable, Iterable, Mapping, Optional

from core.config import OutputConfig
from core.contacts import extract_contacts
from core.models import GeneratedOutputs, Template
from core.report import format_report
from core.rules_engine import match_template

LOGGER = logging.getLogger(__name__)


class ChecklistEngine:
    """Turns answers, pasted contacts and templates into outputs."""

    def __init__(
        self,
        output: Optional[OutputConfig] = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._output = output or OutputConfig()
        self._clock = clock

    def generate(
        self,
        answers: Mapping[str, str],
        raw_contact_text: str,
        templates: Iterable[Template],
        responsible_name: str,
    ) -> GeneratedOutputs:
        """Run one stateless pass over the inputs."""

        now = self._clock()
        contacts = extract_contacts(raw_contact_text)
        match = match_template(answers, templates, now=now, output=self._output)
        comment = format_report(answers, contacts, responsible_name, today=now.date())

        LOGGER.debug(
            "Generated outputs: code=%s matched=%s contacts=%s",
            match.code,
            match.matched,
            len(contacts),
        )
        return GeneratedOutputs(
            code=match.code,
            suggestion=match.suggestion,
            comment=comment,
            contacts=tuple(contacts),
            matched=match.matched,
            template_name=match.template_name,
        )


def generate_outputs(
    answers: Mapping[str, str],
    raw_contact_text: str,
    templates: Iterable[Template],
    responsible_name: str,
    now: Optional[datetime] = None,
) -> GeneratedOutputs:
    """Module-level entry point used by callers without an engine instance."""

    clock = (lambda: now) if now is not None else datetime.now
    return ChecklistEngine(clock=clock).generate(
        answers, raw_contact_text, templates, responsible_name
    )
