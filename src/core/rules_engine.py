"""Template building and matching logic (core domain)."""

from __future__ import annotations

from datetime import datetime
import logging
from typing import Iterable, List, Mapping, Optional
import uuid

from core.config import OutputConfig
from core.models import Template, TemplateMatch

LOGGER = logging.getLogger(__name__)

APPROVAL_QUESTION_ID = "card_aprovado"
APPROVED_VALUE = "Sim"
TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"
NO_TEMPLATE_SUGGESTION = (
    "Nenhum template correspondente encontrado. Configure templates na aba Configuração."
)


def build_templates(templates_config: Iterable[dict]) -> List[Template]:
    """Normalize template configs while keeping their order.

    Order matters for matching, so invalid entries are dropped in place
    rather than re-sorted.
    """

    built: List[Template] = []
    for entry in templates_config:
        if not isinstance(entry, dict):
            LOGGER.warning("Skipping template entry that is not an object: %r", entry)
            continue
        name = str(entry.get("name") or "").strip()
        code = str(entry.get("code") or "").strip()
        if not name or not code:
            LOGGER.warning("Skipping template without name or code: %r", entry)
            continue
        raw_conditions = entry.get("conditions") or {}
        if not isinstance(raw_conditions, dict):
            LOGGER.warning("Skipping template %s: conditions must be a mapping", name)
            continue
        conditions = {str(key): str(value) for key, value in raw_conditions.items()}
        built.append(
            Template(
                id=str(entry.get("id") or uuid.uuid4().hex),
                name=name,
                conditions=conditions,
                code=code,
                comment=str(entry.get("comment") or ""),
            )
        )
    return built


def template_matches(answers: Mapping[str, str], template: Template) -> bool:
    """True when every condition equals the answer exactly."""

    return all(answers.get(key) == value for key, value in template.conditions.items())


def build_fallback_code(
    answers: Mapping[str, str],
    now: Optional[datetime] = None,
    output: Optional[OutputConfig] = None,
) -> str:
    """Return ``<prefix>_<APR|REJ>_<YYYYMMDD_HHMMSS>`` from local time."""

    output = output or OutputConfig()
    moment = now or datetime.now()
    status = "APR" if answers.get(APPROVAL_QUESTION_ID) == APPROVED_VALUE else "REJ"
    return f"{output.code_prefix}_{status}_{moment.strftime(TIMESTAMP_FORMAT)}"


def match_template(
    answers: Mapping[str, str],
    templates: Iterable[Template],
    now: Optional[datetime] = None,
    output: Optional[OutputConfig] = None,
) -> TemplateMatch:
    """Return the first matching template, or the generated fallback.

    Matching logic:
    - Templates are checked in the given order; the first hit wins.
    - A template with no conditions matches any answer set.
    - There is no specificity ranking between templates.
    """

    for template in templates:
        if template_matches(answers, template):
            LOGGER.debug("Template %s matched", template.name)
            return TemplateMatch(
                code=template.code,
                suggestion=template.comment,
                matched=True,
                template_name=template.name,
            )

    return TemplateMatch(
        code=build_fallback_code(answers, now, output),
        suggestion=NO_TEMPLATE_SUGGESTION,
        matched=False,
    )
