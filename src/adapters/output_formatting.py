"""Shared output rendering helpers.

Keeping formatting here prevents drift between the CLI commands and keeps
generated outputs consistent regardless of where they are shown.
"""

from __future__ import annotations

import json
from typing import Iterable

from rich.console import Group
from rich.markdown import Markdown
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.contacts import RowSummary
from core.models import Contact, GeneratedOutputs

NO_CONTACTS = "Nenhum contato extraído"


def format_emails(contacts: Iterable[Contact]) -> str:
    """Return emails joined the way the mail client expects them."""

    return "; ".join(contact.email for contact in contacts)


def format_contact_list(contacts: Iterable[Contact]) -> str:
    return "\n".join(f"{contact.name} - {contact.email}" for contact in contacts)


def _format_plain(outputs: GeneratedOutputs) -> str:
    emails = format_emails(outputs.contacts) or NO_CONTACTS
    lines = [
        f"Código gerado: {outputs.code}",
        f"Sugestão: {outputs.suggestion}",
        f"Emails: {emails}",
        "",
        outputs.comment.rstrip("\n"),
    ]
    return "\n".join(lines)


def _format_markdown(outputs: GeneratedOutputs) -> str:
    emails = format_emails(outputs.contacts) or NO_CONTACTS
    lines = [
        f"**Código gerado:** `{outputs.code}`",
        f"**Sugestão:** {outputs.suggestion}",
        f"**Emails:** {emails}",
        "",
        "---",
        "",
        outputs.comment.rstrip("\n"),
    ]
    return "\n".join(lines)


def _format_json(outputs: GeneratedOutputs) -> str:
    payload = {
        "code": outputs.code,
        "suggestion": outputs.suggestion,
        "comment": outputs.comment,
        "contacts": [{"name": c.name, "email": c.email} for c in outputs.contacts],
        "matched": outputs.matched,
        "template": outputs.template_name,
    }
    return json.dumps(payload, ensure_ascii=False, indent=2)


def format_outputs(outputs: GeneratedOutputs, mode: str) -> str:
    """Return the outputs formatted for the requested mode."""

    if mode == "plain":
        return _format_plain(outputs)
    if mode == "markdown":
        return _format_markdown(outputs)
    if mode == "json":
        return _format_json(outputs)
    raise ValueError(f"Unsupported output format: {mode}")


def build_outputs_panel(outputs: GeneratedOutputs) -> Panel:
    """Rich renderable used by the interactive CLI view."""

    status = Text("template", style="green") if outputs.matched else Text("fallback", style="yellow")
    header = Text.assemble(("Código: ", "bold"), outputs.code, "  ", status)
    if outputs.template_name:
        header.append(f" ({outputs.template_name})", style="dim")
    body = Group(
        header,
        Text.assemble(("Sugestão: ", "bold"), outputs.suggestion),
        Text.assemble(("Emails: ", "bold"), format_emails(outputs.contacts) or NO_CONTACTS),
        Text(""),
        Markdown(outputs.comment),
    )
    return Panel(body, title="Resultados Gerados", border_style="#2AABEE")


def build_contacts_table(contacts: Iterable[Contact], summary: RowSummary) -> Table:
    table = Table(
        title=f"Contatos: {summary.valid} válidos, {summary.ignored} ignorados, {summary.total} linhas",
    )
    table.add_column("#", justify="right")
    table.add_column("Nome")
    table.add_column("E-mail")
    for index, contact in enumerate(contacts, start=1):
        table.add_row(str(index), contact.name, contact.email)
    return table
