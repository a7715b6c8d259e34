from __future__ import annotations

import json

import pytest
from rich.console import Console

from adapters.output_formatting import (
    NO_CONTACTS,
    build_outputs_panel,
    format_contact_list,
    format_emails,
    format_outputs,
)
from core.models import Contact, GeneratedOutputs

CONTACTS = (Contact("Jane Smith", "jane@x.com"), Contact("Bob", "bob@x.com"))


def _outputs(contacts: tuple[Contact, ...] = CONTACTS) -> GeneratedOutputs:
    return GeneratedOutputs(
        code="HTSPT1",
        suggestion="Enviar ciclo 1 de hotline",
        comment="Ana | X tentativa Hotline enviada em 05/03/2024\n",
        contacts=contacts,
        matched=True,
        template_name="Hotline Aprovado",
    )


def test_email_and_contact_lists() -> None:
    assert format_emails(CONTACTS) == "jane@x.com; bob@x.com"
    assert format_contact_list(CONTACTS) == "Jane Smith - jane@x.com\nBob - bob@x.com"
    assert format_emails([]) == ""


def test_plain_and_markdown_modes() -> None:
    plain = format_outputs(_outputs(), "plain")
    assert plain.startswith("Código gerado: HTSPT1\n")
    assert "Emails: jane@x.com; bob@x.com" in plain

    markdown = format_outputs(_outputs(contacts=()), "markdown")
    assert "**Código gerado:** `HTSPT1`" in markdown
    assert NO_CONTACTS in markdown


def test_json_mode() -> None:
    payload = json.loads(format_outputs(_outputs(), "json"))
    assert payload["code"] == "HTSPT1"
    assert payload["contacts"][0] == {"name": "Jane Smith", "email": "jane@x.com"}
    assert payload["template"] == "Hotline Aprovado"


def test_unknown_mode_raises() -> None:
    with pytest.raises(ValueError):
        format_outputs(_outputs(), "html")


def test_panel_renders() -> None:
    console = Console(record=True, width=120)
    console.print(build_outputs_panel(_outputs()))
    text = console.export_text()
    assert "HTSPT1" in text
    assert "Resultados Gerados" in text
