"""Checklist comment rendering (core domain).

The layout follows the fixed N1/OPEC checklist and does not read the question
catalog, so rewording a question in the form leaves the comment unchanged.
"""

from __future__ import annotations

from datetime import date
from typing import Iterable, Mapping, Optional

from core.models import Contact

UNANSWERED = "[Não respondido]"
RESPONSIBLE_PLACEHOLDER = "[Nome do responsavel]"
PHASE_PLACEHOLDER = "[Fase]"
CONTACT_PLACEHOLDER = "[Nome do contato] | | [E-mail do contato]"
DATE_FORMAT = "%d/%m/%Y"

REPORT_SECTIONS: tuple[tuple[str, tuple[tuple[str, str], ...]], ...] = (
    (
        "**Checklist N1:**",
        (
            ("Card foi aprovado pelo cliente?", "card_aprovado"),
            ("É uma nova tentativa? Se sim, tivemos retorno no e-mail?", "nova_tentativa"),
            ("Existe outro card desse concorrente em fluxo?", "outro_card"),
            (
                "Possui etiqueta de Prioridade, Concorrente não quer contato, "
                "Tratativa Atendimento ou NE Branddi?",
                "possui_etiqueta",
            ),
            ("Se sim, qual?", "qual_etiqueta"),
            ("Temos hotline?", "temos_hotline"),
        ),
    ),
    (
        "**Checagens no site de OPEC:**",
        (
            ("O site do concorrente ou o garimpo remetem a algum cliente?", "site_remete_cliente"),
            ("Conferido na Lista de Clientes da Planilha", "conferido_lista"),
            ("Se tiver relação, a liderança liberou a tratativa?", "lideranca_liberou"),
            (
                "Concorrente está na lista de ❌ Concorrentes para não entrar em contato?",
                "concorrente_lista_nao_contato",
            ),
            ("Concorrente está na lista de Agencias Parceiras?", "agencias_parceiras"),
        ),
    ),
)


def format_answer(value: Optional[str]) -> str:
    return f"**{value}**" if value else f"**{UNANSWERED}**"


def format_contact_line(contact: Contact) -> str:
    return f"{contact.name} | | {contact.email}"


def format_report(
    answers: Mapping[str, str],
    contacts: Iterable[Contact],
    responsible_name: str,
    today: Optional[date] = None,
) -> str:
    """Render the comment pasted into the card after a checklist run."""

    today = today or date.today()
    responsible = responsible_name or RESPONSIBLE_PLACEHOLDER
    phase = answers.get("fase") or PHASE_PLACEHOLDER

    lines = [
        f"{responsible} | X tentativa {phase} enviada em {today.strftime(DATE_FORMAT)}",
        "",
    ]
    for header, questions in REPORT_SECTIONS:
        lines.append(header)
        for label, question_id in questions:
            lines.append(f"{label} {format_answer(answers.get(question_id))}")
        lines.append("")

    lines.append("**Tratativas**")
    contact_lines = [format_contact_line(contact) for contact in contacts]
    lines.extend(contact_lines or [CONTACT_PLACEHOLDER])
    return "\n".join(lines) + "\n"
