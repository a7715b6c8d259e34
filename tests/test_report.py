from __future__ import annotations

from datetime import date

from core.models import Contact
from core.report import format_answer, format_report

TODAY = date(2024, 3, 5)

EMPTY_REPORT = """[Nome do responsavel] | X tentativa [Fase] enviada em 05/03/2024

**Checklist N1:**
Card foi aprovado pelo cliente? **[Não respondido]**
É uma nova tentativa? Se sim, tivemos retorno no e-mail? **[Não respondido]**
Existe outro card desse concorrente em fluxo? **[Não respondido]**
Possui etiqueta de Prioridade, Concorrente não quer contato, Tratativa Atendimento ou NE Branddi? **[Não respondido]**
Se sim, qual? **[Não respondido]**
Temos hotline? **[Não respondido]**

**Checagens no site de OPEC:**
O site do concorrente ou o garimpo remetem a algum cliente? **[Não respondido]**
Conferido na Lista de Clientes da Planilha **[Não respondido]**
Se tiver relação, a liderança liberou a tratativa? **[Não respondido]**
Concorrente está na lista de ❌ Concorrentes para não entrar em contato? **[Não respondido]**
Concorrente está na lista de Agencias Parceiras? **[Não respondido]**

**Tratativas**
[Nome do contato] | | [E-mail do contato]
"""


def test_format_answer() -> None:
    assert format_answer("Sim") == "**Sim**"
    assert format_answer("") == "**[Não respondido]**"
    assert format_answer(None) == "**[Não respondido]**"


def test_empty_inputs_render_placeholders() -> None:
    assert format_report({}, [], "", today=TODAY) == EMPTY_REPORT


def test_header_uses_name_and_phase() -> None:
    report = format_report({"fase": "Hotline"}, [], "Ana", today=TODAY)
    assert report.splitlines()[0] == "Ana | X tentativa Hotline enviada em 05/03/2024"
    assert report.splitlines()[1] == ""


def test_answers_are_bolded_in_fixed_order() -> None:
    answers = {
        "card_aprovado": "Sim",
        "temos_hotline": "Não",
        "agencias_parceiras": "Não",
        "possui_print": "Sim",
    }
    report = format_report(answers, [], "Ana", today=TODAY)
    lines = report.splitlines()
    assert lines[3] == "Card foi aprovado pelo cliente? **Sim**"
    assert lines[8] == "Temos hotline? **Não**"
    assert lines[15] == "Concorrente está na lista de Agencias Parceiras? **Não**"
    assert "Possui print?" not in report
    assert "****" not in report


def test_contacts_are_listed_in_order() -> None:
    contacts = [Contact("Jane Smith", "jane@x.com"), Contact("Bob", "bob@x.com")]
    report = format_report({}, contacts, "Ana", today=TODAY)
    assert report.endswith("**Tratativas**\nJane Smith | | jane@x.com\nBob | | bob@x.com\n")
    assert "[Nome do contato]" not in report


def test_report_is_deterministic() -> None:
    answers = {"fase": "Hotline", "card_aprovado": "Sim"}
    contacts = [Contact("Jane Smith", "jane@x.com")]
    first = format_report(answers, contacts, "Ana", today=TODAY)
    second = format_report(dict(answers), list(contacts), "Ana", today=TODAY)
    assert first == second
