from __future__ import annotations

from datetime import datetime

from core.config import OutputConfig
from core.models import Contact, Template
from core.processor import ChecklistEngine, generate_outputs
from core.rules_engine import NO_TEMPLATE_SUGGESTION

NOW = datetime(2024, 3, 5, 14, 30, 0)

HOTLINE = Template(
    id="1",
    name="Hotline Aprovado",
    conditions={"fase": "Hotline", "card_aprovado": "Sim", "temos_hotline": "Sim"},
    code="HTSPT1",
    comment="Enviar ciclo 1 de hotline",
)

RAW_CONTACTS = "\n".join(
    [
        "J.\tSmith\tJane Smith\tjane@x.com\t-\t-\t-\tNão",
        "B.\tJones\tBob Jones\tbob@x.com\t-\t-\t-\tSim",
    ]
)


def test_generate_outputs_with_matching_template() -> None:
    answers = {"fase": "Hotline", "card_aprovado": "Sim", "temos_hotline": "Sim"}
    outputs = generate_outputs(answers, RAW_CONTACTS, [HOTLINE], "Ana", now=NOW)

    assert outputs.code == "HTSPT1"
    assert outputs.suggestion == "Enviar ciclo 1 de hotline"
    assert outputs.matched
    assert outputs.template_name == "Hotline Aprovado"
    assert outputs.contacts == (Contact("Jane Smith", "jane@x.com"),)
    assert outputs.comment.startswith("Ana | X tentativa Hotline enviada em 05/03/2024\n")
    assert "Jane Smith | | jane@x.com" in outputs.comment
    assert "Bob Jones" not in outputs.comment


def test_generate_outputs_falls_back_without_match() -> None:
    answers = {"fase": "Hotline", "card_aprovado": "Não", "temos_hotline": "Sim"}
    outputs = generate_outputs(answers, "", [HOTLINE], "", now=NOW)

    assert outputs.code == "CHK_REJ_20240305_143000"
    assert outputs.suggestion == NO_TEMPLATE_SUGGESTION
    assert not outputs.matched
    assert outputs.contacts == ()
    assert "[Nome do contato] | | [E-mail do contato]" in outputs.comment
    assert outputs.comment.startswith("[Nome do responsavel] | X tentativa Hotline")


def test_engine_uses_clock_and_output_config() -> None:
    engine = ChecklistEngine(output=OutputConfig(code_prefix="OPS"), clock=lambda: NOW)
    outputs = engine.generate({"card_aprovado": "Sim"}, "", [], "Ana")
    assert outputs.code == "OPS_APR_20240305_143000"
    assert "enviada em 05/03/2024" in outputs.comment


def test_engine_is_stateless_between_calls() -> None:
    engine = ChecklistEngine(clock=lambda: NOW)
    first = engine.generate({"card_aprovado": "Sim"}, RAW_CONTACTS, [HOTLINE], "Ana")
    engine.generate({}, "", [], "")
    again = engine.generate({"card_aprovado": "Sim"}, RAW_CONTACTS, [HOTLINE], "Ana")
    assert first == again
