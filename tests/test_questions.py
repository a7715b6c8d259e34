from __future__ import annotations

from core.questions import (
    CHECKLIST_QUESTIONS,
    CONDITION_FIELDS,
    SECTIONS,
    FieldStatus,
    field_status,
    get_question,
    missing_required,
    progress,
    questions_by_section,
)


def test_catalog_shape() -> None:
    assert len(CHECKLIST_QUESTIONS) == 14
    assert {q.section for q in CHECKLIST_QUESTIONS} == set(SECTIONS)
    assert [field_id for field_id, _ in CONDITION_FIELDS] == [q.id for q in CHECKLIST_QUESTIONS]
    assert [q.id for q in questions_by_section("Linguagem")] == ["possui_print", "idioma"]


def test_get_question() -> None:
    question = get_question("card_aprovado")
    assert question is not None
    assert question.options == ("Sim", "Não")
    assert get_question("unknown") is None


def test_field_status() -> None:
    card = get_question("card_aprovado")
    label = get_question("qual_etiqueta")
    assert card is not None and label is not None

    assert field_status(card, {}) is FieldStatus.ERROR
    assert field_status(label, {}) is FieldStatus.NEUTRAL
    assert field_status(card, {"card_aprovado": "Não"}) is FieldStatus.WARNING
    assert field_status(card, {"card_aprovado": "Sim"}) is FieldStatus.SUCCESS
    # Free text typed into the field is accepted as-is.
    assert field_status(label, {"qual_etiqueta": "Outra"}) is FieldStatus.SUCCESS


def test_progress_and_missing_required() -> None:
    answers = {"fase": "Hotline", "card_aprovado": "Sim", "qual_etiqueta": "N/A", "ignored": "x"}
    current = progress(answers)
    assert current.completed == 3
    assert current.total == 14
    assert round(current.percentage) == 21

    missing = [q.id for q in missing_required(answers)]
    assert "fase" not in missing
    assert "qual_etiqueta" not in missing
    assert "temos_hotline" in missing
    assert len(missing) == 10
