"""Checklist question catalog and answer progress helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Mapping, Optional

from core.models import Question

YES_NO = ("Sim", "Não")

CHECKLIST_QUESTIONS: tuple[Question, ...] = (
    Question(
        "fase",
        "Fase",
        (
            "Hotline",
            "1ª Tentativa",
            "2ª Tentativa",
            "3ª Tentativa",
            "Última Tentativa",
            "Prioridade",
            "Mediação",
            "Notificação Extrajudicial",
            "Tratativas Especiais",
            "Gerenciamento de Parceiros",
        ),
        "Fase",
        required=True,
    ),
    Question("card_aprovado", "Card foi aprovado pelo cliente?", YES_NO, "N1", required=True),
    Question(
        "nova_tentativa",
        "É uma nova tentativa? Se sim, tivemos retorno no e-mail?",
        ("Sim, com retorno", "Não", "Sim, sem retorno"),
        "N1",
        required=True,
    ),
    Question("outro_card", "Existe outro card desse concorrente em fluxo?", YES_NO, "N1", required=True),
    Question(
        "possui_etiqueta",
        "Possui etiqueta de Prioridade, Concorrente não quer contato, Tratativa Atendimento ou NE Branddi?",
        YES_NO,
        "N1",
        required=True,
    ),
    Question(
        "qual_etiqueta",
        "Se sim, qual?",
        ("Prioridade", "Concorrente não quer contato", "Tratativa Atendimento", "NE Branddi", "N/A"),
        "N1",
    ),
    Question("temos_hotline", "Temos hotline?", YES_NO, "N1", required=True),
    Question(
        "site_remete_cliente",
        "O site do concorrente ou o garimpo remetem a algum cliente?",
        YES_NO,
        "OPEC",
        required=True,
    ),
    Question("conferido_lista", "Conferido na Lista de Clientes da Planilha", YES_NO, "OPEC", required=True),
    Question(
        "lideranca_liberou",
        "Se tiver relação, a liderança liberou a tratativa?",
        ("Sim", "Não", "N/A"),
        "OPEC",
    ),
    Question(
        "concorrente_lista_nao_contato",
        "Concorrente está na lista de ❌ Concorrentes para não entrar em contato?",
        YES_NO,
        "OPEC",
        required=True,
    ),
    Question(
        "agencias_parceiras",
        "Concorrente está na lista de Agencias Parceiras?",
        YES_NO,
        "OPEC",
        required=True,
    ),
    Question("possui_print", "Possui print?", YES_NO, "Linguagem", required=True),
    Question("idioma", "Idioma", ("🇧🇷 Português", "🇺🇸 Inglês", "🇪🇸 Espanhol"), "Linguagem", required=True),
)

SECTIONS = ("Fase", "N1", "OPEC", "Linguagem")

# Short labels used when picking template conditions.
CONDITION_FIELDS: tuple[tuple[str, str], ...] = (
    ("fase", "Fase"),
    ("card_aprovado", "Card foi aprovado pelo cliente?"),
    ("nova_tentativa", "É uma nova tentativa?"),
    ("outro_card", "Existe outro card desse concorrente em fluxo?"),
    ("possui_etiqueta", "Possui etiqueta especial?"),
    ("qual_etiqueta", "Qual etiqueta?"),
    ("temos_hotline", "Temos hotline?"),
    ("site_remete_cliente", "Site remete a algum cliente?"),
    ("conferido_lista", "Conferido na Lista de Clientes?"),
    ("lideranca_liberou", "Liderança liberou a tratativa?"),
    ("concorrente_lista_nao_contato", "Concorrente na lista de não contato?"),
    ("agencias_parceiras", "Concorrente na lista de Agências Parceiras?"),
    ("possui_print", "Possui print?"),
    ("idioma", "Idioma"),
)

# Answers that are valid but deserve a second look before sending.
WARNING_ANSWERS: dict[str, str] = {
    "concorrente_lista_nao_contato": "Sim",
    "card_aprovado": "Não",
    "nova_tentativa": "Sim, sem retorno",
}


class FieldStatus(str, Enum):
    NEUTRAL = "neutral"
    ERROR = "error"
    WARNING = "warning"
    SUCCESS = "success"


@dataclass(frozen=True)
class Progress:
    completed: int
    total: int

    @property
    def percentage(self) -> float:
        if not self.total:
            return 0.0
        return self.completed / self.total * 100


def get_question(question_id: str) -> Optional[Question]:
    for question in CHECKLIST_QUESTIONS:
        if question.id == question_id:
            return question
    return None


def questions_by_section(section: str) -> List[Question]:
    return [question for question in CHECKLIST_QUESTIONS if question.section == section]


def field_status(question: Question, answers: Mapping[str, str]) -> FieldStatus:
    """Classify one answer the way the form colors its field."""

    value = answers.get(question.id)
    if not value:
        return FieldStatus.ERROR if question.required else FieldStatus.NEUTRAL
    if WARNING_ANSWERS.get(question.id) == value:
        return FieldStatus.WARNING
    return FieldStatus.SUCCESS


def progress(answers: Mapping[str, str]) -> Progress:
    completed = sum(1 for question in CHECKLIST_QUESTIONS if answers.get(question.id))
    return Progress(completed=completed, total=len(CHECKLIST_QUESTIONS))


def missing_required(answers: Mapping[str, str]) -> List[Question]:
    return [q for q in CHECKLIST_QUESTIONS if q.required and not answers.get(q.id)]
