"""Text for "Cliente x Cliente" requests (core domain)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

CARD_URL = "https://app.pipefy.com/open-cards/{code}"
CARD_CODE_PLACEHOLDER = "[CÓDIGO]"
DEFAULT_GOOD_FAITH_PRINT = "Não fornecido"


@dataclass(frozen=True)
class ClientRequest:
    """One client asking that a former client negate its brand terms."""

    requesting_client: str = ""
    former_client: str = ""
    platform: str = ""
    good_faith_print: str = DEFAULT_GOOD_FAITH_PRINT
    brand_to_remove: str = ""
    details: str = ""
    form_code: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ClientRequest":
        known = cls.__dataclass_fields__
        values = {key: str(value) for key, value in data.items() if key in known and value is not None}
        return cls(**values)


def format_request_text(request: ClientRequest) -> str:
    requesting = request.requesting_client or "[A]"
    former = request.former_client or "[B]"
    lines = [
        "Tratativa Cliente x Cliente",
        "",
        f"Cliente que solicita a negativação: {requesting}",
        f"Ex-Cliente que precisa negativar: {former}",
        f"Plataforma: {request.platform or '[plataforma de ocorrência]'}",
        f"Print de Boa fé: {request.good_faith_print}",
        "",
        "Descrição da solicitação",
        f"Solicitar ao ex-cliente {former} que negative os termos do cliente {requesting}",
        (
            "E tambem, realize a Exclusão da marca "
            f"{request.brand_to_remove or '[C]'} das campanhas ativas na plataforma mencionada."
        ),
        "",
        "Detalhamento:",
        request.details or "[Aguardando detalhamento]",
        "",
        f"Código do form: {request.form_code or '[Código não informado]'}",
    ]
    return "\n".join(lines)


def card_link(request: ClientRequest) -> str:
    return CARD_URL.format(code=request.form_code or CARD_CODE_PLACEHOLDER)


def format_request_comment(request: ClientRequest) -> str:
    """Request text followed by the card link."""

    return f"{format_request_text(request)}\n\nLink do card: {card_link(request)}"
