from __future__ import annotations

from core.client_request import ClientRequest, format_request_comment, format_request_text


def test_empty_request_uses_placeholders() -> None:
    text = format_request_text(ClientRequest())
    lines = text.splitlines()
    assert lines[0] == "Tratativa Cliente x Cliente"
    assert "Cliente que solicita a negativação: [A]" in lines
    assert "Ex-Cliente que precisa negativar: [B]" in lines
    assert "Plataforma: [plataforma de ocorrência]" in lines
    assert "Print de Boa fé: Não fornecido" in lines
    assert "Solicitar ao ex-cliente [B] que negative os termos do cliente [A]" in lines
    assert "[Aguardando detalhamento]" in lines
    assert lines[-1] == "Código do form: [Código não informado]"


def test_filled_request_with_link() -> None:
    request = ClientRequest.from_dict(
        {
            "requesting_client": "Acme",
            "former_client": "Globex",
            "platform": "Google Ads",
            "brand_to_remove": "Acme Pro",
            "details": "Termos ativos desde março.",
            "form_code": "12345",
            "unknown_field": "dropped",
        }
    )
    comment = format_request_comment(request)
    assert "Solicitar ao ex-cliente Globex que negative os termos do cliente Acme" in comment
    assert "Exclusão da marca Acme Pro das campanhas" in comment
    assert comment.endswith("\n\nLink do card: https://app.pipefy.com/open-cards/12345")


def test_link_placeholder_without_code() -> None:
    comment = format_request_comment(ClientRequest())
    assert comment.endswith("https://app.pipefy.com/open-cards/[CÓDIGO]")
