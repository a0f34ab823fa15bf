"""Módulo models - schemas de entrada e resposta da API"""
from atendimentos.models.schemas import (
    TipoAtendimento,
    AtendimentoEntrada,
    Atendimento,
    RespostaAtendimento,
    RespostaListaAtendimentos,
    RespostaSimples,
    Estatisticas,
    RespostaEstatisticas,
    ErrorResponse,
)

__all__ = [
    "TipoAtendimento",
    "AtendimentoEntrada",
    "Atendimento",
    "RespostaAtendimento",
    "RespostaListaAtendimentos",
    "RespostaSimples",
    "Estatisticas",
    "RespostaEstatisticas",
    "ErrorResponse",
]
