"""
Validação e sanitização dos dados de atendimento
"""
from datetime import date, datetime
from typing import Any, Dict, List, Optional, Union
from atendimentos.core.config import TIPOS_ATENDIMENTO

TAMANHO_MINIMO_NOME = 2
TAMANHO_MAXIMO_OBSERVACOES = 500

MSG_NOME = "Nome deve ter pelo menos 2 caracteres"
MSG_PROFISSIONAL = "Profissional deve ter pelo menos 2 caracteres"
MSG_DATA_OBRIGATORIA = "Data é obrigatória"
MSG_DATA_INVALIDA = "Data inválida"
MSG_DATA_FUTURA = "Data não pode ser futura"
MSG_TIPO = "Tipo deve ser: Psicológico, Pedagógico ou Assistência Social"
MSG_OBSERVACOES = "Observações devem ter no máximo 500 caracteres"


def _limpar(valor: Any) -> Any:
    return valor.strip() if isinstance(valor, str) else valor


def sanitizar_atendimento(dados: Dict[str, Any]) -> Dict[str, Any]:
    """Remove espaços das bordas; observações ausentes viram string vazia"""
    return {
        "nome": _limpar(dados.get("nome")),
        "profissional": _limpar(dados.get("profissional")),
        "data": _limpar(dados.get("data")),
        "tipo": _limpar(dados.get("tipo")),
        "observacoes": _limpar(dados.get("observacoes")) or "",
    }


def converter_data(valor: Union[str, date]) -> date:
    """
    Converte a data recebida para `date`

    Aceita YYYY-MM-DD (datetime ISO é truncado para a data) ou DD/MM/YYYY.
    Levanta ValueError quando o formato não é reconhecido.
    """
    if isinstance(valor, datetime):
        return valor.date()
    if isinstance(valor, date):
        return valor
    if not isinstance(valor, str):
        raise ValueError(f"Data em formato não suportado: {valor!r}")

    if "/" in valor:
        return datetime.strptime(valor, "%d/%m/%Y").date()
    if len(valor) > 10 and valor[10] in ("T", " "):
        valor = valor[:10]
    return date.fromisoformat(valor)


def _texto_curto(valor: Any) -> bool:
    return not isinstance(valor, str) or len(valor) < TAMANHO_MINIMO_NOME


def validar_atendimento(dados: Dict[str, Any], hoje: Optional[date] = None) -> List[str]:
    """
    Valida dados (já sanitizados) de um atendimento

    Returns:
        Lista com todas as mensagens de erro; vazia quando os dados são válidos
    """
    hoje = hoje or date.today()
    erros = []

    if _texto_curto(dados.get("nome")):
        erros.append(MSG_NOME)

    if _texto_curto(dados.get("profissional")):
        erros.append(MSG_PROFISSIONAL)

    data = dados.get("data")
    if not data:
        erros.append(MSG_DATA_OBRIGATORIA)
    else:
        try:
            if converter_data(data) > hoje:
                erros.append(MSG_DATA_FUTURA)
        except ValueError:
            erros.append(MSG_DATA_INVALIDA)

    if dados.get("tipo") not in TIPOS_ATENDIMENTO:
        erros.append(MSG_TIPO)

    observacoes = dados.get("observacoes") or ""
    if len(observacoes) > TAMANHO_MAXIMO_OBSERVACOES:
        erros.append(MSG_OBSERVACOES)

    return erros
