"""
Modelos Pydantic para entrada e serialização de dados
"""
from enum import Enum
from pydantic import BaseModel, Field
from typing import Optional, List, Dict


class TipoAtendimento(str, Enum):
    PSICOLOGICO = "Psicológico"
    PEDAGOGICO = "Pedagógico"
    ASSISTENCIA_SOCIAL = "Assistência Social"


# === ATENDIMENTOS ===

class AtendimentoEntrada(BaseModel):
    """
    Corpo de criação/atualização

    Os campos são opcionais aqui para que a validação de negócio
    (AtendimentoService) reporte todos os erros de uma vez.
    """
    nome: Optional[str] = None
    profissional: Optional[str] = None
    data: Optional[str] = Field(None, description="YYYY-MM-DD ou DD/MM/YYYY")
    tipo: Optional[str] = Field(None, description="Psicológico, Pedagógico ou Assistência Social")
    observacoes: Optional[str] = Field(None, description="Máximo de 500 caracteres")

    model_config = {
        "json_schema_extra": {
            "example": {
                "nome": "Maria Silva",
                "profissional": "Dr. João Santos",
                "data": "2024-01-15",
                "tipo": "Psicológico",
                "observacoes": "Primeira consulta - ansiedade",
            }
        }
    }


class Atendimento(BaseModel):
    """Atendimento como retornado pela API"""
    id: int
    nome: str
    profissional: str
    data: str
    dataISO: str
    tipo: TipoAtendimento
    observacoes: str = ""
    createdAt: Optional[str] = None
    updatedAt: Optional[str] = None


# === RESPOSTAS ===

class RespostaAtendimento(BaseModel):
    success: bool = True
    data: Atendimento
    message: Optional[str] = None


class RespostaListaAtendimentos(BaseModel):
    success: bool = True
    data: List[Atendimento]
    total: int
    message: Optional[str] = None


class RespostaSimples(BaseModel):
    success: bool = True
    message: str


# === ESTATÍSTICAS ===

class Estatisticas(BaseModel):
    total: int
    tipos: Dict[str, int]
    este_mes: int
    esta_semana: int


class RespostaEstatisticas(BaseModel):
    success: bool = True
    data: Estatisticas


# === RESPOSTAS DE ERRO ===

class ErrorResponse(BaseModel):
    """Resposta de erro padrão"""
    success: bool = False
    message: str
    errors: Optional[List[str]] = None
