"""
Router de Atendimentos
Define as rotas CRUD de atendimentos

ESTRUTURA DAS RESPOSTAS:
{
  "success": true,
  "data": {...} | [...],
  "message": "..."
}
Erros: {"success": false, "message": "...", "errors": [...]}
"""
from fastapi import APIRouter, Depends, HTTPException, Query, Request
from typing import Optional
from atendimentos.core.exceptions import DadosInvalidosError, RepositorioError
from atendimentos.core.logger import get_logger
from atendimentos.models.schemas import (
    AtendimentoEntrada,
    ErrorResponse,
    RespostaAtendimento,
    RespostaListaAtendimentos,
    RespostaSimples,
    TipoAtendimento,
)
from atendimentos.services.atendimento_service import AtendimentoService, get_atendimento_service

router = APIRouter(prefix="/api", tags=["Atendimentos"])
logger = get_logger('atendimentos.routers')

MSG_NAO_ENCONTRADO = "Atendimento não encontrado"
RESPOSTAS_ERRO = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


def exigir_json(request: Request) -> None:
    """Rejeita POST/PUT cujo Content-Type não seja application/json"""
    content_type = request.headers.get("content-type", "")
    if content_type.split(";")[0].strip().lower() != "application/json":
        raise HTTPException(status_code=400, detail="Content-Type deve ser application/json")


def _erro_interno(acao: str, e: Exception) -> HTTPException:
    logger.error(f"Erro ao {acao}: {e}")
    return HTTPException(status_code=500, detail=f"Erro interno do servidor: {e}")


def _dados_invalidos(e: DadosInvalidosError) -> HTTPException:
    return HTTPException(status_code=400, detail={"message": str(e), "errors": e.erros})


@router.get(
    "/atendimentos",
    response_model=RespostaListaAtendimentos,
    summary="Listar atendimentos",
    description="""
    Lista os atendimentos, mais recentes primeiro.

    **Busca**: termo sem distinção de maiúsculas/acentos em nome, profissional ou observações

    **Tipo**: filtra por tipo de atendimento
    """,
    responses=RESPOSTAS_ERRO,
)
def listar_atendimentos(
    busca: Optional[str] = Query(None, description="Buscar por nome, profissional ou observações"),
    tipo: Optional[TipoAtendimento] = Query(None, description="Filtrar por tipo"),
    service: AtendimentoService = Depends(get_atendimento_service),
):
    try:
        atendimentos = service.listar(busca, tipo.value if tipo else None)
    except RepositorioError as e:
        raise _erro_interno("listar atendimentos", e)

    return {
        "success": True,
        "data": atendimentos,
        "total": len(atendimentos),
        "message": "Atendimentos listados com sucesso",
    }


@router.get(
    "/atendimento/{atendimento_id}",
    response_model=RespostaAtendimento,
    summary="Detalhes do atendimento",
    responses=RESPOSTAS_ERRO,
)
def obter_atendimento(atendimento_id: int, service: AtendimentoService = Depends(get_atendimento_service)):
    """
    Obtém um atendimento por ID

    Raises:
        400: ID inválido
        404: Atendimento não encontrado
    """
    try:
        atendimento = service.obter(atendimento_id)
    except RepositorioError as e:
        raise _erro_interno("buscar atendimento", e)

    if not atendimento:
        raise HTTPException(status_code=404, detail=MSG_NAO_ENCONTRADO)

    return {"success": True, "data": atendimento, "message": "Atendimento encontrado com sucesso"}


@router.post(
    "/atendimento",
    status_code=201,
    response_model=RespostaAtendimento,
    summary="Criar atendimento",
    dependencies=[Depends(exigir_json)],
    responses=RESPOSTAS_ERRO,
)
def criar_atendimento(
    entrada: AtendimentoEntrada,
    service: AtendimentoService = Depends(get_atendimento_service),
):
    try:
        atendimento = service.criar(entrada.model_dump())
    except DadosInvalidosError as e:
        raise _dados_invalidos(e)
    except RepositorioError as e:
        raise _erro_interno("criar atendimento", e)

    return {"success": True, "data": atendimento, "message": "Atendimento criado com sucesso"}


@router.put(
    "/atendimento/{atendimento_id}",
    response_model=RespostaAtendimento,
    summary="Atualizar atendimento",
    dependencies=[Depends(exigir_json)],
    responses=RESPOSTAS_ERRO,
)
def atualizar_atendimento(
    atendimento_id: int,
    entrada: AtendimentoEntrada,
    service: AtendimentoService = Depends(get_atendimento_service),
):
    try:
        atendimento = service.atualizar(atendimento_id, entrada.model_dump())
    except DadosInvalidosError as e:
        raise _dados_invalidos(e)
    except RepositorioError as e:
        raise _erro_interno("atualizar atendimento", e)

    if not atendimento:
        raise HTTPException(status_code=404, detail=MSG_NAO_ENCONTRADO)

    return {"success": True, "data": atendimento, "message": "Atendimento atualizado com sucesso"}


@router.delete(
    "/atendimento/{atendimento_id}",
    response_model=RespostaSimples,
    summary="Remover atendimento",
    responses=RESPOSTAS_ERRO,
)
def remover_atendimento(atendimento_id: int, service: AtendimentoService = Depends(get_atendimento_service)):
    try:
        removido = service.remover(atendimento_id)
    except RepositorioError as e:
        raise _erro_interno("deletar atendimento", e)

    if not removido:
        raise HTTPException(status_code=404, detail=MSG_NAO_ENCONTRADO)

    return {"success": True, "message": "Atendimento deletado com sucesso"}
