"""
Router de Estatísticas
Define rotas para estatísticas agregadas dos atendimentos
"""
from fastapi import APIRouter, Depends, HTTPException
from atendimentos.core.exceptions import RepositorioError
from atendimentos.models.schemas import RespostaEstatisticas
from atendimentos.services.atendimento_service import AtendimentoService, get_atendimento_service
from atendimentos.services.estatisticas_service import EstatisticasService

router = APIRouter(prefix="/api", tags=["Estatísticas"])


def get_estatisticas_service(
    atendimento_service: AtendimentoService = Depends(get_atendimento_service),
) -> EstatisticasService:
    return EstatisticasService(atendimento_service)


@router.get(
    "/atendimentos/estatisticas",
    response_model=RespostaEstatisticas,
    summary="Estatísticas dos atendimentos",
    description="""
    Retorna totais agregados.

    **Inclui**:
    - Total de atendimentos
    - Quantidade por tipo
    - Atendimentos no mês e na semana corrente

    **Performance**: Resultado cacheado até a próxima escrita ou o fim do TTL
    """
)
def obter_estatisticas(service: EstatisticasService = Depends(get_estatisticas_service)):
    try:
        return {"success": True, "data": service.obter_estatisticas()}
    except RepositorioError as e:
        raise HTTPException(status_code=500, detail=f"Erro ao calcular estatísticas: {e}")
