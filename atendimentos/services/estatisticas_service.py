"""
Serviço de Estatísticas
Totais por tipo, no mês e na semana corrente
"""
from datetime import date, timedelta
from typing import Dict, Any, Optional
from atendimentos.core.config import TIPOS_ATENDIMENTO
from atendimentos.services.atendimento_service import AtendimentoService
from atendimentos.services.cache_service import CacheService


class EstatisticasService:
    """Serviço para estatísticas agregadas"""

    # Contém "atendimento": qualquer escrita invalida também as estatísticas
    CACHE_KEY = CacheService.gerar_chave("GET", "atendimentos_estatisticas")

    def __init__(self, atendimento_service: AtendimentoService):
        self.atendimento_service = atendimento_service

    @property
    def cache(self) -> CacheService:
        return self.atendimento_service.cache

    def obter_estatisticas(self, hoje: Optional[date] = None) -> Dict[str, Any]:
        """
        Obtém estatísticas dos atendimentos

        - Primeiro verifica cache
        - Se não houver cache, calcula a partir da listagem e armazena
        - A semana começa no domingo
        """
        if hoje is None:
            cached_result = self.cache.get(self.CACHE_KEY)
            if cached_result is not None:
                return cached_result

        geracao = self.cache.geracao
        referencia = hoje or date.today()
        primeiro_dia_mes = referencia.replace(day=1)
        primeiro_dia_semana = referencia - timedelta(days=(referencia.weekday() + 1) % 7)

        resultado = {
            "total": 0,
            "tipos": {tipo: 0 for tipo in TIPOS_ATENDIMENTO},
            "este_mes": 0,
            "esta_semana": 0,
        }

        for atendimento in self.atendimento_service.listar():
            resultado["total"] += 1
            if atendimento["tipo"] in resultado["tipos"]:
                resultado["tipos"][atendimento["tipo"]] += 1

            data_atendimento = date.fromisoformat(atendimento["dataISO"])
            if data_atendimento >= primeiro_dia_mes:
                resultado["este_mes"] += 1
            if data_atendimento >= primeiro_dia_semana:
                resultado["esta_semana"] += 1

        if hoje is None:
            self.cache.set(self.CACHE_KEY, resultado, geracao=geracao)
        return resultado
