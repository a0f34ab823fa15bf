"""
Serviço de Atendimentos
Contém a lógica de negócio: sanitização, validação, cache e formatação
"""
import unicodedata
from datetime import date, datetime
from functools import lru_cache
from typing import List, Optional, Dict, Any
from atendimentos.core.config import get_settings
from atendimentos.core.exceptions import DadosInvalidosError
from atendimentos.core.logger import get_logger
from atendimentos.repositories import AtendimentoRepositoryBase, get_repository
from atendimentos.services.cache_service import CacheService
from atendimentos.services.validacao import (
    converter_data,
    sanitizar_atendimento,
    validar_atendimento,
)

logger = get_logger('atendimentos.service')


def formatar_data(valor: Optional[date]) -> str:
    """Formata data no padrão brasileiro (dd/mm/yyyy)"""
    if not valor:
        return ''
    return valor.strftime('%d/%m/%Y')


def _iso(valor: Any) -> Optional[str]:
    if isinstance(valor, (date, datetime)):
        return valor.isoformat()
    return valor


def mapear_para_resposta(registro: Dict[str, Any]) -> Dict[str, Any]:
    """Mapeia o registro do armazenamento para o formato da API"""
    return {
        "id": registro["id"],
        "nome": registro["nome"],
        "profissional": registro["profissional"],
        "data": formatar_data(registro["data"]),
        "dataISO": _iso(registro["data"]),
        "tipo": registro["tipo"],
        "observacoes": registro.get("observacoes") or "",
        "createdAt": _iso(registro.get("created_at")),
        "updatedAt": _iso(registro.get("updated_at")),
    }


def normalizar_busca(texto: Optional[str]) -> str:
    """Minúsculas e sem acentos, para comparação na busca"""
    if not texto:
        return ''
    decomposto = unicodedata.normalize('NFD', texto.lower().strip())
    return ''.join(c for c in decomposto if unicodedata.category(c) != 'Mn')


def filtrar_atendimentos(
    atendimentos: List[Dict[str, Any]],
    busca: Optional[str] = None,
    tipo: Optional[str] = None,
) -> List[Dict[str, Any]]:
    """Filtra por termo (nome, profissional ou observações) e por tipo"""
    filtrados = atendimentos
    termo = normalizar_busca(busca)
    if termo:
        filtrados = [
            a for a in filtrados
            if any(termo in normalizar_busca(a.get(campo)) for campo in ("nome", "profissional", "observacoes"))
        ]
    if tipo:
        filtrados = [a for a in filtrados if a["tipo"] == tipo]
    return filtrados


class AtendimentoService:
    """Serviço para operações CRUD com atendimentos"""

    CHAVE_LISTA = CacheService.gerar_chave("GET", "atendimentos")

    def __init__(self, repository: AtendimentoRepositoryBase, cache: CacheService):
        self.repository = repository
        self.cache = cache

    @staticmethod
    def chave_detalhe(atendimento_id: int) -> str:
        return CacheService.gerar_chave("GET", f"atendimento/{atendimento_id}")

    def listar(self, busca: Optional[str] = None, tipo: Optional[str] = None) -> List[Dict[str, Any]]:
        """
        Lista atendimentos (mais recentes primeiro)

        A listagem completa fica no cache; os filtros são aplicados sobre ela.
        """
        atendimentos = self.cache.get(self.CHAVE_LISTA)
        if atendimentos is None:
            geracao = self.cache.geracao
            atendimentos = [mapear_para_resposta(r) for r in self.repository.listar()]
            self.cache.set(self.CHAVE_LISTA, atendimentos, geracao=geracao)
        return filtrar_atendimentos(atendimentos, busca, tipo)

    def obter(self, atendimento_id: int) -> Optional[Dict[str, Any]]:
        chave = self.chave_detalhe(atendimento_id)
        atendimento = self.cache.get(chave)
        if atendimento is not None:
            return atendimento

        geracao = self.cache.geracao
        registro = self.repository.obter(atendimento_id)
        if registro is None:
            return None
        atendimento = mapear_para_resposta(registro)
        self.cache.set(chave, atendimento, geracao=geracao)
        return atendimento

    def criar(self, dados: Dict[str, Any]) -> Dict[str, Any]:
        registro = self.repository.criar(self._preparar(dados))
        self.cache.invalidate("atendimentos")
        logger.info(f"Atendimento criado com sucesso! ID: {registro['id']}")
        return mapear_para_resposta(registro)

    def atualizar(self, atendimento_id: int, dados: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        registro = self.repository.atualizar(atendimento_id, self._preparar(dados))
        if registro is None:
            return None
        self.cache.invalidate("atendimento")
        logger.info(f"Atendimento {atendimento_id} atualizado com sucesso")
        return mapear_para_resposta(registro)

    def remover(self, atendimento_id: int) -> bool:
        removido = self.repository.remover(atendimento_id)
        if removido:
            self.cache.invalidate("atendimento")
            logger.info(f"Atendimento {atendimento_id} deletado com sucesso")
        return removido

    @staticmethod
    def _preparar(dados: Dict[str, Any]) -> Dict[str, Any]:
        """Sanitiza, valida e converte a data; levanta DadosInvalidosError"""
        sanitizados = sanitizar_atendimento(dados)
        erros = validar_atendimento(sanitizados)
        if erros:
            logger.warning(f"Dados inválidos recebidos: {erros}")
            raise DadosInvalidosError(erros)
        sanitizados["data"] = converter_data(sanitizados["data"])
        return sanitizados


@lru_cache()
def get_cache_service() -> CacheService:
    settings = get_settings()
    return CacheService(maxsize=settings.cache_maxsize, ttl=settings.cache_ttl_seconds)


@lru_cache()
def get_atendimento_service() -> AtendimentoService:
    """Instância única do serviço, montada a partir das configurações"""
    return AtendimentoService(get_repository(get_settings()), get_cache_service())
