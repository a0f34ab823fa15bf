"""Módulo repositories - acesso ao armazenamento de atendimentos"""
from atendimentos.core.config import Settings
from atendimentos.repositories.base import AtendimentoRepositoryBase
from atendimentos.repositories.atendimento_repository import AtendimentoRepository
from atendimentos.repositories.atendimento_psycopg_repository import AtendimentoPsycopgRepository
from atendimentos.repositories.atendimento_memoria_repository import AtendimentoMemoriaRepository

BACKENDS = ("postgres_pool", "postgres", "memoria")


def get_repository(settings: Settings) -> AtendimentoRepositoryBase:
    """Escolhe a implementação conforme STORAGE_BACKEND"""
    backend = settings.storage_backend.lower()
    if backend == "postgres_pool":
        from atendimentos.core.database import get_engine
        return AtendimentoRepository(get_engine())
    if backend == "postgres":
        return AtendimentoPsycopgRepository()
    if backend == "memoria":
        return AtendimentoMemoriaRepository()
    raise ValueError(f"STORAGE_BACKEND inválido: {settings.storage_backend} (use {', '.join(BACKENDS)})")


__all__ = [
    "AtendimentoRepositoryBase",
    "AtendimentoRepository",
    "AtendimentoPsycopgRepository",
    "AtendimentoMemoriaRepository",
    "get_repository",
]
