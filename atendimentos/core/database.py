"""Conexão com banco de dados via SQLAlchemy (pool de conexões)"""
from functools import lru_cache
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from atendimentos.core.config import get_settings


@lru_cache()
def get_engine() -> Engine:
    """Engine único por processo; o pool é reaproveitado entre requisições"""
    settings = get_settings()
    return create_engine(
        settings.database_url,
        pool_pre_ping=True,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
    )
