"""
Gerenciamento de conexão direta com o banco de dados (psycopg2)
"""
import psycopg2
from psycopg2.extras import RealDictCursor
from contextlib import contextmanager
from typing import Generator
from atendimentos.core.config import get_settings
from atendimentos.core.logger import get_logger

logger = get_logger('atendimentos.database')


@contextmanager
def get_db_connection() -> Generator:
    """
    Context manager para conexão com o banco de dados
    Garante rollback em caso de erro e fechamento da conexão após o uso
    """
    conn = None
    try:
        conn = psycopg2.connect(
            get_settings().database_url,
            cursor_factory=RealDictCursor
        )
        yield conn
    except Exception:
        if conn:
            conn.rollback()
        raise
    finally:
        if conn:
            conn.close()


def test_connection() -> bool:
    """Testa a conexão com o banco de dados"""
    try:
        with get_db_connection() as conn:
            with conn.cursor() as cur:
                cur.execute("SELECT 1")
                return True
    except psycopg2.Error as e:
        logger.error(f"Erro ao conectar ao banco: {e}")
        return False
