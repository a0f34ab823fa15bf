"""
Repositório de atendimentos com conexão direta (psycopg2)

Abre uma conexão por operação, sem pool
"""
from typing import Optional, List, Dict, Any
import psycopg2
from atendimentos.core.exceptions import RepositorioError
from atendimentos.database.connection import get_db_connection, test_connection
from atendimentos.database.schema import CREATE_TABLE_SQL, COLUNAS
from atendimentos.repositories.base import AtendimentoRepositoryBase


class AtendimentoPsycopgRepository(AtendimentoRepositoryBase):

    def criar_estrutura(self) -> None:
        try:
            with get_db_connection() as conn:
                with conn.cursor() as cur:
                    cur.execute(CREATE_TABLE_SQL)
                conn.commit()
        except psycopg2.Error as e:
            raise RepositorioError(f"Erro ao criar tabela: {e}") from e

    def contar(self) -> int:
        try:
            with get_db_connection() as conn:
                with conn.cursor() as cur:
                    cur.execute("SELECT COUNT(*) AS total FROM atendimento")
                    return cur.fetchone()['total']
        except psycopg2.Error as e:
            raise RepositorioError(f"Erro ao contar atendimentos: {e}") from e

    def listar(self) -> List[Dict[str, Any]]:
        try:
            with get_db_connection() as conn:
                with conn.cursor() as cur:
                    cur.execute(f"""
                        SELECT {COLUNAS}
                        FROM atendimento
                        ORDER BY data DESC, created_at DESC
                    """)
                    return [dict(row) for row in cur.fetchall()]
        except psycopg2.Error as e:
            raise RepositorioError(f"Erro ao buscar atendimentos: {e}") from e

    def obter(self, atendimento_id: int) -> Optional[Dict[str, Any]]:
        try:
            with get_db_connection() as conn:
                with conn.cursor() as cur:
                    cur.execute(f"SELECT {COLUNAS} FROM atendimento WHERE id = %s", (atendimento_id,))
                    row = cur.fetchone()
                    return dict(row) if row else None
        except psycopg2.Error as e:
            raise RepositorioError(f"Erro ao buscar atendimento: {e}") from e

    def criar(self, dados: Dict[str, Any]) -> Dict[str, Any]:
        try:
            with get_db_connection() as conn:
                with conn.cursor() as cur:
                    cur.execute(
                        f"""
                        INSERT INTO atendimento (nome, profissional, data, tipo, observacoes)
                        VALUES (%s, %s, %s, %s, %s)
                        RETURNING {COLUNAS}
                        """,
                        (dados["nome"], dados["profissional"], dados["data"],
                         dados["tipo"], dados.get("observacoes", "")),
                    )
                    row = cur.fetchone()
                conn.commit()
                return dict(row)
        except psycopg2.Error as e:
            raise RepositorioError(f"Erro ao criar atendimento: {e}") from e

    def atualizar(self, atendimento_id: int, dados: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        try:
            with get_db_connection() as conn:
                with conn.cursor() as cur:
                    cur.execute(
                        f"""
                        UPDATE atendimento
                        SET nome = %s, profissional = %s, data = %s, tipo = %s,
                            observacoes = %s, updated_at = CURRENT_TIMESTAMP
                        WHERE id = %s
                        RETURNING {COLUNAS}
                        """,
                        (dados["nome"], dados["profissional"], dados["data"],
                         dados["tipo"], dados.get("observacoes", ""), atendimento_id),
                    )
                    row = cur.fetchone()
                conn.commit()
                return dict(row) if row else None
        except psycopg2.Error as e:
            raise RepositorioError(f"Erro ao atualizar atendimento: {e}") from e

    def remover(self, atendimento_id: int) -> bool:
        try:
            with get_db_connection() as conn:
                with conn.cursor() as cur:
                    cur.execute("DELETE FROM atendimento WHERE id = %s RETURNING id", (atendimento_id,))
                    removido = cur.fetchone() is not None
                conn.commit()
                return removido
        except psycopg2.Error as e:
            raise RepositorioError(f"Erro ao deletar atendimento: {e}") from e

    def ping(self) -> bool:
        return test_connection()
