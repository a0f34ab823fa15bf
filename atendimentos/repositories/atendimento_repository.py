"""Repositório de atendimentos sobre o pool do SQLAlchemy"""
from typing import Optional, List, Dict, Any
from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from atendimentos.core.exceptions import RepositorioError
from atendimentos.database.schema import CREATE_TABLE_SQL, COLUNAS
from atendimentos.repositories.base import AtendimentoRepositoryBase


class AtendimentoRepository(AtendimentoRepositoryBase):

    def __init__(self, engine: Engine):
        self.engine = engine

    def criar_estrutura(self) -> None:
        try:
            with self.engine.begin() as conn:
                conn.execute(text(CREATE_TABLE_SQL))
        except SQLAlchemyError as e:
            raise RepositorioError(f"Erro ao criar tabela: {e}") from e

    def contar(self) -> int:
        try:
            with self.engine.connect() as conn:
                return conn.execute(text("SELECT COUNT(*) AS total FROM atendimento")).mappings().first()["total"]
        except SQLAlchemyError as e:
            raise RepositorioError(f"Erro ao contar atendimentos: {e}") from e

    def listar(self) -> List[Dict[str, Any]]:
        sql = text(
            f"""
            SELECT {COLUNAS}
            FROM atendimento
            ORDER BY data DESC, created_at DESC
            """
        )
        try:
            with self.engine.connect() as conn:
                rows = conn.execute(sql).mappings().all()
        except SQLAlchemyError as e:
            raise RepositorioError(f"Erro ao buscar atendimentos: {e}") from e
        return [dict(row) for row in rows]

    def obter(self, atendimento_id: int) -> Optional[Dict[str, Any]]:
        sql = text(f"SELECT {COLUNAS} FROM atendimento WHERE id = :id")
        try:
            with self.engine.connect() as conn:
                row = conn.execute(sql, {"id": atendimento_id}).mappings().first()
        except SQLAlchemyError as e:
            raise RepositorioError(f"Erro ao buscar atendimento: {e}") from e
        return dict(row) if row else None

    def criar(self, dados: Dict[str, Any]) -> Dict[str, Any]:
        sql = text(
            f"""
            INSERT INTO atendimento (nome, profissional, data, tipo, observacoes)
            VALUES (:nome, :profissional, :data, :tipo, :observacoes)
            RETURNING {COLUNAS}
            """
        )
        try:
            with self.engine.begin() as conn:
                row = conn.execute(sql, _parametros(dados)).mappings().first()
        except SQLAlchemyError as e:
            raise RepositorioError(f"Erro ao criar atendimento: {e}") from e
        return dict(row)

    def atualizar(self, atendimento_id: int, dados: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        sql = text(
            f"""
            UPDATE atendimento
            SET nome = :nome, profissional = :profissional, data = :data,
                tipo = :tipo, observacoes = :observacoes, updated_at = CURRENT_TIMESTAMP
            WHERE id = :id
            RETURNING {COLUNAS}
            """
        )
        params = _parametros(dados)
        params["id"] = atendimento_id
        try:
            with self.engine.begin() as conn:
                row = conn.execute(sql, params).mappings().first()
        except SQLAlchemyError as e:
            raise RepositorioError(f"Erro ao atualizar atendimento: {e}") from e
        return dict(row) if row else None

    def remover(self, atendimento_id: int) -> bool:
        sql = text("DELETE FROM atendimento WHERE id = :id RETURNING id")
        try:
            with self.engine.begin() as conn:
                row = conn.execute(sql, {"id": atendimento_id}).first()
        except SQLAlchemyError as e:
            raise RepositorioError(f"Erro ao deletar atendimento: {e}") from e
        return row is not None

    def ping(self) -> bool:
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError:
            return False


def _parametros(dados: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "nome": dados["nome"],
        "profissional": dados["profissional"],
        "data": dados["data"],
        "tipo": dados["tipo"],
        "observacoes": dados.get("observacoes", ""),
    }
