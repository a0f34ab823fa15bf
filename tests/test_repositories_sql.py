from contextlib import contextmanager
from datetime import date, datetime
from unittest.mock import MagicMock

import psycopg2
import pytest
from sqlalchemy.exc import SQLAlchemyError

from atendimentos.core.exceptions import RepositorioError
from atendimentos.database import connection
from atendimentos.repositories import AtendimentoPsycopgRepository, AtendimentoRepository
from atendimentos.repositories import atendimento_psycopg_repository

REGISTRO = {
    "id": 7,
    "nome": "Maria Silva",
    "profissional": "Dr. João Santos",
    "data": date(2024, 1, 15),
    "tipo": "Psicológico",
    "observacoes": "Primeira consulta",
    "created_at": datetime(2024, 1, 15, 10, 0),
    "updated_at": datetime(2024, 1, 15, 10, 0),
}

DADOS = {
    "nome": "Maria Silva",
    "profissional": "Dr. João Santos",
    "data": date(2024, 1, 15),
    "tipo": "Psicológico",
    "observacoes": "Primeira consulta",
}


# === SQLAlchemy (pool) ===

@pytest.fixture
def engine():
    return MagicMock()


def _conexao(engine, metodo="connect"):
    return getattr(engine, metodo).return_value.__enter__.return_value


def _sql_executado(conn):
    sql, *params = conn.execute.call_args.args
    return str(sql), (params[0] if params else None)


def test_pool_listar_mapeia_linhas(engine):
    conn = _conexao(engine)
    conn.execute.return_value.mappings.return_value.all.return_value = [REGISTRO]

    linhas = AtendimentoRepository(engine).listar()

    assert linhas == [REGISTRO]
    sql, _ = _sql_executado(conn)
    assert "ORDER BY data DESC, created_at DESC" in sql


def test_pool_obter_usa_parametro_e_retorna_none_se_ausente(engine):
    conn = _conexao(engine)
    conn.execute.return_value.mappings.return_value.first.return_value = None

    assert AtendimentoRepository(engine).obter(42) is None
    sql, params = _sql_executado(conn)
    assert "WHERE id = :id" in sql
    assert params == {"id": 42}


def test_pool_criar_em_transacao(engine):
    conn = _conexao(engine, "begin")
    conn.execute.return_value.mappings.return_value.first.return_value = REGISTRO

    criado = AtendimentoRepository(engine).criar(DADOS)

    assert criado == REGISTRO
    sql, params = _sql_executado(conn)
    assert sql.strip().startswith("INSERT INTO atendimento")
    assert "RETURNING" in sql
    assert params == DADOS


def test_pool_atualizar(engine):
    conn = _conexao(engine, "begin")
    conn.execute.return_value.mappings.return_value.first.return_value = REGISTRO

    assert AtendimentoRepository(engine).atualizar(7, DADOS) == REGISTRO
    sql, params = _sql_executado(conn)
    assert "updated_at = CURRENT_TIMESTAMP" in sql
    assert params == {**DADOS, "id": 7}


def test_pool_atualizar_inexistente(engine):
    conn = _conexao(engine, "begin")
    conn.execute.return_value.mappings.return_value.first.return_value = None

    assert AtendimentoRepository(engine).atualizar(99, DADOS) is None


def test_pool_remover(engine):
    conn = _conexao(engine, "begin")
    repository = AtendimentoRepository(engine)

    conn.execute.return_value.first.return_value = (7,)
    assert repository.remover(7) is True
    assert _sql_executado(conn)[1] == {"id": 7}

    conn.execute.return_value.first.return_value = None
    assert repository.remover(7) is False


def test_pool_contar(engine):
    conn = _conexao(engine)
    conn.execute.return_value.mappings.return_value.first.return_value = {"total": 3}

    assert AtendimentoRepository(engine).contar() == 3


@pytest.mark.parametrize("operacao, args", [
    ("listar", ()),
    ("obter", (1,)),
    ("contar", ()),
    ("criar_estrutura", ()),
    ("criar", (DADOS,)),
    ("atualizar", (1, DADOS)),
    ("remover", (1,)),
])
def test_pool_erro_do_banco_vira_repositorio_error(engine, operacao, args):
    engine.connect.side_effect = SQLAlchemyError("conexão recusada")
    engine.begin.side_effect = SQLAlchemyError("conexão recusada")

    with pytest.raises(RepositorioError) as excinfo:
        getattr(AtendimentoRepository(engine), operacao)(*args)

    assert "conexão recusada" in str(excinfo.value)
    assert isinstance(excinfo.value.__cause__, SQLAlchemyError)


def test_pool_ping(engine):
    repository = AtendimentoRepository(engine)
    assert repository.ping() is True

    engine.connect.side_effect = SQLAlchemyError("fora do ar")
    assert repository.ping() is False


# === psycopg2 (conexão direta) ===

@pytest.fixture
def conexao(monkeypatch):
    conn = MagicMock()

    @contextmanager
    def conexao_falsa():
        yield conn

    monkeypatch.setattr(atendimento_psycopg_repository, "get_db_connection", conexao_falsa)
    return conn


def _cursor(conn):
    return conn.cursor.return_value.__enter__.return_value


def test_psycopg_listar(conexao):
    cur = _cursor(conexao)
    cur.fetchall.return_value = [REGISTRO]

    assert AtendimentoPsycopgRepository().listar() == [REGISTRO]
    assert "ORDER BY data DESC" in cur.execute.call_args.args[0]


def test_psycopg_obter(conexao):
    cur = _cursor(conexao)
    repository = AtendimentoPsycopgRepository()

    cur.fetchone.return_value = REGISTRO
    assert repository.obter(7) == REGISTRO
    assert cur.execute.call_args.args[1] == (7,)

    cur.fetchone.return_value = None
    assert repository.obter(8) is None


def test_psycopg_criar_faz_commit(conexao):
    cur = _cursor(conexao)
    cur.fetchone.return_value = REGISTRO

    assert AtendimentoPsycopgRepository().criar(DADOS) == REGISTRO
    assert cur.execute.call_args.args[1] == (
        "Maria Silva", "Dr. João Santos", date(2024, 1, 15), "Psicológico", "Primeira consulta",
    )
    conexao.commit.assert_called_once()


def test_psycopg_atualizar(conexao):
    cur = _cursor(conexao)
    repository = AtendimentoPsycopgRepository()

    cur.fetchone.return_value = REGISTRO
    assert repository.atualizar(7, DADOS) == REGISTRO
    assert cur.execute.call_args.args[1][-1] == 7

    cur.fetchone.return_value = None
    assert repository.atualizar(99, DADOS) is None


def test_psycopg_remover(conexao):
    cur = _cursor(conexao)
    repository = AtendimentoPsycopgRepository()

    cur.fetchone.return_value = {"id": 7}
    assert repository.remover(7) is True

    cur.fetchone.return_value = None
    assert repository.remover(7) is False
    assert cur.execute.call_args.args[1] == (7,)


def test_psycopg_contar(conexao):
    _cursor(conexao).fetchone.return_value = {"total": 2}
    assert AtendimentoPsycopgRepository().contar() == 2


@pytest.mark.parametrize("operacao, args", [
    ("listar", ()),
    ("obter", (1,)),
    ("contar", ()),
    ("criar_estrutura", ()),
    ("criar", (DADOS,)),
    ("atualizar", (1, DADOS)),
    ("remover", (1,)),
])
def test_psycopg_erro_do_banco_vira_repositorio_error(conexao, operacao, args):
    _cursor(conexao).execute.side_effect = psycopg2.OperationalError("servidor indisponível")

    with pytest.raises(RepositorioError) as excinfo:
        getattr(AtendimentoPsycopgRepository(), operacao)(*args)

    assert "servidor indisponível" in str(excinfo.value)
    assert isinstance(excinfo.value.__cause__, psycopg2.Error)


# === Conexão ===

def test_get_db_connection_faz_rollback_e_fecha(monkeypatch):
    conn = MagicMock()
    monkeypatch.setattr(connection.psycopg2, "connect", MagicMock(return_value=conn))

    with pytest.raises(psycopg2.DatabaseError):
        with connection.get_db_connection():
            raise psycopg2.DatabaseError("falha")

    conn.rollback.assert_called_once()
    conn.close.assert_called_once()


def test_test_connection_falha(monkeypatch):
    monkeypatch.setattr(
        connection.psycopg2, "connect",
        MagicMock(side_effect=psycopg2.OperationalError("recusada")),
    )
    assert connection.test_connection() is False
