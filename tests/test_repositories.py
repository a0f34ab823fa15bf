from datetime import date

import pytest

from atendimentos.core.config import Settings
from atendimentos.database.init import inicializar_armazenamento
from atendimentos.repositories import (
    AtendimentoMemoriaRepository,
    AtendimentoPsycopgRepository,
    AtendimentoRepository,
    get_repository,
)


def _dados(**alteracoes):
    dados = {
        "nome": "Carla Souza",
        "profissional": "Prof. Rita Lima",
        "data": date(2024, 1, 17),
        "tipo": "Pedagógico",
        "observacoes": "Dificuldades de aprendizagem",
    }
    dados.update(alteracoes)
    return dados


def test_memoria_crud(repository):
    criado = repository.criar(_dados())
    assert criado["id"] == 1
    assert criado["created_at"] == criado["updated_at"]

    atualizado = repository.atualizar(1, _dados(nome="Carla S."))
    assert atualizado["nome"] == "Carla S."
    assert atualizado["updated_at"] >= criado["updated_at"]
    assert repository.obter(1)["nome"] == "Carla S."

    assert repository.remover(1) is True
    assert repository.obter(1) is None
    assert repository.atualizar(1, _dados()) is None
    assert repository.remover(1) is False


def test_memoria_ids_nao_sao_reutilizados(repository):
    repository.criar(_dados())
    repository.remover(1)
    assert repository.criar(_dados())["id"] == 2


def test_memoria_retorna_copias(repository):
    repository.criar(_dados())
    repository.obter(1)["nome"] = "Alterado"
    assert repository.obter(1)["nome"] == "Carla Souza"


def test_inicializar_insere_exemplos_uma_vez():
    repository = AtendimentoMemoriaRepository()

    inicializar_armazenamento(repository, seed=True)
    inicializar_armazenamento(repository, seed=True)

    assert repository.contar() == 3
    assert repository.listar()[0]["nome"] == "Carla Souza"


def test_inicializar_sem_exemplos():
    repository = AtendimentoMemoriaRepository()
    inicializar_armazenamento(repository, seed=False)
    assert repository.contar() == 0


@pytest.mark.parametrize("backend, classe", [
    ("memoria", AtendimentoMemoriaRepository),
    ("postgres", AtendimentoPsycopgRepository),
    ("postgres_pool", AtendimentoRepository),
])
def test_get_repository(backend, classe):
    assert isinstance(get_repository(Settings(storage_backend=backend)), classe)


def test_get_repository_backend_invalido():
    with pytest.raises(ValueError):
        get_repository(Settings(storage_backend="mongo"))
