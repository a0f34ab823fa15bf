import os
import tempfile

os.environ["STORAGE_BACKEND"] = "memoria"
os.environ["SEED_DADOS_EXEMPLO"] = "false"
os.environ["AMBIENTE"] = "development"
os.environ["LOG_DIR"] = os.path.join(tempfile.gettempdir(), "atendimentos_test_logs")

import pytest
from fastapi.testclient import TestClient

from atendimentos.main import create_app
from atendimentos.repositories import AtendimentoMemoriaRepository
from atendimentos.services.atendimento_service import AtendimentoService, get_atendimento_service
from atendimentos.services.cache_service import CacheService


@pytest.fixture
def repository():
    return AtendimentoMemoriaRepository()


@pytest.fixture
def cache():
    return CacheService(maxsize=64, ttl=60)


@pytest.fixture
def service(repository, cache):
    return AtendimentoService(repository, cache)


@pytest.fixture
def client(service):
    app = create_app()
    app.dependency_overrides[get_atendimento_service] = lambda: service
    return TestClient(app)


@pytest.fixture
def payload():
    return {
        "nome": "Maria Silva",
        "profissional": "Dr. João Santos",
        "data": "2024-01-15",
        "tipo": "Psicológico",
        "observacoes": "Primeira consulta - ansiedade",
    }
