"""SQL da tabela de atendimentos e dados de exemplo"""
from datetime import date
from atendimentos.core.config import TIPOS_ATENDIMENTO

_tipos_sql = ", ".join(f"'{tipo}'" for tipo in TIPOS_ATENDIMENTO)

CREATE_TABLE_SQL = f"""
    CREATE TABLE IF NOT EXISTS atendimento (
        id SERIAL PRIMARY KEY,
        nome VARCHAR(255) NOT NULL,
        profissional VARCHAR(255) NOT NULL,
        data DATE NOT NULL,
        tipo VARCHAR(50) NOT NULL CHECK (tipo IN ({_tipos_sql})),
        observacoes TEXT,
        created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
        updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
    )
"""

COLUNAS = "id, nome, profissional, data, tipo, observacoes, created_at, updated_at"

DADOS_EXEMPLO = [
    {
        "nome": "Maria Silva",
        "profissional": "Dr. João Santos",
        "data": date(2024, 1, 15),
        "tipo": "Psicológico",
        "observacoes": "Primeira consulta - ansiedade",
    },
    {
        "nome": "Pedro Oliveira",
        "profissional": "Ana Costa",
        "data": date(2024, 1, 16),
        "tipo": "Assistência Social",
        "observacoes": "Orientação sobre benefícios sociais",
    },
    {
        "nome": "Carla Souza",
        "profissional": "Prof. Rita Lima",
        "data": date(2024, 1, 17),
        "tipo": "Pedagógico",
        "observacoes": "Dificuldades de aprendizagem",
    },
]
