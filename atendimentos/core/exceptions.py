"""
Exceções de domínio da API de atendimentos
"""
from typing import List


class AtendimentoError(Exception):
    """Erro base da aplicação"""


class DadosInvalidosError(AtendimentoError):
    """Dados de atendimento reprovados na validação (HTTP 400)"""

    def __init__(self, erros: List[str]):
        self.erros = list(erros)
        super().__init__(f"Dados inválidos: {', '.join(self.erros)}")


class RepositorioError(AtendimentoError):
    """Falha no acesso ao armazenamento (HTTP 500)"""
