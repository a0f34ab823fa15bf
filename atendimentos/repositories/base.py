from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional


class AtendimentoRepositoryBase(ABC):
    """Contrato comum dos armazenamentos de atendimentos.

    Registros trafegam como dicts com as chaves da tabela `atendimento`
    (id, nome, profissional, data, tipo, observacoes, created_at, updated_at).
    """

    @abstractmethod
    def criar_estrutura(self) -> None:
        pass

    @abstractmethod
    def contar(self) -> int:
        pass

    @abstractmethod
    def listar(self) -> List[Dict[str, Any]]:
        pass

    @abstractmethod
    def obter(self, atendimento_id: int) -> Optional[Dict[str, Any]]:
        pass

    @abstractmethod
    def criar(self, dados: Dict[str, Any]) -> Dict[str, Any]:
        pass

    @abstractmethod
    def atualizar(self, atendimento_id: int, dados: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        pass

    @abstractmethod
    def remover(self, atendimento_id: int) -> bool:
        pass

    @abstractmethod
    def ping(self) -> bool:
        pass
