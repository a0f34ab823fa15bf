"""
Repositório em memória

Simula o banco para desenvolvimento e testes; os dados se perdem ao reiniciar
"""
import threading
from datetime import datetime
from typing import Optional, List, Dict, Any
from atendimentos.repositories.base import AtendimentoRepositoryBase


class AtendimentoMemoriaRepository(AtendimentoRepositoryBase):

    def __init__(self):
        self._registros: Dict[int, Dict[str, Any]] = {}
        self._proximo_id = 1
        self._lock = threading.Lock()

    def criar_estrutura(self) -> None:
        pass

    def contar(self) -> int:
        with self._lock:
            return len(self._registros)

    def listar(self) -> List[Dict[str, Any]]:
        with self._lock:
            registros = [dict(r) for r in self._registros.values()]
        return sorted(
            registros,
            key=lambda r: (r["data"], r["created_at"], r["id"]),
            reverse=True,
        )

    def obter(self, atendimento_id: int) -> Optional[Dict[str, Any]]:
        with self._lock:
            registro = self._registros.get(atendimento_id)
            return dict(registro) if registro else None

    def criar(self, dados: Dict[str, Any]) -> Dict[str, Any]:
        agora = datetime.now()
        with self._lock:
            registro = {
                "id": self._proximo_id,
                "nome": dados["nome"],
                "profissional": dados["profissional"],
                "data": dados["data"],
                "tipo": dados["tipo"],
                "observacoes": dados.get("observacoes", ""),
                "created_at": agora,
                "updated_at": agora,
            }
            self._registros[registro["id"]] = registro
            self._proximo_id += 1
            return dict(registro)

    def atualizar(self, atendimento_id: int, dados: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        with self._lock:
            registro = self._registros.get(atendimento_id)
            if registro is None:
                return None
            registro.update(
                nome=dados["nome"],
                profissional=dados["profissional"],
                data=dados["data"],
                tipo=dados["tipo"],
                observacoes=dados.get("observacoes", ""),
                updated_at=datetime.now(),
            )
            return dict(registro)

    def remover(self, atendimento_id: int) -> bool:
        with self._lock:
            return self._registros.pop(atendimento_id, None) is not None

    def ping(self) -> bool:
        return True
