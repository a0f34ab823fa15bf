"""
Serviço de Cache com TTL

- Usa cachetools.TTLCache para armazenamento em memória
- Leituras são cacheadas por chave; escritas invalidam por trecho da chave
  (ex.: invalidate("atendimento") derruba a listagem, os detalhes e as estatísticas)

LIMITAÇÕES:
- Cache em memória não persiste entre reinicializações
- Não compartilhado entre múltiplas instâncias
"""
import threading
import time
from cachetools import TTLCache
from typing import Optional, Any


class CacheService:
    """Mapa chave-valor com expiração por TTL e invalidação por substring"""

    def __init__(self, maxsize: int = 256, ttl: float = 300, timer=time.monotonic):
        self._cache = TTLCache(maxsize=maxsize, ttl=ttl, timer=timer)
        self._lock = threading.RLock()
        self._geracao = 0

    @staticmethod
    def gerar_chave(method: str, recurso: str) -> str:
        """Gera chave única a partir do método HTTP e do recurso"""
        return f"{method.lower()}_{recurso}"

    def get(self, key: str) -> Optional[Any]:
        """Recupera valor do cache (None se expirado ou inexistente)"""
        with self._lock:
            return self._cache.get(key)

    @property
    def geracao(self) -> int:
        """Contador incrementado a cada invalidação ou limpeza"""
        with self._lock:
            return self._geracao

    def set(self, key: str, value: Any, geracao: Optional[int] = None) -> bool:
        """
        Armazena valor no cache

        Com `geracao`, só grava se nenhuma invalidação ocorreu desde que ela foi lida
        (uma leitura lenta não repõe dados anteriores a uma escrita).
        """
        with self._lock:
            if geracao is not None and geracao != self._geracao:
                return False
            self._cache[key] = value
            return True

    def invalidate(self, pattern: str) -> int:
        """Remove as entradas cuja chave contém `pattern`; retorna quantas saíram"""
        with self._lock:
            self._geracao += 1
            chaves = [key for key in list(self._cache.keys()) if pattern in key]
            for key in chaves:
                self._cache.pop(key, None)
            return len(chaves)

    def clear(self, key: Optional[str] = None) -> None:
        """
        Limpa cache
        Se key for None, limpa todo o cache
        """
        with self._lock:
            self._geracao += 1
            if key:
                self._cache.pop(key, None)
            else:
                self._cache.clear()

    def __len__(self) -> int:
        with self._lock:
            self._cache.expire()
            return len(self._cache)
