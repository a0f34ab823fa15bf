"""
Sistema de logging centralizado da API
"""

import os
import logging
import tempfile

FORMATO_DETALHADO = '%(asctime)s | %(levelname)-8s | %(filename)s:%(lineno)d | %(funcName)s() | %(message)s'


class LoggerConfig:
    _logger = None
    _log_dir = None
    _nivel = logging.INFO

    @classmethod
    def configurar(cls, log_dir: str, nivel: str = 'INFO'):
        """Define diretório e nível e força a reconfiguração do logger"""
        cls._log_dir = log_dir
        cls._nivel = getattr(logging, nivel.upper(), logging.INFO)
        cls._logger = None

    @classmethod
    def get_logger(cls, nome: str = 'atendimentos') -> logging.Logger:
        """Retorna o logger configurado"""
        if cls._logger is None:
            cls._configurar_logger()
        if nome == cls._logger.name:
            return cls._logger
        # Loggers filhos propagam para os handlers do logger raiz da aplicação
        return cls._logger.getChild(nome.split('.')[-1])

    @classmethod
    def _criar_diretorio(cls) -> str:
        log_dir = cls._log_dir or os.getenv('LOG_DIR', 'logs')
        try:
            os.makedirs(log_dir, exist_ok=True)
            return log_dir
        except OSError as e:
            fallback = os.path.join(tempfile.gettempdir(), 'atendimentos_logs')
            print(f"Aviso: Não foi possível criar diretório de logs {log_dir}: {e}. Usando {fallback}")
            os.makedirs(fallback, exist_ok=True)
            return fallback

    @classmethod
    def _configurar_logger(cls):
        """Configura o logger com handlers para arquivo e console"""
        cls._log_dir = cls._criar_diretorio()

        cls._logger = logging.getLogger('atendimentos')
        cls._logger.setLevel(logging.DEBUG)
        cls._logger.propagate = False

        # Limpar handlers existentes
        for handler in cls._logger.handlers[:]:
            cls._logger.removeHandler(handler)
            handler.close()

        formato_detalhado = logging.Formatter(FORMATO_DETALHADO, datefmt='%Y-%m-%d %H:%M:%S')

        try:
            arquivo_log = os.path.join(cls._log_dir, 'aplicacao.log')
            fh = logging.FileHandler(arquivo_log, encoding='utf-8')
            fh.setLevel(logging.DEBUG)
            fh.setFormatter(formato_detalhado)
            cls._logger.addHandler(fh)
        except OSError as e:
            print(f"Aviso: Não foi possível criar handler de arquivo de log: {e}")

        # Console (menos detalhado)
        ch = logging.StreamHandler()
        ch.setLevel(cls._nivel)
        ch.setFormatter(logging.Formatter('%(asctime)s | %(levelname)-8s | %(message)s', datefmt='%H:%M:%S'))
        cls._logger.addHandler(ch)


def get_logger(nome: str = 'atendimentos') -> logging.Logger:
    """Função auxiliar para obter o logger"""
    return LoggerConfig.get_logger(nome)
