"""API e frontend para registro de atendimentos psicossociais"""

__version__ = "1.0.0"
