#!/usr/bin/env python3
"""
Script para executar a API de atendimentos

OPÇÕES:
- python run.py                 # Modo desenvolvimento com hot reload
- python run.py --producao      # Sem reload
- uvicorn atendimentos.main:app --host 0.0.0.0 --port 3000
"""
import uvicorn
import sys
from atendimentos.core.config import get_settings

if __name__ == "__main__":
    settings = get_settings()

    # Modo desenvolvimento (com reload) se não houver argumentos
    uvicorn.run(
        "atendimentos.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=len(sys.argv) == 1,
        log_level=settings.log_level.lower()
    )
