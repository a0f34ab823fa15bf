"""
Inicialização do armazenamento

Cria a tabela (quando aplicável) e insere dados de exemplo se estiver vazia
"""
from atendimentos.core.logger import get_logger
from atendimentos.database.schema import DADOS_EXEMPLO
from atendimentos.repositories.base import AtendimentoRepositoryBase

logger = get_logger('atendimentos.database')


def inicializar_armazenamento(repository: AtendimentoRepositoryBase, seed: bool = True) -> None:
    """Cria a estrutura e, se habilitado, popula com exemplos"""
    logger.info("Inicializando armazenamento...")
    repository.criar_estrutura()
    logger.info("Tabela atendimento criada/verificada com sucesso")

    if seed and repository.contar() == 0:
        for dados in DADOS_EXEMPLO:
            repository.criar(dict(dados))
        logger.info(f"{len(DADOS_EXEMPLO)} atendimentos de exemplo inseridos")
