import time
from contextlib import asynccontextmanager
from pathlib import Path
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
from atendimentos.core.config import get_settings
from atendimentos.core.logger import LoggerConfig, get_logger
from atendimentos.database.init import inicializar_armazenamento
from atendimentos.routers import atendimentos, estatisticas
from atendimentos.services.atendimento_service import get_atendimento_service

FRONTEND_DIR = Path(__file__).resolve().parent / "frontend"

ENDPOINTS = [
    {"method": "GET", "path": "/api/atendimentos", "description": "Lista todos os atendimentos"},
    {"method": "GET", "path": "/api/atendimentos/estatisticas", "description": "Estatísticas dos atendimentos"},
    {"method": "GET", "path": "/api/atendimento/{id}", "description": "Busca um atendimento específico"},
    {"method": "POST", "path": "/api/atendimento", "description": "Cria um novo atendimento"},
    {"method": "PUT", "path": "/api/atendimento/{id}", "description": "Atualiza um atendimento existente"},
    {"method": "DELETE", "path": "/api/atendimento/{id}", "description": "Remove um atendimento"},
]


def _resolver_service(app: FastAPI):
    """Respeita dependency_overrides (usado nos testes)"""
    return app.dependency_overrides.get(get_atendimento_service, get_atendimento_service)()


def create_app() -> FastAPI:
    settings = get_settings()
    LoggerConfig.configurar(settings.log_dir, settings.log_level)
    logger = get_logger('atendimentos.api')

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Executado ao iniciar a aplicação"""
        logger.info("=" * 60)
        logger.info(f" {settings.api_title} v{settings.api_version}")
        logger.info("=" * 60)

        service = _resolver_service(app)
        inicializar_armazenamento(service.repository, seed=settings.seed_dados_exemplo)
        logger.info(f"Armazenamento: {settings.storage_backend}")
        logger.info(f"Frontend: http://{settings.api_host}:{settings.api_port}/")
        logger.info(f"Documentação: http://{settings.api_host}:{settings.api_port}/docs")
        yield
        logger.info("Encerrando aplicação")

    app = FastAPI(
        title=settings.api_title,
        version=settings.api_version,
        description=settings.api_description,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_lista,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requisicoes(request: Request, call_next):
        inicio = time.perf_counter()
        response = await call_next(request)
        duracao_ms = (time.perf_counter() - inicio) * 1000
        logger.info(f"{request.method} {request.url.path} - {response.status_code} - {duracao_ms:.0f}ms")
        return response

    # === TRATAMENTO DE ERROS ===

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404 and exc.detail == "Not Found":
            conteudo = {
                "success": False,
                "message": "Rota não encontrada",
                "requestedUrl": str(request.url.path),
            }
        elif isinstance(exc.detail, dict):
            conteudo = {"success": False, **exc.detail}
        else:
            conteudo = {"success": False, "message": exc.detail}

        if exc.status_code >= 500 and settings.producao:
            conteudo = {"success": False, "message": "Erro interno do servidor"}
        return JSONResponse(status_code=exc.status_code, content=conteudo, headers=getattr(exc, "headers", None))

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        erros = exc.errors()
        if any(erro.get("loc", ("",))[0] == "path" for erro in erros):
            return JSONResponse(status_code=400, content={"success": False, "message": "ID inválido"})

        mensagens = [
            f"{'.'.join(str(p) for p in erro.get('loc', ())[1:]) or 'corpo'}: {erro.get('msg')}"
            for erro in erros
        ]
        return JSONResponse(
            status_code=400,
            content={
                "success": False,
                "message": f"Dados inválidos: {', '.join(mensagens)}",
                "errors": mensagens,
            },
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Erro não tratado em {request.method} {request.url.path}")
        conteudo = {"success": False, "message": "Erro interno do servidor"}
        if not settings.producao:
            conteudo["error"] = str(exc)
        return JSONResponse(status_code=500, content=conteudo)

    # === ROTAS ===

    app.include_router(estatisticas.router)
    app.include_router(atendimentos.router)

    @app.get("/", include_in_schema=False)
    def frontend():
        return FileResponse(FRONTEND_DIR / "index.html")

    @app.get("/api", tags=["Health"])
    def informacoes():
        """Informações do serviço e endpoints disponíveis"""
        return {
            "service": settings.api_title,
            "version": settings.api_version,
            "status": "running",
            "docs": "/docs",
            "endpoints": ENDPOINTS,
        }

    @app.get("/health", tags=["Health"])
    def health_check():
        """Verificação de saúde da API"""
        db_status = _resolver_service(app).repository.ping()
        conteudo = {
            "status": "healthy" if db_status else "unhealthy",
            "database": "connected" if db_status else "disconnected",
            "storage": settings.storage_backend,
        }
        return JSONResponse(status_code=200 if db_status else 503, content=conteudo)

    app.mount("/static", StaticFiles(directory=FRONTEND_DIR), name="static")

    return app


app = create_app()
