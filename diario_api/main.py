"""
Ponto de entrada FastAPI / FastAPI entry point.
Diário do Motorista - turnos, abastecimentos e manutenções.
"""

import logging
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware

from diario_api.api import api_router
from diario_api.config import settings
from diario_api.database import async_session, engine, init_db
from diario_api.errors import register_exception_handlers
from diario_api.logging_config import configure_logging
from diario_api.utils.seed import seed_controle_oleo

configure_logging(settings.DEBUG, settings.LOG_LEVEL)

logger = logging.getLogger("diario_api")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Inicialização e encerramento / Startup and shutdown."""
    # Segredo obrigatório em produção / Secret required in production
    if not settings.DEBUG and not settings.API_TOKEN:
        raise RuntimeError("CRITICAL: API_TOKEN must be set in production!")
    if not settings.API_TOKEN:
        logger.warning("API_TOKEN is empty: every protected route will answer 401")

    if settings.CREATE_TABLES:
        # Criar as tabelas e a linha de controle_oleo / Create tables and the controle_oleo row
        await init_db()
        async with async_session() as session:
            await seed_controle_oleo(session)

    logger.info("API rodando na porta %s", settings.PORT)
    yield
    # Liberar o pool / Release the pool
    await engine.dispose()


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Registro de turnos, abastecimentos e manutenções / Work shift, refill and maintenance log",
    lifespan=lifespan,
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None,
    openapi_url="/openapi.json" if settings.DEBUG else None,
)

register_exception_handlers(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "X-API-Token", "X-Request-ID"],
)


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Adiciona um X-Request-ID único a cada requisição / Add unique X-Request-ID to each request."""

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("X-Request-ID", str(uuid.uuid4()))
        request.state.request_id = request_id
        response: Response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        return response


app.add_middleware(RequestIDMiddleware)

app.include_router(api_router)


def run() -> None:
    """Servir com uvicorn / Serve with uvicorn."""
    import uvicorn

    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_config=None)


if __name__ == "__main__":
    run()
