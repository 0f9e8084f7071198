"""
Tratamento de erros / Error handling.
Converte toda falha em um corpo JSON {"error": ...}.
Every failure becomes a JSON body {"error": ...}.
"""

import asyncio
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import DBAPIError, SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

NOT_FOUND = "Não encontrado"
UNAUTHORIZED = "Não autorizado"

# Falhas do banco: erros do SQLAlchemy e erros de rede do driver ao abrir conexão
# (asyncpg levanta OSError / TimeoutError sem embrulhar)
# Store failures: SQLAlchemy errors plus raw driver network errors on connect
STORAGE_ERRORS = (SQLAlchemyError, OSError, TimeoutError, asyncio.TimeoutError)


def storage_error_message(exc: BaseException) -> str:
    """Mensagem do driver, sem o SQL / Driver message without the SQL statement."""
    if isinstance(exc, DBAPIError) and exc.orig is not None:
        return str(exc.orig)
    return str(exc) or exc.__class__.__name__


def _validation_message(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return "; ".join(parts) or "Requisição inválida"


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(status_code=422, content={"error": _validation_message(exc)})


async def storage_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Falha de armazenamento genérica / Generic storage failure (500)."""
    logger.error("Storage failure on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"error": storage_error_message(exc)})


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Qualquer outra falha, ainda em JSON / Any other failure, still as JSON."""
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"error": str(exc) or exc.__class__.__name__})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    for exc_class in STORAGE_ERRORS:
        app.add_exception_handler(exc_class, storage_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
