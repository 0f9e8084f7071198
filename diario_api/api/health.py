"""Verificação de saúde / Health check (sem autenticação / unauthenticated)."""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from diario_api.database import get_db, ping
from diario_api.errors import storage_error_message

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health")
async def health_check(db: AsyncSession = Depends(get_db)):
    """Verifica a conexão com o banco / Check the database round-trip.

    Qualquer falha (driver, rede, timeout) vira ok=false.
    Any failure (driver, network, timeout) becomes ok=false.
    """
    try:
        await ping(db)
    except Exception as e:
        logger.warning("Health check failed: %s", e)
        await db.rollback()
        return JSONResponse(status_code=500, content={"ok": False, "error": storage_error_message(e)})
    return {"ok": True}
