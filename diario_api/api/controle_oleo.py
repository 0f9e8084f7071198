"""Rotas Controle de óleo / Oil control API routes (leitura / read-only)."""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from diario_api.database import get_db
from diario_api.errors import NOT_FOUND
from diario_api.models.controle_oleo import CONTROLE_OLEO_ID, ControleOleo
from diario_api.schemas.controle_oleo import ControleOleoRead

router = APIRouter()


@router.get("", response_model=ControleOleoRead)
async def get_controle_oleo(db: AsyncSession = Depends(get_db)):
    controle = await db.get(ControleOleo, CONTROLE_OLEO_ID)
    if not controle:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return controle
