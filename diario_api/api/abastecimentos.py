"""Rotas Abastecimentos / Fuel refill API routes."""

from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from diario_api.database import get_db
from diario_api.models.abastecimento import Abastecimento
from diario_api.schemas.abastecimento import AbastecimentoCreate, AbastecimentoRead

router = APIRouter()


@router.get("", response_model=list[AbastecimentoRead])
async def list_abastecimentos(db: AsyncSession = Depends(get_db)):
    """Listar abastecimentos por data DESC / List refills by date DESC."""
    result = await db.execute(select(Abastecimento).order_by(Abastecimento.data.desc()))
    return result.scalars().all()


@router.post("", response_model=AbastecimentoRead, status_code=201)
async def create_abastecimento(data: AbastecimentoCreate, db: AsyncSession = Depends(get_db)):
    entry = Abastecimento(**data.model_dump())
    db.add(entry)
    await db.flush()
    await db.refresh(entry)
    return entry
