"""Rotas Manutenções / Maintenance API routes."""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from diario_api.database import get_db
from diario_api.errors import STORAGE_ERRORS
from diario_api.models.manutencao import Manutencao
from diario_api.schemas.manutencao import ManutencaoCreate, ManutencaoRead
from diario_api.services.oil_change import OilChangeService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=list[ManutencaoRead])
async def list_manutencoes(db: AsyncSession = Depends(get_db)):
    """Listar manutenções por data DESC / List maintenance events by date DESC."""
    result = await db.execute(select(Manutencao).order_by(Manutencao.data.desc()))
    return result.scalars().all()


@router.post("", response_model=ManutencaoRead, status_code=201)
async def create_manutencao(data: ManutencaoCreate, db: AsyncSession = Depends(get_db)):
    """Registrar uma manutenção / Create a maintenance event.

    A manutenção é gravada antes da regra de óleo; uma falha na regra não
    desfaz o registro.
    The record is committed before the oil rule runs; a failing rule does not
    undo it.
    """
    record = Manutencao(**data.model_dump())
    db.add(record)
    await db.flush()
    await db.refresh(record)
    created = ManutencaoRead.model_validate(record)
    await db.commit()

    if OilChangeService.is_oil_change(data.tipo_manutencao):
        try:
            await OilChangeService.register(db, data.data)
            await db.commit()
        except STORAGE_ERRORS:
            await db.rollback()
            logger.warning("Oil change update failed for maintenance %s", created.id, exc_info=True)

    return created
