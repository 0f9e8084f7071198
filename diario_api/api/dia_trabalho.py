"""Rotas Dia de trabalho / Work shift API routes."""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from diario_api.database import get_db
from diario_api.errors import NOT_FOUND
from diario_api.models.dia_trabalho import DiaTrabalho
from diario_api.schemas.dia_trabalho import DiaTrabalhoCreate, DiaTrabalhoRead, DiaTrabalhoUpdate

router = APIRouter()


@router.get("", response_model=list[DiaTrabalhoRead])
async def list_dias(db: AsyncSession = Depends(get_db)):
    """Listar os dias, mais recentes primeiro / List shifts, newest first."""
    result = await db.execute(select(DiaTrabalho).order_by(DiaTrabalho.data.desc()))
    return result.scalars().all()


@router.post("", response_model=DiaTrabalhoRead, status_code=201)
async def create_dia(data: DiaTrabalhoCreate, db: AsyncSession = Depends(get_db)):
    """Registrar um dia de trabalho / Create a work shift."""
    dia = DiaTrabalho(**data.model_dump())
    db.add(dia)
    await db.flush()
    await db.refresh(dia)
    return dia


@router.put("/{dia_id}", response_model=DiaTrabalhoRead)
async def update_dia(dia_id: int, data: DiaTrabalhoUpdate, db: AsyncSession = Depends(get_db)):
    """Substituir todos os campos / Overwrite every field."""
    dia = await db.get(DiaTrabalho, dia_id)
    if not dia:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    for key, value in data.model_dump().items():
        setattr(dia, key, value)
    await db.flush()
    await db.refresh(dia)
    return dia


@router.delete("/{dia_id}")
async def delete_dia(dia_id: int, db: AsyncSession = Depends(get_db)):
    """Excluir um dia de trabalho / Delete a work shift."""
    dia = await db.get(DiaTrabalho, dia_id)
    if not dia:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    await db.delete(dia)
    await db.flush()
    return {"ok": True}
