"""Schemas Dia de trabalho / Work shift schemas."""

from typing import Any

from pydantic import BaseModel, ConfigDict


class DiaTrabalhoBase(BaseModel):
    """Sem validação de tipo: o banco decide / No type checks, the store decides."""

    data: Any = None
    turno: Any = None
    km_rodado: Any = None
    ganho_bruto: Any = None
    combustivel_informado: Any = None
    hora_inicio: Any = None
    hora_fim: Any = None
    observacoes: Any = None


class DiaTrabalhoCreate(DiaTrabalhoBase):
    pass


class DiaTrabalhoUpdate(DiaTrabalhoBase):
    """Substituição completa: campos ausentes viram null / Full overwrite."""


class DiaTrabalhoRead(DiaTrabalhoBase):
    model_config = ConfigDict(from_attributes=True)
    id: int
