"""Schemas Manutenção / Maintenance schemas."""

from typing import Any

from pydantic import BaseModel, ConfigDict


class ManutencaoBase(BaseModel):
    data: Any = None
    hora: Any = None
    tipo_manutencao: Any = None
    descricao: Any = None
    custo: Any = None
    quilometragem_km: Any = None
    local_oficina: Any = None


class ManutencaoCreate(ManutencaoBase):
    pass


class ManutencaoRead(ManutencaoBase):
    model_config = ConfigDict(from_attributes=True)
    id: int
