"""Schemas Abastecimento / Fuel refill schemas."""

from typing import Any

from pydantic import BaseModel, ConfigDict


class AbastecimentoBase(BaseModel):
    data: Any = None
    hora: Any = None
    valor_abastecido: Any = None
    litros: Any = None
    preco_por_litro: Any = None
    observacoes: Any = None


class AbastecimentoCreate(AbastecimentoBase):
    pass


class AbastecimentoRead(AbastecimentoBase):
    model_config = ConfigDict(from_attributes=True)
    id: int
