"""Schemas Controle de óleo / Oil control schemas."""

from pydantic import BaseModel, ConfigDict


class ControleOleoRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    data_ultima_troca: str | None = None
    atualizado_em: str | None = None
