"""Modelo Abastecimento / Fuel refill model."""

from sqlalchemy import Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from diario_api.database import Base


class Abastecimento(Base):
    """Entrada de combustível / Fuel entry."""
    __tablename__ = "abastecimentos"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    data: Mapped[str | None] = mapped_column(String(10), index=True)  # YYYY-MM-DD
    hora: Mapped[str | None] = mapped_column(String(8))
    valor_abastecido: Mapped[float | None] = mapped_column(Numeric(asdecimal=False))
    litros: Mapped[float | None] = mapped_column(Numeric(asdecimal=False))
    preco_por_litro: Mapped[float | None] = mapped_column(Numeric(asdecimal=False))
    observacoes: Mapped[str | None] = mapped_column(Text)

    def __repr__(self) -> str:
        return f"<Abastecimento {self.data} - {self.litros}L>"
