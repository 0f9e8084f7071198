"""Modelo Dia de trabalho / Work shift model."""

from sqlalchemy import Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from diario_api.database import Base


class DiaTrabalho(Base):
    """Um turno de trabalho / One work session."""
    __tablename__ = "dia_trabalho"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    data: Mapped[str | None] = mapped_column(String(10), index=True)  # YYYY-MM-DD
    turno: Mapped[str | None] = mapped_column(String(50))
    km_rodado: Mapped[float | None] = mapped_column(Numeric(asdecimal=False))
    ganho_bruto: Mapped[float | None] = mapped_column(Numeric(asdecimal=False))
    combustivel_informado: Mapped[float | None] = mapped_column(Numeric(asdecimal=False))
    hora_inicio: Mapped[str | None] = mapped_column(String(8))  # HH:MM
    hora_fim: Mapped[str | None] = mapped_column(String(8))
    observacoes: Mapped[str | None] = mapped_column(Text)

    def __repr__(self) -> str:
        return f"<DiaTrabalho {self.data} - {self.turno}>"
