"""Modelo Manutenção / Maintenance event model."""

from sqlalchemy import Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from diario_api.database import Base


class Manutencao(Base):
    """Evento de manutenção / Service event.

    tipo_manutencao é texto livre; o serviço de troca de óleo o inspeciona.
    tipo_manutencao is free text; the oil change service inspects it.
    """
    __tablename__ = "manutencoes"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    data: Mapped[str | None] = mapped_column(String(10), index=True)  # YYYY-MM-DD
    hora: Mapped[str | None] = mapped_column(String(8))
    tipo_manutencao: Mapped[str | None] = mapped_column(String(100))
    descricao: Mapped[str | None] = mapped_column(Text)
    custo: Mapped[float | None] = mapped_column(Numeric(asdecimal=False))
    quilometragem_km: Mapped[int | None] = mapped_column(Integer)
    local_oficina: Mapped[str | None] = mapped_column(String(150))

    def __repr__(self) -> str:
        return f"<Manutencao {self.data} - {self.tipo_manutencao}>"
