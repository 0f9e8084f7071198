"""Modelo Controle de óleo / Oil control singleton model."""

from sqlalchemy import CheckConstraint, String
from sqlalchemy.orm import Mapped, mapped_column

from diario_api.database import Base

# Identificador fixo da única linha / Fixed id of the only row
CONTROLE_OLEO_ID = 1


class ControleOleo(Base):
    """Data da última troca de óleo / Date of the last oil change.

    Tabela de linha única: a constraint impede qualquer id diferente de 1.
    Single-row table: the constraint rejects any id other than 1.
    """
    __tablename__ = "controle_oleo"
    __table_args__ = (
        CheckConstraint(f"id = {CONTROLE_OLEO_ID}", name="ck_controle_oleo_single_row"),
    )

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=False, default=CONTROLE_OLEO_ID)
    data_ultima_troca: Mapped[str | None] = mapped_column(String(10))  # YYYY-MM-DD
    atualizado_em: Mapped[str | None] = mapped_column(String(32))  # ISO 8601

    def __repr__(self) -> str:
        return f"<ControleOleo {self.data_ultima_troca}>"
