"""
Serviço de troca de óleo / Oil change service.
Regra de efeito colateral da criação de manutenção: um tipo que contém "óleo"
atualiza a data da última troca em controle_oleo.
Side-effect rule of maintenance creation: a type containing "óleo" updates the
last change date in controle_oleo.
"""

import logging
import unicodedata
from datetime import datetime, timezone

from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession

from diario_api.config import settings
from diario_api.models.controle_oleo import CONTROLE_OLEO_ID, ControleOleo

log = logging.getLogger(__name__)


class OilChangeService:
    """Detecção e registro de troca de óleo / Oil change detection and registration."""

    @staticmethod
    def fold(value: str) -> str:
        """Minúsculas sem acentos / Lowercase without diacritics ("Óleo" -> "oleo")."""
        decomposed = unicodedata.normalize("NFKD", value)
        stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
        return stripped.casefold()

    @staticmethod
    def is_oil_change(tipo_manutencao: object, keywords: list[str] | None = None) -> bool:
        """Verifica se o tipo indica troca de óleo / Whether the type flags an oil change.

        Busca por substring, então "Filtro de óleo" também casa.
        Substring match, so "Filtro de óleo" matches too.
        """
        if not tipo_manutencao:
            return False
        folded = OilChangeService.fold(str(tipo_manutencao))
        terms = settings.OIL_CHANGE_KEYWORDS if keywords is None else keywords
        return any(OilChangeService.fold(term) in folded for term in terms)

    @staticmethod
    async def register(session: AsyncSession, data_troca: str | None) -> int:
        """Atualiza a linha única de controle_oleo / Update the controle_oleo singleton.

        Retorna o número de linhas afetadas; 0 quando a linha não existe.
        Returns the affected row count; 0 when the row is missing.
        """
        now = datetime.now(timezone.utc).isoformat(timespec="seconds")
        result = await session.execute(
            update(ControleOleo)
            .where(ControleOleo.id == CONTROLE_OLEO_ID)
            .values(data_ultima_troca=data_troca, atualizado_em=now)
        )
        if result.rowcount == 0:
            log.warning("controle_oleo row %s missing, oil change on %s not recorded", CONTROLE_OLEO_ID, data_troca)
        else:
            log.info("Oil change recorded for %s", data_troca)
        return result.rowcount
