"""
Seed do controle de óleo / Oil control seeding.
Cria a linha única de controle_oleo no primeiro startup se ela não existir.
Creates the controle_oleo single row on first startup if it is missing.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from diario_api.models.controle_oleo import CONTROLE_OLEO_ID, ControleOleo

logger = logging.getLogger(__name__)


async def seed_controle_oleo(session: AsyncSession) -> None:
    """Criar a linha de controle_oleo se ausente / Create the controle_oleo row if absent."""
    existing = await session.get(ControleOleo, CONTROLE_OLEO_ID)

    if existing is None:
        session.add(ControleOleo(id=CONTROLE_OLEO_ID))
        await session.commit()
        logger.info("controle_oleo criado / controle_oleo row created")
    else:
        logger.info("controle_oleo existente (%s), seed ignorado / seed skipped", existing.data_ultima_troca)
