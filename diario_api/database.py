"""
Conexão com o banco de dados / Database connection.
Suporta SQLite (dev) e PostgreSQL (prod) via SQLAlchemy 2.0 async.
"""

import ssl

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from diario_api.config import settings

_is_sqlite = settings.DATABASE_URL.startswith("sqlite")

# Configuração do engine / Engine configuration
_engine_kwargs: dict = {
    "echo": settings.DEBUG,
}

# PostgreSQL : pool compartilhado por todas as requisições /
# PostgreSQL: pool shared by every request
if not _is_sqlite:
    _engine_kwargs.update({
        "pool_size": 10,
        "max_overflow": 10,
        "pool_timeout": 30,
        "pool_recycle": 1800,
        "pool_pre_ping": True,
    })
    if settings.DATABASE_SSL:
        # Equivalente a rejectUnauthorized: false / No certificate verification
        _ssl_context = ssl.create_default_context()
        _ssl_context.check_hostname = False
        _ssl_context.verify_mode = ssl.CERT_NONE
        _engine_kwargs["connect_args"] = {"ssl": _ssl_context}

engine = create_async_engine(settings.DATABASE_URL, **_engine_kwargs)

async_session = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


class Base(DeclarativeBase):
    pass


async def get_db() -> AsyncSession:
    """Dependência FastAPI para obter uma sessão / FastAPI dependency for DB session."""
    async with async_session() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


async def init_db():
    """Criar as tabelas no startup / Create tables on startup."""
    # Registrar os modelos no metadata / Register models on the metadata
    import diario_api.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def ping(session: AsyncSession) -> None:
    """Ida e volta trivial ao banco / Trivial round-trip to the store."""
    await session.execute(text("SELECT 1"))
