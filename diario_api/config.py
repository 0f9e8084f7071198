"""
Configuração da aplicação / Application configuration.
Utiliza pydantic-settings para carregar a partir do .env ou variáveis de ambiente.
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Application
    APP_NAME: str = "Diario do Motorista API"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"

    # Servidor / Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # Database - SQLite por padrão para desenvolvimento
    # Database - SQLite by default for development
    DATABASE_URL: str = "sqlite+aiosqlite:///./diario.db"
    # TLS sem verificação de certificado (PostgreSQL gerenciado)
    # TLS without certificate verification (managed PostgreSQL)
    DATABASE_SSL: bool = True
    # Criar tabelas e semear controle_oleo no startup / Create tables and seed on startup
    CREATE_TABLES: bool = True

    # CORS - origens permitidas / allowed origins
    CORS_ORIGINS: list[str] = ["*"]

    # Segredo compartilhado (header X-API-Token) / Shared secret
    API_TOKEN: str = ""

    # Termos (sem acento, minúsculos) que marcam uma troca de óleo
    # Folded keywords that flag an oil change
    OIL_CHANGE_KEYWORDS: list[str] = ["oleo"]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    @field_validator("DATABASE_URL")
    @classmethod
    def use_async_driver(cls, v: str) -> str:
        """Forçar o driver asyncpg / Force the asyncpg driver for plain postgres URLs."""
        for prefix in ("postgres://", "postgresql://"):
            if v.startswith(prefix):
                return "postgresql+asyncpg://" + v[len(prefix):]
        return v


settings = Settings()
