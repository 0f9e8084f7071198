"""
Dependência de autorização / Authorization dependency.
Injetada nos routers protegidos via Depends().
"""

import secrets

from fastapi import Depends, HTTPException, status
from fastapi.security import APIKeyHeader

from diario_api.config import settings
from diario_api.errors import UNAUTHORIZED

api_token_header = APIKeyHeader(name="X-API-Token", auto_error=False)


async def require_api_token(token: str | None = Depends(api_token_header)) -> None:
    """Comparar o header com o segredo configurado / Compare the header with the configured secret.

    Segredo vazio no servidor rejeita todas as requisições.
    An empty server secret rejects every request.
    """
    expected = settings.API_TOKEN
    if not token or not expected or not secrets.compare_digest(token.encode("utf-8"), expected.encode("utf-8")):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=UNAUTHORIZED)
