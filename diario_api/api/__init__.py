"""Rotas API / API routes."""

from fastapi import APIRouter, Depends

from diario_api.api import (
    abastecimentos,
    controle_oleo,
    dia_trabalho,
    health,
    manutencoes,
)
from diario_api.api.deps import require_api_token

api_router = APIRouter()

# Sonda de saúde sem autenticação / Health check without auth
api_router.include_router(health.router, tags=["health"])

# Rotas protegidas pelo header X-API-Token / Routes guarded by the X-API-Token header
_protected = [Depends(require_api_token)]

api_router.include_router(dia_trabalho.router, prefix="/dia-trabalho", tags=["dia-trabalho"], dependencies=_protected)
api_router.include_router(abastecimentos.router, prefix="/abastecimentos", tags=["abastecimentos"], dependencies=_protected)
api_router.include_router(manutencoes.router, prefix="/manutencoes", tags=["manutencoes"], dependencies=_protected)
api_router.include_router(controle_oleo.router, prefix="/controle-oleo", tags=["controle-oleo"], dependencies=_protected)
