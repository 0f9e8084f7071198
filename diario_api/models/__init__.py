"""
Modelos SQLAlchemy / SQLAlchemy models.
Importar todos os modelos aqui para que o metadata os registre.
Import all models here so the metadata registers them.
"""

from diario_api.models.dia_trabalho import DiaTrabalho
from diario_api.models.abastecimento import Abastecimento
from diario_api.models.manutencao import Manutencao
from diario_api.models.controle_oleo import CONTROLE_OLEO_ID, ControleOleo

__all__ = [
    "DiaTrabalho",
    "Abastecimento",
    "Manutencao",
    "ControleOleo",
    "CONTROLE_OLEO_ID",
]
