#core/entities/price.py
"""Entidade PriceUpdate - representa uma atualização de cotação."""
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field


class PriceUpdate(BaseModel):
    """Cotação aceita pela bolsa, entregue aos observadores."""
    model_config = ConfigDict(frozen=True)

    symbol: str
    price: float = Field(ge=0, description="Novo preço do ativo")
    timestamp: datetime = Field(default_factory=datetime.now)
