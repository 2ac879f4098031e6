#core/entities/signal.py
"""Entidade Signal - representa sinais de trading."""
from datetime import datetime
from enum import Enum
from typing import Dict, Any
from pydantic import BaseModel, ConfigDict, Field


class TradingSignal(str, Enum):
    """Decisão de um robô para uma cotação. Recalculada a cada update."""
    NO_SIGNAL = "NO_SIGNAL"
    BUY_SIGNAL = "BUY_SIGNAL"
    SELL_SIGNAL = "SELL_SIGNAL"


class SignalSource(str, Enum):
    """Fonte do sinal."""
    TRADING_BOT = "TRADING_BOT"
    SYSTEM = "SYSTEM"


class SignalLevel(str, Enum):
    """Nível de importância do sinal."""
    INFO = "INFO"
    WARNING = "WARNING"
    ALERT = "ALERT"


class Signal(BaseModel):
    """Representa um sinal de trading gerado pelo sistema."""
    model_config = ConfigDict(frozen=True)

    source: SignalSource
    level: SignalLevel
    message: str
    timestamp: datetime = Field(default_factory=datetime.now)
    details: Dict[str, Any] = Field(default_factory=dict)
