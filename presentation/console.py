# presentation/console.py
"""Entrada e saída do console (rich)."""
from typing import Optional

from rich.console import Console
from rich.prompt import Prompt

from core.entities.fare import ServiceClass, TransportMode
from core.entities.signal import Signal

TRANSPORT_CHOICES = {
    "1": TransportMode.AIRPLANE,
    "2": TransportMode.TRAIN,
    "3": TransportMode.BUS,
}

SERVICE_CLASS_CHOICES = {
    "economica": ServiceClass.ECONOMY,
    "econômica": ServiceClass.ECONOMY,
    "executiva": ServiceClass.BUSINESS,
}


def parse_transport(choice: str) -> Optional[TransportMode]:
    return TRANSPORT_CHOICES.get(choice.strip())


def parse_service_class(text: str) -> Optional[ServiceClass]:
    return SERVICE_CLASS_CHOICES.get(text.strip().lower())


def parse_yes_no(text: str) -> bool:
    """Qualquer resposta iniciada por 's' (sim) conta como afirmativa."""
    return text.strip().lower().startswith("s")


def ask(console: Console, question: str) -> str:
    return Prompt.ask(f"[cyan]{question}[/cyan]", console=console)


def print_signal(console: Console, signal: Signal) -> None:
    """Exibe um sinal de robô publicado no event bus."""
    color = "green" if signal.details.get('signal') == "BUY_SIGNAL" else "red"
    console.print(f"[{color}]📈 {signal.details.get('bot')}: {signal.message}[/{color}]")
