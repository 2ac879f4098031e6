# main.py
"""
Console: calculadora de tarifas de viagem + bolsa de cotações com observadores.
"""
import sys
import logging
from pathlib import Path
from rich.console import Console
from rich.logging import RichHandler

from config.settings import ConfigurationError, load_config
from core.entities.fare import TransportMode
from core.exceptions import ExchangeError
from core.factories.exchange import ExchangeFactory
from core.fares import TravelBookingContext, create_strategy
from application.observers.trading_bot import TRADING_SIGNAL_EVENT
from presentation.console import (
    ask, parse_service_class, parse_transport, parse_yes_no, print_signal
)


def setup_logging(console: Console, log_dir: str = 'logs', level: str = 'INFO') -> None:
    """Configura o sistema de logging."""
    log_path = Path(log_dir)
    log_path.mkdir(exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.handlers.clear()

    file_handler = logging.FileHandler(
        log_path / "system.log",
        mode='w',
        encoding='utf-8'
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter('%(asctime)s - %(threadName)s - %(name)s - %(levelname)s - %(message)s')
    )

    console_handler = RichHandler(
        console=console,
        level=level.upper(),
        show_time=False,
        markup=False
    )

    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)


def run_fare_calculator(console: Console) -> bool:
    """Pergunta os dados da viagem e exibe o custo. Retorna False se a entrada for inválida."""
    console.print("[bold cyan]Sistema de reserva de viagens[/bold cyan]")
    console.print("Escolha o transporte:\n  1 - Avião\n  2 - Trem\n  3 - Ônibus")

    mode = parse_transport(ask(console, "Transporte"))
    if mode is None:
        console.print("[red]Escolha de transporte inválida.[/red]")
        return False

    context = TravelBookingContext()
    context.set_strategy(create_strategy(mode))

    try:
        distance = float(ask(console, "Distância (km)"))
        service_class = parse_service_class(ask(console, "Classe de serviço (economica/executiva)"))
        if service_class is None:
            console.print("[red]Classe de serviço inválida.[/red]")
            return False
        passengers = int(ask(console, "Número de passageiros"))
        has_luggage = parse_yes_no(ask(console, "Tem bagagem? (sim/não)"))
        is_discounted = parse_yes_no(ask(console, "Há crianças ou idosos? (sim/não)"))

        total = context.calculate_total_cost(
            distance, service_class, passengers, has_luggage, is_discounted
        )
    except (ValueError, ExchangeError) as e:
        console.print(f"[red]Erro nos dados de entrada: {e}[/red]")
        return False

    label = {TransportMode.AIRPLANE: "Avião", TransportMode.TRAIN: "Trem", TransportMode.BUS: "Ônibus"}[mode]
    console.print(f"[green]Custo total da viagem ({label}): {total:.2f}[/green]")
    return True


def run_exchange_demo(console: Console, factory: ExchangeFactory) -> None:
    """Cenário de demonstração da bolsa com um trader e um robô."""
    console.print("\n[bold cyan]Sistema de negociação de ações[/bold cyan]")

    event_bus = factory.create_event_bus()
    event_bus.subscribe(TRADING_SIGNAL_EVENT, lambda signal: print_signal(console, signal))

    exchange = factory.create_exchange()
    try:
        trader = factory.create_trader("Sumaya")
        trader.subscribe_to("AAPL")
        trader.subscribe_to("GOOGL")

        bot = factory.create_trading_bot("SuperBot", event_bus=event_bus)
        bot.subscribe_to("AAPL")
        bot.set_threshold("AAPL", 190.0)
        bot.subscribe_to("TSLA")
        bot.set_threshold("TSLA", 250.0)

        exchange.register_observer(trader, "AAPL")
        exchange.register_observer(trader, "GOOGL")
        exchange.register_observer(bot, "AAPL")
        exchange.register_observer(bot, "TSLA")

        console.print("\n[yellow]--- Mudança de preços ---[/yellow]")
        for symbol, price in (("AAPL", 185.0), ("AAPL", 192.0), ("TSLA", 240.0), ("TSLA", 260.0)):
            exchange.set_stock_price(symbol, price)
            exchange.wait_until_idle(timeout=1.0)

        console.print("\n[yellow]Trader deixa de acompanhar AAPL[/yellow]")
        exchange.remove_observer(trader, "AAPL")
        exchange.set_stock_price("AAPL", 195.0)
    finally:
        exchange.shutdown()


def main() -> int:
    """Função principal."""
    console = Console()

    try:
        config = load_config()
    except ConfigurationError as e:
        console.print(f"[red]❌ {e}[/red]")
        return 1

    system = config['system']
    setup_logging(console, system['log_dir'], system['log_level'])

    if not run_fare_calculator(console):
        return 1

    run_exchange_demo(console, ExchangeFactory(config))
    return 0


if __name__ == "__main__":
    sys.exit(main())
