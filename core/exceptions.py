#core/exceptions.py
"""Exceções do domínio da bolsa e da calculadora de tarifas."""


class ExchangeError(Exception):
    """Base para todos os erros do sistema."""
    pass


class InvalidPriceError(ExchangeError):
    """Atualização de preço rejeitada (valor negativo)."""

    def __init__(self, symbol: str, price: float):
        self.symbol = symbol
        self.price = price
        super().__init__(f"Preço inválido para {symbol}: {price} (não pode ser negativo)")


class DispatcherShutdownError(ExchangeError):
    """O despachante já foi encerrado e não aceita novas notificações."""
    pass


class InvalidInputError(ExchangeError):
    """Dados de entrada inválidos para o cálculo de tarifa."""
    pass


class StrategyNotSetError(ExchangeError):
    """Nenhuma estratégia de transporte foi selecionada."""
    pass
