"""Domain layer for ledgerflow application."""

from ledgerflow.domain.cash_flow import CashFlowService, ClassifierConfig, classify
from ledgerflow.domain.currency import CurrencyService

__all__ = [
    "CashFlowService",
    "ClassifierConfig",
    "CurrencyService",
    "classify",
]
