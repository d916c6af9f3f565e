"""Services package."""
from .helius import (
    HeliusService,
    HeliusError,
    HeliusNetworkError,
    HeliusDecodeError,
    HeliusNotFoundError,
)
from .helius_models import HeliusTransaction
from .renderer import render, TransactionViews
from .store import TransactionStore

__all__ = [
    "HeliusService",
    "HeliusError",
    "HeliusNetworkError",
    "HeliusDecodeError",
    "HeliusNotFoundError",
    "HeliusTransaction",
    "render",
    "TransactionViews",
    "TransactionStore",
]
