"""In-memory holder for the most recently fetched transaction."""
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional
from loguru import logger

from .helius_models import HeliusTransaction


@dataclass(frozen=True)
class StoredTransaction:
    signature: str
    transaction: HeliusTransaction
    fetched_at: datetime


class TransactionStore:
    """Single slot, last writer wins."""

    def __init__(self):
        self._current: Optional[StoredTransaction] = None

    def get(self) -> Optional[StoredTransaction]:
        return self._current

    def set(self, signature: str, transaction: HeliusTransaction) -> StoredTransaction:
        """Replace the stored transaction."""
        if self._current is not None:
            logger.debug(f"Replacing stored transaction {self._current.signature[:8]}...")
        self._current = StoredTransaction(
            signature=signature,
            transaction=transaction,
            fetched_at=datetime.now(timezone.utc),
        )
        return self._current

    def clear(self):
        self._current = None


# Singleton instance
transaction_store = TransactionStore()
