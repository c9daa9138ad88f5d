"""In-memory state behind the transactions page.

The page is in exactly one of three states. It starts in ``LOADING``; a
finished fetch moves it to ``LOADED`` or ``ERROR``, and a retry or refresh
moves it back to ``LOADING``. A failed fetch keeps the previously held
list.
"""
import logging
from dataclasses import dataclass
from enum import Enum

from .client import TransactionClient, TransactionFetchError
from .logic import Summary, summarize
from .models import Transaction

logger = logging.getLogger(__name__)

FETCH_ERROR_MESSAGE = "Erro ao carregar transações. Verifique se a API está rodando."


class SurfaceState(str, Enum):
    LOADING = "loading"
    ERROR = "error"
    LOADED = "loaded"


@dataclass
class Dashboard:
    transactions: tuple[Transaction, ...] = ()
    state: SurfaceState = SurfaceState.LOADING
    error: str | None = None

    def start_loading(self) -> None:
        self.state = SurfaceState.LOADING
        self.error = None

    async def refresh(self, client: TransactionClient) -> SurfaceState:
        self.start_loading()
        try:
            transactions = await client.list_transactions()
        except TransactionFetchError as exc:
            logger.error("Could not load transactions: %s", exc)
            self.error = FETCH_ERROR_MESSAGE
            self.state = SurfaceState.ERROR
            return self.state
        self.transactions = tuple(transactions)
        self.state = SurfaceState.LOADED
        return self.state

    def find(self, txn_id: str) -> Transaction | None:
        for txn in self.transactions:
            if txn.id == txn_id:
                return txn
        return None

    @property
    def summary(self) -> Summary:
        return summarize(self.transactions)
