import logging

import httpx

from .models import Transaction

logger = logging.getLogger(__name__)


class TransactionFetchError(Exception):
    """The transactions API could not be read."""


class TransactionClient:
    def __init__(
        self,
        base_url: str,
        path: str = "/api/transactions",
        *,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.path = path
        self.timeout = timeout
        self.transport = transport

    @property
    def url(self) -> str:
        return f"{self.base_url}{self.path}"

    async def list_transactions(self) -> list[Transaction]:
        logger.info("Fetching transactions from %s", self.url)
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self.transport
            ) as client:
                response = await client.get(self.url)
                response.raise_for_status()
                payload = response.json()
        except httpx.HTTPError as exc:
            logger.warning("Transactions request failed: %s", exc)
            raise TransactionFetchError(str(exc)) from exc
        except ValueError as exc:
            logger.warning("Transactions response is not JSON: %s", exc)
            raise TransactionFetchError("response is not JSON") from exc

        if not isinstance(payload, list):
            logger.warning("Transactions response is not a list: %r", type(payload))
            raise TransactionFetchError("response is not a list")
        try:
            transactions = [Transaction.from_api(item) for item in payload]
        except ValueError as exc:
            logger.warning("Malformed transaction in response: %s", exc)
            raise TransactionFetchError(str(exc)) from exc

        logger.info("Received %d transactions", len(transactions))
        return transactions
