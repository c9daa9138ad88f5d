from dataclasses import dataclass
from enum import Enum


class TransactionType(str, Enum):
    CASH_IN = "cash_in"
    CASH_OUT = "cash_out"


def _optional_str(value) -> str | None:
    if value is None:
        return None
    return str(value)


def _str_or_empty(value) -> str:
    if value is None:
        return ""
    return str(value)


@dataclass(frozen=True)
class Transaction:
    id: str
    value: str
    status: str
    created_at: str
    type: TransactionType
    user_id: str | None = None
    description: str | None = None
    payload: str | None = None
    encoded_image: str | None = None

    @classmethod
    def from_api(cls, data: dict) -> "Transaction":
        """Build a record from one item of the transactions API response."""
        if not isinstance(data, dict):
            raise ValueError("transaction must be an object")
        txn_id = data.get("id")
        if not txn_id:
            raise ValueError("transaction id required")
        try:
            txn_type = TransactionType(data.get("type"))
        except ValueError as exc:
            raise ValueError(f"unknown transaction type: {data.get('type')!r}") from exc
        return cls(
            id=str(txn_id),
            value=_str_or_empty(data.get("value")),
            status=_str_or_empty(data.get("status")),
            created_at=_str_or_empty(data.get("createdAt")),
            type=txn_type,
            user_id=_optional_str(data.get("userId")),
            description=_optional_str(data.get("description")),
            payload=_optional_str(data.get("payload")),
            encoded_image=_optional_str(data.get("encodedImage")),
        )

    @property
    def short_id(self) -> str:
        return f"{self.id[:8]}..."

    @property
    def has_image(self) -> bool:
        return bool(self.encoded_image)
