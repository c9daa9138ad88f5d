from dataclasses import dataclass
from datetime import date, datetime, timezone, tzinfo
from decimal import MAX_PREC, Decimal, InvalidOperation, ROUND_HALF_UP, localcontext
from typing import Iterable

from .models import Transaction, TransactionType

ZERO_CURRENCY = "R$ 0,00"
INVALID_DATE = "Data inválida"


@dataclass(frozen=True)
class Badge:
    css_class: str
    label: str
    icon: str | None = None


_STATUS_BADGES = {
    "pending": Badge("bg-warning text-dark", "Pendente"),
    "completed": Badge("bg-success", "Concluído"),
    "received": Badge("bg-success", "Recebido"),
    "failed": Badge("bg-danger", "Falhou"),
    "cancelled": Badge("bg-secondary", "Cancelado"),
}

_TYPE_BADGES = {
    TransactionType.CASH_IN: Badge("bg-primary", "Depósito", "bi-arrow-down-circle"),
    TransactionType.CASH_OUT: Badge("bg-info", "Saque", "bi-arrow-up-circle"),
}

_SETTLED_STATUSES = {"completed", "received"}


def _parse_decimal(s) -> Decimal | None:
    try:
        d = Decimal(str(s).strip())
    except InvalidOperation:
        return None
    if not d.is_finite():
        return None
    return d


def format_currency(value) -> str:
    d = _parse_decimal(value)
    if d is None:
        return ZERO_CURRENCY
    with localcontext() as ctx:
        # integer digits, two cents and one carry from rounding
        ctx.prec = min(max(ctx.prec, d.adjusted() + 4), MAX_PREC)
        try:
            cents = d.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
        except InvalidOperation:
            return ZERO_CURRENCY
        # en-US grouping first, then swap separators to pt-BR
        grouped = f"{abs(cents):,.2f}"
    sign = "-" if cents < 0 else ""
    grouped = grouped.replace(",", "_").replace(".", ",").replace("_", ".")
    return f"{sign}R$ {grouped}"


def _parse_timestamp(s: str) -> datetime | None:
    if not isinstance(s, str) or not s.strip():
        return None
    text = s.strip()
    try:
        day = date.fromisoformat(text)
    except ValueError:
        pass
    else:
        # date-only values are UTC midnight
        return datetime(day.year, day.month, day.day, tzinfo=timezone.utc)
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


def format_date(value: str, tz: tzinfo = timezone.utc) -> str:
    parsed = _parse_timestamp(value)
    if parsed is None:
        return INVALID_DATE
    if parsed.tzinfo is None:
        local = parsed
    else:
        local = parsed.astimezone(tz)
    return local.strftime("%d/%m/%Y, %H:%M")


def status_badge(status: str) -> Badge:
    return _STATUS_BADGES.get(status.lower(), Badge("bg-secondary", status))


def type_badge(txn_type: TransactionType) -> Badge:
    return _TYPE_BADGES[TransactionType(txn_type)]


def value_accent(txn_type: TransactionType, value) -> str:
    d = _parse_decimal(value)
    if d is None or d == 0:
        return "text-muted"
    if TransactionType(txn_type) is TransactionType.CASH_IN:
        return "text-success"
    return "text-danger"


@dataclass(frozen=True)
class Summary:
    inbound: int
    outbound: int
    completed: int
    pending: int
    total: int


def summarize(transactions: Iterable[Transaction]) -> Summary:
    txns = list(transactions)
    return Summary(
        inbound=sum(1 for t in txns if t.type is TransactionType.CASH_IN),
        outbound=sum(1 for t in txns if t.type is TransactionType.CASH_OUT),
        completed=sum(1 for t in txns if t.status.lower() in _SETTLED_STATUSES),
        pending=sum(1 for t in txns if t.status.lower() == "pending"),
        total=len(txns),
    )
