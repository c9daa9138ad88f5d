import pytest

from app.client import TransactionFetchError
from app.dashboard import FETCH_ERROR_MESSAGE, Dashboard, SurfaceState
from app.models import Transaction


class _StubClient:
    """Return queued results in order; an exception instance is raised."""

    def __init__(self, *results) -> None:
        self._results = list(results)
        self.calls = 0

    async def list_transactions(self):
        self.calls += 1
        result = self._results.pop(0)
        if isinstance(result, Exception):
            raise result
        return result


def _txn(txn_id, txn_type="cash_in", status="pending"):
    return Transaction.from_api({"id": txn_id, "type": txn_type, "status": status})


def test_initial_state_is_loading():
    dashboard = Dashboard()
    assert dashboard.state is SurfaceState.LOADING
    assert dashboard.transactions == ()
    assert dashboard.error is None


@pytest.mark.asyncio
async def test_refresh_success_loads_list():
    dashboard = Dashboard()
    state = await dashboard.refresh(_StubClient([_txn("a"), _txn("b", "cash_out")]))
    assert state is SurfaceState.LOADED
    assert [t.id for t in dashboard.transactions] == ["a", "b"]
    assert dashboard.summary.inbound == 1
    assert dashboard.summary.outbound == 1


@pytest.mark.asyncio
async def test_refresh_failure_keeps_list_and_sets_message():
    dashboard = Dashboard()
    client = _StubClient([_txn("a")], TransactionFetchError("boom"))
    await dashboard.refresh(client)

    state = await dashboard.refresh(client)

    assert state is SurfaceState.ERROR
    assert dashboard.error == FETCH_ERROR_MESSAGE
    assert [t.id for t in dashboard.transactions] == ["a"]


@pytest.mark.asyncio
async def test_retry_after_error_recovers():
    dashboard = Dashboard()
    client = _StubClient(TransactionFetchError("down"), [_txn("a")])
    assert await dashboard.refresh(client) is SurfaceState.ERROR

    assert await dashboard.refresh(client) is SurfaceState.LOADED
    assert dashboard.error is None
    assert client.calls == 2


def test_start_loading_clears_error_and_keeps_list():
    dashboard = Dashboard(
        transactions=(_txn("a"),), state=SurfaceState.ERROR, error=FETCH_ERROR_MESSAGE
    )
    dashboard.start_loading()
    assert dashboard.state is SurfaceState.LOADING
    assert dashboard.error is None
    assert len(dashboard.transactions) == 1


def test_find():
    dashboard = Dashboard(transactions=(_txn("a"), _txn("b")))
    assert dashboard.find("b").id == "b"
    assert dashboard.find("missing") is None
