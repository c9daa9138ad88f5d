from pathlib import Path
from zoneinfo import ZoneInfo

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from .client import TransactionClient
from .dashboard import Dashboard
from .log import init_logging
from .logic import (
    format_currency,
    format_date,
    status_badge,
    type_badge,
    value_accent,
)
from .settings import get_settings

BASE_DIR = Path(__file__).resolve().parent.parent

settings = get_settings()
init_logging(settings.log_level)
display_tz = ZoneInfo(settings.display_timezone)

app = FastAPI(title="Pix transactions")
app.mount("/static", StaticFiles(directory=BASE_DIR / "static"), name="static")
templates = Jinja2Templates(directory=BASE_DIR / "templates")
templates.env.filters["currency"] = format_currency
templates.env.filters["local_datetime"] = lambda value: format_date(value, display_tz)
templates.env.globals.update(
    status_badge=status_badge,
    type_badge=type_badge,
    value_accent=value_accent,
)

_dashboard = Dashboard()


def get_dashboard() -> Dashboard:
    """Process-wide state shared by every browser.

    A refresh from one page replaces the list that QR code links from other
    pages resolve against.
    """
    return _dashboard


def get_client() -> TransactionClient:
    return TransactionClient(
        settings.api_base_url,
        settings.transactions_path,
        timeout=settings.request_timeout,
    )


def _build_surface_context(request: Request, dashboard: Dashboard) -> dict:
    return {
        "request": request,
        "state": dashboard.state.value,
        "error": dashboard.error,
        "transactions": dashboard.transactions,
        "summary": dashboard.summary,
    }


@app.get("/", response_class=HTMLResponse)
def index(request: Request, dashboard: Dashboard = Depends(get_dashboard)):
    dashboard.start_loading()
    return templates.TemplateResponse(
        request, "index.html", _build_surface_context(request, dashboard)
    )


@app.get("/loading", response_class=HTMLResponse)
def loading(request: Request, dashboard: Dashboard = Depends(get_dashboard)):
    dashboard.start_loading()
    context = _build_surface_context(request, dashboard)
    if request.headers.get("HX-Request") == "true":
        return templates.TemplateResponse(request, "_loading.html", context)
    return templates.TemplateResponse(request, "index.html", context)


@app.get("/transactions", response_class=HTMLResponse)
async def transactions(
    request: Request,
    dashboard: Dashboard = Depends(get_dashboard),
    client: TransactionClient = Depends(get_client),
):
    await dashboard.refresh(client)
    context = _build_surface_context(request, dashboard)
    if request.headers.get("HX-Request") == "true":
        return templates.TemplateResponse(request, "_surface.html", context)
    return templates.TemplateResponse(request, "index.html", context)


@app.get("/transactions/{txn_id}/qrcode", response_class=HTMLResponse)
def qrcode(
    txn_id: str, request: Request, dashboard: Dashboard = Depends(get_dashboard)
):
    txn = dashboard.find(txn_id)
    if txn is None:
        raise HTTPException(status_code=404, detail="transaction not found")
    if not txn.has_image:
        raise HTTPException(status_code=404, detail="transaction has no QR code")
    return templates.TemplateResponse(
        request, "qrcode.html", {"request": request, "transaction": txn}
    )
