"""
Service metadata and documentation page
"""
from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from libur_api.config import settings
from libur_api.schemas import ServiceInfo

router = APIRouter(tags=["meta"])

DOCS_TEMPLATE = Path(__file__).resolve().parent.parent.parent / "templates" / "docs.html"

ENDPOINTS = [
    "/api/libur/:year",
    "/api/libur/:year/bulan/:bulan",
    "/api/libur/:year/tanggal/:tanggal",
]


@router.get("/", response_model=ServiceInfo)
async def index():
    """Service metadata"""
    return ServiceInfo(
        name=settings.APP_NAME,
        runtime="FastAPI",
        source=f"{settings.SOURCE_BASE_URL.rstrip('/')}/",
        endpoints=ENDPOINTS,
    )


@router.get("/docs", response_class=HTMLResponse, include_in_schema=False)
async def docs(request: Request):
    """Static documentation page"""
    base_url = str(request.base_url).rstrip("/")
    html = DOCS_TEMPLATE.read_text(encoding="utf-8")
    return HTMLResponse(html.replace("{{ base_url }}", base_url))
