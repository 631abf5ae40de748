"""
Phonebook Backend: Info Page
===============================

What:  GET /info, a small HTML fragment with the entry count and server time.
"""

from datetime import datetime

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse
from sqlalchemy.ext.asyncio import AsyncSession

from phonebook.database import get_db_session
from phonebook.services.person_service import person_service

router = APIRouter(tags=["Info"])


def render_info(count: int, now: datetime) -> str:
    # Local time with offset, e.g. "Mon Oct 19 2026 17:22:05 GMT+0000 (UTC)"
    stamp = now.strftime("%a %b %d %Y %H:%M:%S GMT%z (%Z)")
    return f"<p>Phonebook has info for {count} people</p><p>{stamp}</p>"


@router.get("/info", response_class=HTMLResponse, summary="Phonebook summary page")
async def info(db: AsyncSession = Depends(get_db_session)) -> HTMLResponse:
    count = await person_service.count_persons(db)
    return HTMLResponse(render_info(count, datetime.now().astimezone()))
