"""Reading API routes."""

from fastapi import APIRouter, Depends, Response

from reading_proxy.api.deps import get_reading_service
from reading_proxy.services.reading_service import ReadingService, resolve_date

router = APIRouter(tags=["reading"])


@router.get("/reading")
async def get_reading(
    date: str | None = None,
    service: ReadingService = Depends(get_reading_service),
):
    """Today's OYCB reading, or the reading for ?date=YYYY-MM-DD."""
    result = await service.get_reading(resolve_date(date))
    return Response(
        content=result.data,
        media_type="text/html; charset=utf-8",
        headers={"X-Cache": result.cache_status, "X-Cache-Date": result.date},
    )
