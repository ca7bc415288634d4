"""Health and cache management routes."""

from fastapi import APIRouter, Depends

from reading_proxy.api.deps import get_reading_service
from reading_proxy.api.schemas import (
    CacheEntryStats,
    CacheStatsResponse,
    HealthResponse,
    MessageResponse,
)
from reading_proxy.services.reading_service import ReadingService

router = APIRouter(tags=["cache"])


@router.get("/health", response_model=HealthResponse)
async def health_check(service: ReadingService = Depends(get_reading_service)):
    return HealthResponse(status="ok", cache_size=service.cache.size)


@router.get("/cache/stats", response_model=CacheStatsResponse)
async def cache_stats(service: ReadingService = Depends(get_reading_service)):
    stats = service.cache.stats()
    return CacheStatsResponse(
        size=stats["size"],
        ttl_ms=stats["ttl"] * 1000,
        entries=[CacheEntryStats(**e) for e in stats["entries"]],
    )


@router.post("/cache/clear", response_model=MessageResponse)
async def clear_cache(service: ReadingService = Depends(get_reading_service)):
    service.cache.clear()
    return MessageResponse(message="Cache cleared")
