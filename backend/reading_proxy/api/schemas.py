"""Pydantic schemas for API responses."""

from pydantic import BaseModel, ConfigDict, Field


class HealthResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    status: str
    cache_size: int = Field(alias="cacheSize")


class CacheEntryStats(BaseModel):
    key: str
    date: str
    age: int  # seconds


class CacheStatsResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    size: int
    ttl_ms: int = Field(alias="ttlMs")
    entries: list[CacheEntryStats]


class MessageResponse(BaseModel):
    message: str
