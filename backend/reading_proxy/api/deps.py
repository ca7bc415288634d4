"""FastAPI dependencies."""

from fastapi import Request

from reading_proxy.services.reading_service import ReadingService


def get_reading_service(request: Request) -> ReadingService:
    """The service built in the app lifespan."""
    return request.app.state.reading_service
