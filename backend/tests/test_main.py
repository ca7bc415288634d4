"""Tests for startup configuration handling."""

from unittest.mock import patch

import pytest
from fastapi import FastAPI

from reading_proxy.errors import ConfigurationError
from reading_proxy.main import lifespan, run
from reading_proxy.services.reading_service import ReadingService


def test_run_exits_without_api_key():
    with patch("reading_proxy.config.NLT_API_KEY", None), patch(
        "reading_proxy.main.uvicorn.run"
    ) as mock_run:
        with pytest.raises(SystemExit) as exc_info:
            run()
    assert exc_info.value.code == 1
    mock_run.assert_not_called()


def test_run_starts_server_with_api_key():
    with patch("reading_proxy.config.NLT_API_KEY", "secret"), patch(
        "reading_proxy.main.uvicorn.run"
    ) as mock_run:
        run()
    mock_run.assert_called_once()


@pytest.mark.asyncio
async def test_lifespan_refuses_to_start_without_api_key():
    with patch("reading_proxy.config.NLT_API_KEY", ""):
        with pytest.raises(ConfigurationError):
            async with lifespan(FastAPI()):
                pass


@pytest.mark.asyncio
async def test_lifespan_builds_reading_service():
    test_app = FastAPI()
    with patch("reading_proxy.config.NLT_API_KEY", "secret"):
        async with lifespan(test_app):
            service = test_app.state.reading_service
            assert isinstance(service, ReadingService)
            assert service.cache.size == 0
