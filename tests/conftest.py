from collections.abc import AsyncIterator

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from portfolio_api.app import create_app
from portfolio_api.settings import Settings
from portfolio_api.utils.email import MemoryTransport


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,  # type: ignore[call-arg]
        smtp_user="portfolio@example.com",
        smtp_password="My SMTP password",  # noqa: S106
        contact_email="owner@example.com",
    )


@pytest.fixture
def transport() -> MemoryTransport:
    return MemoryTransport()


@pytest.fixture
def app(settings: Settings, transport: MemoryTransport) -> FastAPI:
    return create_app(settings, transport)


@pytest.fixture
async def client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as client:
        yield client
