from collections.abc import AsyncIterator

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from pydantic import BaseModel

from httperr import HTTPError, errorf, not_found, register_exception_handlers


class Item(BaseModel):
    id: int
    name: str


class TeapotError(Exception):
    """Third-party style error that carries its own status code."""

    status_code = 418


def build_app() -> FastAPI:
    """Small app whose routes raise every kind of error the handlers cover."""
    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/items/{item_id}")
    async def get_item(item_id: int) -> Item:
        if item_id != 1:
            raise not_found(LookupError(f"item {item_id}"))
        return Item(id=1, name="widget")

    @app.get("/errors/bad-request")
    async def bad_request_route() -> None:
        raise errorf(400, "field %s is required", "name")

    @app.get("/errors/bare")
    async def bare_error() -> None:
        raise HTTPError(503)

    @app.get("/errors/teapot")
    async def teapot() -> None:
        raise TeapotError("short and stout")

    @app.get("/errors/crash")
    async def crash() -> None:
        raise RuntimeError("boom")

    return app


@pytest.fixture
def app() -> FastAPI:
    return build_app()


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    """HTTP client talking to the test app in-process.

    raise_app_exceptions=False because starlette re-raises unhandled exceptions
    after the catch-all handler has already sent its response.
    """
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as client:
        yield client
