"""Timed-out handlers keep their request-scoped dependencies until they finish."""

import asyncio
import time
from collections.abc import AsyncIterator

import pytest
from dishka import Provider, Scope, make_async_container, provide
from dishka.integrations.fastapi import DishkaRoute, FromDishka, FastapiProvider
from fastapi import APIRouter
from fastapi.testclient import TestClient

from dealort.interface.api import middleware
from dealort.interface.api.app import create_app
from dealort.interface.api.rpc import RPC_PREFIX, RPCRoute
from dealort.util import deadline


class Resource:
    """Stands in for the request's database session."""

    closed = False


class ResourceProvider(Provider):
    def __init__(self, journal: list[str]) -> None:
        super().__init__()
        self.journal = journal

    @provide(scope=Scope.REQUEST)
    async def get_resource(self) -> AsyncIterator[Resource]:
        resource = Resource()
        yield resource
        resource.closed = True
        self.journal.append("finalized")


def wait_for_entries(journal: list[str], count: int, timeout: float = 2.0) -> None:
    started = time.monotonic()
    while len(journal) < count and time.monotonic() - started < timeout:
        time.sleep(0.01)


async def linger(resource: Resource, journal: list[str]) -> dict:
    await asyncio.sleep(0.2)
    journal.append(f"wrote closed={resource.closed}")
    return {"ok": True}


@pytest.fixture
def journal() -> list[str]:
    return []


@pytest.fixture
def app_instance(journal, monkeypatch):
    original = deadline.get_timeout_for_route
    monkeypatch.setattr(
        deadline,
        "get_timeout_for_route",
        lambda key: 20 if key == "jobs.linger" else original(key),
    )
    monkeypatch.setattr(middleware, "DEFAULT_RULES", (("/api/auth/*", 20),))

    container = make_async_container(ResourceProvider(journal), FastapiProvider())
    app_instance = create_app(container=container)

    rpc_router = APIRouter(prefix=f"{RPC_PREFIX}/jobs", route_class=RPCRoute)
    transport_router = APIRouter(route_class=DishkaRoute)

    @rpc_router.post("/linger")
    async def rpc_linger(resource: FromDishka[Resource]) -> dict:
        return await linger(resource, journal)

    @transport_router.get("/api/auth/linger")
    async def transport_linger(resource: FromDishka[Resource]) -> dict:
        return await linger(resource, journal)

    app_instance.include_router(rpc_router)
    app_instance.include_router(transport_router)
    return app_instance


class TestAbandonedHandlerScope:
    def test_rpc_handler_finishes_before_scope_closes(self, app_instance, journal):
        with TestClient(app_instance, raise_server_exceptions=False) as client:
            response = client.post("/rpc/jobs/linger")
            wait_for_entries(journal, 2)

        assert response.status_code == 504
        assert response.json()["code"] == "TIMEOUT"
        assert journal == ["wrote closed=False", "finalized"]

    def test_transport_handler_finishes_before_scope_closes(
        self, app_instance, journal
    ):
        with TestClient(app_instance, raise_server_exceptions=False) as client:
            response = client.get("/api/auth/linger")
            wait_for_entries(journal, 2)

        assert response.status_code == 504
        assert response.json()["error"] == "TIMEOUT"
        assert journal == ["wrote closed=False", "finalized"]

