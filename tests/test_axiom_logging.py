"""Axiom 로깅 미들웨어 테스트.

Axiom logging middleware tests — a recording client stands in for Axiom,
so each request's structured event can be inspected.
"""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from httpx import ASGITransport, AsyncClient

from app.api.admin import admin_router
from app.api.deps import get_brand_store
from app.main import request_validation_handler, validation_failed_handler
from app.middleware.axiom_logging import AxiomLoggingMiddleware
from app.utils.exceptions import ValidationFailedError

URL = "/brand"
DATASET = "brand-api-test"


class RecordingAxiomClient:
    """ingest_events 호출을 기록하는 가짜 Axiom 클라이언트."""

    def __init__(self) -> None:
        self.events: list[dict] = []
        self.datasets: list[str] = []
        self.fail: bool = False

    def ingest_events(self, dataset: str, events: list[dict]) -> None:
        if self.fail:
            raise ConnectionError("axiom unreachable")
        self.datasets.append(dataset)
        self.events.extend(events)


@pytest.fixture
def axiom() -> RecordingAxiomClient:
    return RecordingAxiomClient()


@pytest_asyncio.fixture
async def logged_client(
    axiom: RecordingAxiomClient, fake_store
) -> AsyncGenerator[AsyncClient, None]:
    """기록용 클라이언트를 주입한 미들웨어 앱."""
    test_app = FastAPI()
    test_app.add_middleware(AxiomLoggingMiddleware, client=axiom, dataset=DATASET)
    test_app.add_exception_handler(RequestValidationError, request_validation_handler)
    test_app.add_exception_handler(ValidationFailedError, validation_failed_handler)

    @test_app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    test_app.include_router(admin_router)
    test_app.dependency_overrides[get_brand_store] = lambda: fake_store

    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


class TestEnvelopeLogging:
    """봉투 code/message 기록."""

    async def test_success_logs_result_code(self, logged_client: AsyncClient, axiom):
        res = await logged_client.get(f"{URL}/delete/3")
        assert res.json()["code"] == 200

        assert axiom.datasets == [DATASET]
        event = axiom.events[0]
        assert event["method"] == "GET"
        assert event["path"] == "/brand/delete/3"
        assert event["status_code"] == 200
        assert event["result_code"] == 200
        assert "error" not in event

    async def test_failed_envelope_logs_message(self, logged_client: AsyncClient, axiom, fake_store):
        """HTTP 200이어도 실패 봉투는 error로 기록."""
        fake_store.count = 0
        res = await logged_client.post(f"{URL}/create", json={"name": "Nike"})
        assert res.status_code == 200

        event = axiom.events[0]
        assert event["status_code"] == 200
        assert event["result_code"] == 500
        assert event["error"] == "Operation failed"

    async def test_validation_failure_logged(self, logged_client: AsyncClient, axiom):
        await logged_client.post(f"{URL}/delete/batch", params={"ids": "x"})
        event = axiom.events[0]
        assert event["result_code"] == 404
        assert "must be integers" in event["error"]
        assert event["query_params"] == {"ids": "x"}


class TestRequestCapture:
    """요청 본문 기록 및 마스킹."""

    async def test_sensitive_body_fields_masked(self, logged_client: AsyncClient, axiom):
        await logged_client.post(
            f"{URL}/create", json={"name": "Nike", "password": "hunter2"}
        )
        body = axiom.events[0]["request_body"]
        assert body["password"] == "***"
        assert body["name"] == "Nike"

    async def test_non_json_body(self, logged_client: AsyncClient, axiom):
        await logged_client.post(
            f"{URL}/create", content="{bad", headers={"content-type": "application/json"}
        )
        assert axiom.events[0]["request_body"] == "(non-json body)"

    async def test_health_not_logged(self, logged_client: AsyncClient, axiom):
        res = await logged_client.get("/health")
        assert res.json() == {"status": "ok"}
        assert axiom.events == []


class TestIngestFailure:
    """로깅 실패가 응답에 영향 없음."""

    async def test_response_unchanged(self, logged_client: AsyncClient, axiom, fake_store):
        axiom.fail = True
        res = await logged_client.post(
            f"{URL}/delete/batch", params={"ids": [1, 2]}
        )
        assert res.status_code == 200
        assert res.json() == {"code": 200, "message": "Operation succeeded", "data": 1}
        assert fake_store.calls == [("delete_brands", [1, 2])]
        assert axiom.events == []
