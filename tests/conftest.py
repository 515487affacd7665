"""테스트 인프라 — 인메모리 SQLite DB, 세션, httpx 클라이언트 픽스처.

Test infrastructure — In-memory SQLite DB, session, and httpx client fixtures.
Each test gets a fresh schema on its own in-memory database.
``fake_client`` swaps the brand store for an in-process fake so router
behaviour can be checked against any reported row count.
"""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from app.api.deps import get_brand_store
from app.database import Base, get_db
from app.main import app
from app.models import *  # noqa: F401,F403 — register all models with metadata
from app.schemas.brand import BrandParam, BrandResponse
from app.utils.pagination import Page

# ---------------------------------------------------------------------------
# 테스트 DB 설정
# ---------------------------------------------------------------------------
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


# ---------------------------------------------------------------------------
# Function-scoped: 엔진, 세션, 클라이언트
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """테스트용 async 엔진. 스키마를 생성합니다."""
    # StaticPool: 모든 세션이 같은 인메모리 연결을 공유
    eng = create_async_engine(
        TEST_DATABASE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield eng
    await eng.dispose()


@pytest_asyncio.fixture
async def db(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """각 테스트에 격리된 DB 세션을 제공합니다."""
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """FastAPI 테스트 클라이언트 — DB 세션을 오버라이드합니다."""
    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db

    app.dependency_overrides[get_db] = _override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# 가짜 브랜드 저장소
# ---------------------------------------------------------------------------
class FakeBrandStore:
    """설정한 행 수를 그대로 보고하는 가짜 저장소.

    Fake store that reports ``count`` for every mutation and records calls.
    """

    def __init__(self) -> None:
        self.count: int = 1
        self.brands: dict[int, BrandResponse] = {}
        self.calls: list[tuple] = []

    async def list_all_brand(self) -> list[BrandResponse]:
        self.calls.append(("list_all_brand",))
        return list(self.brands.values())

    async def create_brand(self, param: BrandParam) -> int:
        self.calls.append(("create_brand", param))
        return self.count

    async def update_brand(self, brand_id: int, param: BrandParam) -> int:
        self.calls.append(("update_brand", brand_id, param))
        return self.count

    async def delete_brand(self, brand_id: int) -> int:
        self.calls.append(("delete_brand", brand_id))
        return self.count

    async def delete_brands(self, brand_ids: list[int]) -> int:
        self.calls.append(("delete_brands", brand_ids))
        return self.count

    async def list_brand(
        self,
        keyword: str | None,
        show_status: int | None,
        page_num: int,
        page_size: int,
    ) -> Page[BrandResponse]:
        self.calls.append(("list_brand", keyword, show_status, page_num, page_size))
        items = list(self.brands.values())
        start = (page_num - 1) * page_size
        return Page[BrandResponse].of(
            items[start:start + page_size], len(items), page_num, page_size
        )

    async def get_brand(self, brand_id: int) -> BrandResponse | None:
        self.calls.append(("get_brand", brand_id))
        return self.brands.get(brand_id)

    async def update_show_status(self, brand_ids: list[int], show_status: int) -> int:
        self.calls.append(("update_show_status", brand_ids, show_status))
        return self.count

    async def update_factory_status(self, brand_ids: list[int], factory_status: int) -> int:
        self.calls.append(("update_factory_status", brand_ids, factory_status))
        return self.count


@pytest.fixture
def fake_store() -> FakeBrandStore:
    return FakeBrandStore()


@pytest_asyncio.fixture
async def fake_client(fake_store: FakeBrandStore) -> AsyncGenerator[AsyncClient, None]:
    """가짜 저장소를 주입한 테스트 클라이언트."""
    app.dependency_overrides[get_brand_store] = lambda: fake_store

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# 헬퍼 픽스처: 테스트용 데이터 생성
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def brand(db: AsyncSession):
    """테스트 브랜드를 생성합니다."""
    from app.models.brand import Brand
    b = Brand(
        name="Test Brand",
        first_letter="T",
        sort=10,
        show_status=1,
        factory_status=0,
        logo="https://cdn.test/logo.png",
    )
    db.add(b)
    await db.commit()
    await db.refresh(b)
    return b


@pytest_asyncio.fixture
async def brands(db: AsyncSession):
    """정렬/노출 상태가 다른 브랜드 7개를 생성합니다."""
    from app.models.brand import Brand
    rows = []
    for i in range(7):
        b = Brand(
            name=f"Brand {i}",
            first_letter="B",
            sort=i * 10,
            show_status=i % 2,
            factory_status=0,
            logo=f"https://cdn.test/{i}.png",
        )
        db.add(b)
        rows.append(b)
    await db.commit()
    for b in rows:
        await db.refresh(b)
    return rows
