"""초기 데이터 시드 스크립트 — 샘플 브랜드 생성.

Seed script — Creates the sample brand catalogue.
Run this script once to bootstrap a development database.

Usage:
    python -m app.seed

Creates:
    - 8개 브랜드 (8 brands), 노출/제조사 상태 혼합 (mixed show/factory flags)
"""

import asyncio

from sqlalchemy import select

from app.database import async_session, engine, Base
from app.models import Brand

# (이름, 분류, 정렬, 제조사, 노출) — (name, category, sort, factory_status, show_status)
SAMPLE_BRANDS: list[tuple[str, str, int, int, int]] = [
    ("Wanhe", "Home Appliances", 0, 1, 1),
    ("Samsung", "Electronics", 100, 1, 1),
    ("Gree", "Home Appliances", 30, 1, 0),
    ("Fotile", "Kitchen", 20, 1, 0),
    ("Xiaomi", "Electronics", 500, 1, 1),
    ("OPPO", "Electronics", 0, 1, 1),
    ("Huawei", "Electronics", 100, 1, 1),
    ("Apple", "Electronics", 200, 1, 1),
]


async def seed() -> None:
    """데이터베이스를 샘플 브랜드로 시드합니다.

    Seed the database with sample brands.
    Creates tables if they don't exist, then inserts the catalogue.

    Idempotent: 이미 시드된 경우 건너뜁니다 (Skips if any brand exists).
    """
    # 테이블 생성 — DDL 실행 (Create all tables from ORM metadata)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session() as db:
        result = await db.execute(select(Brand).limit(1))
        if result.scalar_one_or_none():
            print("Already seeded. Skipping.")
            return

        for name, category, sort, factory_status, show_status in SAMPLE_BRANDS:
            db.add(
                Brand(
                    name=name,
                    first_letter=name[:1],
                    category=category,
                    sort=sort,
                    factory_status=factory_status,
                    show_status=show_status,
                    logo=f"https://static.example.com/brand/{name.lower()}.png",
                )
            )

        await db.commit()
        print(f"Seeded {len(SAMPLE_BRANDS)} brands.")


if __name__ == "__main__":
    asyncio.run(seed())
