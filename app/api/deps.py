"""FastAPI 의존성 주입 모듈 — 저장소 주입 및 파라미터 바인딩.

FastAPI dependency injection module — Store injection and parameter binding.
The brand router never constructs its collaborator: it receives a
BrandStore through :func:`get_brand_store`, which tests replace via
``app.dependency_overrides``.
"""

from typing import Annotated

from fastapi import Depends, Path, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.services.brand_service import BrandService, BrandStore
from app.utils.exceptions import ValidationFailedError

# 브랜드 ID 범위 — BIGINT 양수 (Positive BIGINT range)
BRAND_ID_MIN: int = 1
BRAND_ID_MAX: int = 2**63 - 1

# 경로 파라미터용 브랜드 ID 타입 — Bounded brand ID for path parameters
BrandId = Annotated[int, Path(ge=BRAND_ID_MIN, le=BRAND_ID_MAX)]


async def get_brand_store(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> BrandStore:
    """요청 범위의 브랜드 저장소를 반환합니다.

    Return the brand store bound to the request's database session.

    Args:
        db: 비동기 DB 세션 (Async database session)

    Returns:
        BrandStore: 브랜드 저장소 (Brand store handle)
    """
    return BrandService(db)


def parse_ids(
    ids: Annotated[list[str], Query(description="브랜드 ID 목록 (Brand IDs, repeated or comma-separated)")],
) -> list[int]:
    """``ids`` 쿼리 파라미터를 정수 목록으로 변환합니다.

    Bind the ``ids`` query parameter. Accepts repeated parameters
    (``ids=1&ids=2``), comma-separated values (``ids=1,2``) or a mix.
    Blank entries are ignored, so ``ids=`` binds to an empty list. Each
    entry must be plain digits within the brand ID range.

    Raises:
        ValidationFailedError: 정수가 아니거나 범위를 벗어난 값
                               (A value is not an integer or is out of range)
    """
    parsed: list[int] = []
    for raw in ids:
        for part in raw.split(","):
            part = part.strip()
            if not part:
                continue
            if not (part.isascii() and part.isdigit()):
                raise ValidationFailedError(f"ids must be integers, got {part!r}")
            # 19자리 초과는 BIGINT 범위 밖 (Over 19 digits cannot be a BIGINT)
            value: int = int(part) if len(part) <= 19 else 0
            if not BRAND_ID_MIN <= value <= BRAND_ID_MAX:
                raise ValidationFailedError(f"ids out of range, got {part}")
            parsed.append(value)
    return parsed


def parse_non_empty_ids(
    ids: Annotated[list[int], Depends(parse_ids)],
) -> list[int]:
    """비어 있지 않은 ``ids`` 목록을 요구합니다.

    Like :func:`parse_ids`, but rejects an empty list.
    """
    if not ids:
        raise ValidationFailedError("ids must not be empty")
    return ids
