"""페이지네이션 유틸리티 모듈.

Pagination utility module for SQLAlchemy async queries.
Provides the paginate helper and the Page model returned by GET /brand/list.
"""

import math
from typing import Any, Generic, Sequence, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

T = TypeVar("T")


class Page(BaseModel, Generic[T]):
    """페이지네이션 결과 모델.

    Pagination result model. Serialized as
    ``{pageNum, pageSize, totalPage, total, list}``.

    Attributes:
        page_num: 현재 페이지 번호 (Current page number, 1-based)
        page_size: 페이지당 항목 수 (Items per page)
        total_page: 전체 페이지 수 (Total pages, ceil(total/page_size))
        total: 전체 항목 수 (Total count across all pages)
        items: 현재 페이지 항목 목록 (Items for the current page, wire name "list")
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    page_num: int  # 현재 페이지 번호 — 1부터 시작 (Current page, 1-indexed)
    page_size: int  # 페이지당 항목 수 (Items per page)
    total_page: int  # 전체 페이지 수 (Total pages)
    total: int  # 전체 항목 수 (Total item count)
    items: list[T] = Field(default_factory=list, alias="list")

    @classmethod
    def of(cls, items: Sequence[T], total: int, page_num: int, page_size: int) -> "Page[T]":
        """조회 결과로 페이지를 구성합니다.

        Build a page from one slice of results and the total row count.
        """
        total_page: int = math.ceil(total / page_size) if page_size > 0 else 0
        return cls(
            page_num=page_num,
            page_size=page_size,
            total_page=total_page,
            total=total,
            items=list(items),
        )


async def paginate(
    db: AsyncSession,
    query: Select[Any],
    page: int = 1,
    per_page: int = 20,
) -> tuple[Sequence[Any], int]:
    """SQLAlchemy 쿼리에 대한 페이지네이션을 수행합니다.

    Execute a paginated SQLAlchemy query, returning items and total count.
    Runs two queries: one for the total count (via subquery) and one for
    the actual page of results with OFFSET/LIMIT.

    Args:
        db: 비동기 DB 세션 (Async database session)
        query: SQLAlchemy Select 쿼리 (Base query to paginate)
        page: 요청 페이지 번호, 1부터 시작 (Page number, 1-indexed, default: 1)
        per_page: 페이지당 항목 수 (Items per page, default: 20)

    Returns:
        tuple[Sequence[Any], int]: (항목 목록, 전체 개수) 튜플
            (Tuple of paginated items and total count)
    """
    # 전체 개수 조회 — 서브쿼리로 감싸서 COUNT 실행 (Count total via subquery)
    count_query = select(func.count()).select_from(query.order_by(None).subquery())
    total: int = (await db.execute(count_query)).scalar() or 0

    # 페이지 항목 조회 — OFFSET/LIMIT 적용 (Fetch page items with offset/limit)
    offset: int = (page - 1) * per_page
    result = await db.execute(query.offset(offset).limit(per_page))
    items: Sequence[Any] = result.scalars().all()

    return items, total
