"""브랜드 레포지토리 — 브랜드 CRUD 및 관련 쿼리.

Brand Repository — CRUD and related queries for brands.
Extends BaseRepository with keyword search and listing order.
"""

from typing import Sequence

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.brand import Brand
from app.repositories.base import BaseRepository
from app.utils.pagination import paginate


class BrandRepository(BaseRepository[Brand]):
    """브랜드 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the brands table.
    """

    def __init__(self) -> None:
        """BrandRepository를 초기화합니다.

        Initialize the BrandRepository with the Brand model.
        """
        super().__init__(Brand)

    async def get_all_ordered(self, db: AsyncSession) -> list[Brand]:
        """모든 브랜드를 ID 순으로 조회합니다.

        Retrieve every brand ordered by ID.
        """
        brands: Sequence[Brand] = await self.get_all(db, order_by=Brand.id)
        return list(brands)

    async def search(
        self,
        db: AsyncSession,
        keyword: str | None,
        show_status: int | None,
        page: int,
        per_page: int,
    ) -> tuple[list[Brand], int]:
        """브랜드를 이름 키워드와 노출 상태로 검색합니다.

        Search brands by name keyword and visibility flag, ordered by
        sort weight (descending) then ID.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            keyword: 이름 부분 일치 키워드, 빈 값이면 무시
                     (Substring matched against name; blank means no filter)
            show_status: 노출 상태 필터 (Visibility filter, None means any)
            page: 페이지 번호, 1부터 시작 (Page number, 1-based)
            per_page: 페이지당 항목 수 (Items per page)

        Returns:
            tuple[list[Brand], int]: (브랜드 목록, 전체 개수)
                                     (Brands on the page, total matches)
        """
        query: Select = select(Brand)

        if keyword:
            query = query.where(Brand.name.like(f"%{keyword}%"))
        if show_status is not None:
            query = query.where(Brand.show_status == show_status)

        query = query.order_by(Brand.sort.desc(), Brand.id)
        items, total = await paginate(db, query, page, per_page)
        return list(items), total


# 싱글턴 인스턴스 — Singleton instance
brand_repository: BrandRepository = BrandRepository()
