"""브랜드 서비스 — 브랜드 CRUD 및 일괄 상태 변경 비즈니스 로직.

Brand Service — Business logic for brand CRUD and bulk status updates.
Defines the BrandStore protocol the API layer depends on, and the
SQLAlchemy-backed implementation. Every mutating call commits its own
unit of work and reports the number of affected rows.
"""

from typing import Any, Protocol

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.brand import Brand
from app.repositories.brand_repository import brand_repository
from app.schemas.brand import BrandParam, BrandResponse
from app.utils.pagination import Page


class BrandStore(Protocol):
    """브랜드 저장소 인터페이스.

    Interface the brand router talks to. Mutations return affected row
    counts; lookups return response schemas.
    """

    async def list_all_brand(self) -> list[BrandResponse]: ...

    async def create_brand(self, param: BrandParam) -> int: ...

    async def update_brand(self, brand_id: int, param: BrandParam) -> int: ...

    async def delete_brand(self, brand_id: int) -> int: ...

    async def delete_brands(self, brand_ids: list[int]) -> int: ...

    async def list_brand(
        self,
        keyword: str | None,
        show_status: int | None,
        page_num: int,
        page_size: int,
    ) -> Page[BrandResponse]: ...

    async def get_brand(self, brand_id: int) -> BrandResponse | None: ...

    async def update_show_status(self, brand_ids: list[int], show_status: int) -> int: ...

    async def update_factory_status(self, brand_ids: list[int], factory_status: int) -> int: ...


class BrandService:
    """브랜드 관련 비즈니스 로직을 처리하는 서비스.

    SQLAlchemy implementation of :class:`BrandStore`, bound to one
    request-scoped session.

    Attributes:
        db: 비동기 데이터베이스 세션 (Async database session)
    """

    def __init__(self, db: AsyncSession) -> None:
        self.db: AsyncSession = db

    def _to_response(self, brand: Brand) -> BrandResponse:
        """브랜드 모델을 응답 스키마로 변환합니다.

        Convert a Brand model instance to a BrandResponse schema.
        """
        return BrandResponse.model_validate(brand)

    def _to_values(self, param: BrandParam) -> dict[str, Any]:
        """요청 데이터를 컬럼 값으로 변환합니다 (null 필드 제외).

        Convert a payload to column values, skipping null fields.
        A blank first letter is derived from the name.
        """
        values: dict[str, Any] = param.model_dump(exclude_none=True)
        if not param.first_letter and param.name:
            values["first_letter"] = param.name[:1]
        return values

    async def list_all_brand(self) -> list[BrandResponse]:
        """모든 브랜드를 조회합니다.

        List every brand.
        """
        brands: list[Brand] = await brand_repository.get_all_ordered(self.db)
        return [self._to_response(b) for b in brands]

    async def create_brand(self, param: BrandParam) -> int:
        """새 브랜드를 생성합니다.

        Create a brand.

        Args:
            param: 브랜드 생성 데이터 (Brand creation data)

        Returns:
            int: 생성된 행 수, 항상 1 (Rows inserted, always 1)
        """
        await brand_repository.create(self.db, self._to_values(param))
        await self.db.commit()
        return 1

    async def update_brand(self, brand_id: int, param: BrandParam) -> int:
        """브랜드 정보를 수정합니다 (null이 아닌 필드만).

        Update the non-null fields of a brand.

        Args:
            brand_id: 브랜드 ID (Brand ID)
            param: 수정 데이터 (Update data)

        Returns:
            int: 변경된 행 수, 없으면 0 (Rows matched, 0 when absent)
        """
        count: int = await brand_repository.update_by_id(
            self.db, brand_id, self._to_values(param)
        )
        await self.db.commit()
        return count

    async def delete_brand(self, brand_id: int) -> int:
        """브랜드를 삭제합니다.

        Delete a brand by ID.

        Returns:
            int: 삭제된 행 수 (Rows deleted, 0 or 1)
        """
        count: int = await brand_repository.delete_by_id(self.db, brand_id)
        await self.db.commit()
        return count

    async def delete_brands(self, brand_ids: list[int]) -> int:
        """여러 브랜드를 한 번에 삭제합니다.

        Delete every brand in ``brand_ids``.

        Returns:
            int: 삭제된 행 수 (Rows deleted)
        """
        count: int = await brand_repository.delete_many(self.db, brand_ids)
        await self.db.commit()
        return count

    async def list_brand(
        self,
        keyword: str | None,
        show_status: int | None,
        page_num: int,
        page_size: int,
    ) -> Page[BrandResponse]:
        """키워드와 노출 상태로 브랜드를 페이지 조회합니다.

        Page through brands filtered by name keyword and visibility.

        Args:
            keyword: 이름 부분 일치 키워드 (Name substring, optional)
            show_status: 노출 상태 필터 (Visibility filter, optional)
            page_num: 페이지 번호 (Page number, 1-based)
            page_size: 페이지 크기 (Page size)

        Returns:
            Page[BrandResponse]: 브랜드 페이지 (Page of brands)
        """
        brands, total = await brand_repository.search(
            self.db, keyword, show_status, page_num, page_size
        )
        return Page[BrandResponse].of(
            [self._to_response(b) for b in brands], total, page_num, page_size
        )

    async def get_brand(self, brand_id: int) -> BrandResponse | None:
        """브랜드를 조회합니다. 없으면 None.

        Fetch one brand, or None when absent.
        """
        brand: Brand | None = await brand_repository.get_by_id(self.db, brand_id)
        if brand is None:
            return None
        return self._to_response(brand)

    async def update_show_status(self, brand_ids: list[int], show_status: int) -> int:
        """여러 브랜드의 노출 상태를 변경합니다.

        Set the visibility flag on every brand in ``brand_ids``.

        Returns:
            int: 변경된 행 수 (Rows updated)
        """
        count: int = await brand_repository.update_many(
            self.db, brand_ids, {"show_status": show_status}
        )
        await self.db.commit()
        return count

    async def update_factory_status(self, brand_ids: list[int], factory_status: int) -> int:
        """여러 브랜드의 제조사 상태를 변경합니다.

        Set the manufacturer flag on every brand in ``brand_ids``.

        Returns:
            int: 변경된 행 수 (Rows updated)
        """
        count: int = await brand_repository.update_many(
            self.db, brand_ids, {"factory_status": factory_status}
        )
        await self.db.commit()
        return count
