"""관리자 브랜드 라우터 — 브랜드 CRUD 및 일괄 상태 변경 엔드포인트.

Admin Brand Router — CRUD and bulk status endpoints for brand management.
Every endpoint answers with the ``{code, message, data}`` envelope.
Mutations succeed when the store reports the expected number of affected
rows: exactly one for single-brand operations, at least one for batches.

Route order matters: the literal ``/update/showStatus`` style paths are
declared before their ``/update/{brand_id}`` counterparts.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from app.api.deps import BrandId, get_brand_store, parse_ids, parse_non_empty_ids
from app.config import settings
from app.schemas.brand import BrandParam, BrandResponse, FieldError, validate_brand_param
from app.schemas.common import Failure, Success, failed, success, validate_failed
from app.services.brand_service import BrandStore
from app.utils.pagination import Page

router: APIRouter = APIRouter()


def _single_row_result(count: int, data: int | None) -> Success | Failure:
    """단건 변경 결과 — 정확히 1행이면 성공."""
    if count == 1:
        return success(data)
    return failed()


def _batch_result(count: int) -> Success | Failure:
    """일괄 변경 결과 — 1행 이상이면 성공."""
    if count > 0:
        return success(count)
    return failed()


@router.get("/listAll", response_model=Success[list[BrandResponse]])
async def list_all_brands(
    store: Annotated[BrandStore, Depends(get_brand_store)],
) -> Success:
    """전체 브랜드 목록을 조회합니다.

    List every brand.
    """
    return success(await store.list_all_brand())


@router.post("/create", response_model=Success[int] | Failure)
async def create_brand(
    param: BrandParam,
    store: Annotated[BrandStore, Depends(get_brand_store)],
) -> Success | Failure:
    """새 브랜드를 생성합니다.

    Create a brand. Succeeds with ``data=1`` when exactly one row is inserted.
    """
    errors: list[FieldError] = validate_brand_param(param)
    if errors:
        return validate_failed(errors[0].message)

    count: int = await store.create_brand(param)
    return _single_row_result(count, count)


@router.post("/update/showStatus", response_model=Success[int] | Failure)
async def update_show_status(
    ids: Annotated[list[int], Depends(parse_ids)],
    show_status: Annotated[int, Query(alias="showStatus")],
    store: Annotated[BrandStore, Depends(get_brand_store)],
) -> Success | Failure:
    """여러 브랜드의 노출 상태를 일괄 변경합니다.

    Set the visibility flag on every listed brand.
    """
    count: int = await store.update_show_status(ids, show_status)
    return _batch_result(count)


@router.post("/update/factoryStatus", response_model=Success[int] | Failure)
async def update_factory_status(
    ids: Annotated[list[int], Depends(parse_ids)],
    factory_status: Annotated[int, Query(alias="factoryStatus")],
    store: Annotated[BrandStore, Depends(get_brand_store)],
) -> Success | Failure:
    """여러 브랜드의 제조사 상태를 일괄 변경합니다.

    Set the manufacturer flag on every listed brand.
    """
    count: int = await store.update_factory_status(ids, factory_status)
    return _batch_result(count)


@router.post("/update/{brand_id}", response_model=Success[int] | Failure)
async def update_brand(
    brand_id: BrandId,
    param: BrandParam,
    store: Annotated[BrandStore, Depends(get_brand_store)],
) -> Success | Failure:
    """브랜드 정보를 수정합니다.

    Update a brand. Succeeds with ``data=1`` when exactly one row changes.
    """
    errors: list[FieldError] = validate_brand_param(param)
    if errors:
        return validate_failed(errors[0].message)

    count: int = await store.update_brand(brand_id, param)
    return _single_row_result(count, count)


@router.post("/delete/batch", response_model=Success[int] | Failure)
async def delete_brands(
    ids: Annotated[list[int], Depends(parse_non_empty_ids)],
    store: Annotated[BrandStore, Depends(get_brand_store)],
) -> Success | Failure:
    """여러 브랜드를 일괄 삭제합니다.

    Delete every listed brand. Succeeds with the deleted count when at
    least one row is removed.
    """
    count: int = await store.delete_brands(ids)
    return _batch_result(count)


@router.get("/delete/{brand_id}", response_model=Success[None] | Failure)
async def delete_brand(
    brand_id: BrandId,
    store: Annotated[BrandStore, Depends(get_brand_store)],
) -> Success | Failure:
    """브랜드를 삭제합니다.

    Delete a brand. Deleting an absent brand yields the failure envelope.
    """
    count: int = await store.delete_brand(brand_id)
    return _single_row_result(count, None)


@router.get("/list", response_model=Success[Page[BrandResponse]])
async def list_brands(
    store: Annotated[BrandStore, Depends(get_brand_store)],
    keyword: Annotated[str | None, Query(description="이름 키워드 (Name keyword)")] = None,
    show_status: Annotated[int | None, Query(alias="showStatus")] = None,
    page_num: Annotated[int, Query(alias="pageNum", ge=1)] = 1,
    page_size: Annotated[int, Query(alias="pageSize", ge=1)] = settings.DEFAULT_PAGE_SIZE,
) -> Success:
    """브랜드 목록을 이름 키워드와 노출 상태로 페이지 조회합니다.

    Page through brands, optionally filtered by name keyword and visibility.
    """
    page: Page[BrandResponse] = await store.list_brand(
        keyword, show_status, page_num, page_size
    )
    return success(page)


@router.get("/{brand_id}", response_model=Success[BrandResponse])
async def get_brand(
    brand_id: BrandId,
    store: Annotated[BrandStore, Depends(get_brand_store)],
) -> Success:
    """브랜드 상세 정보를 조회합니다. 없으면 data가 null입니다.

    Fetch one brand. An absent brand is a success with null data.
    """
    return success(await store.get_brand(brand_id))
