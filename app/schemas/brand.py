"""브랜드 요청/응답 스키마 및 파라미터 검증.

Brand request/response schemas and parameter validation.
JSON field names are camelCase on the wire (``showStatus``, ``firstLetter``)
and snake_case in Python.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

# 0/1 플래그 허용 값 — Allowed values for show/factory status flags
FLAG_VALUES: frozenset[int] = frozenset({0, 1})


class BrandParam(BaseModel):
    """브랜드 생성/수정 요청 스키마.

    Brand create/update payload. Every field is optional at the binding
    level; business rules are applied by :func:`validate_brand_param`.

    Attributes:
        name: 브랜드 이름 (Brand name, required by validation)
        first_letter: 첫 글자 (First letter, derived from name when blank)
        category: 분류 (Category label)
        sort: 정렬 가중치 (Sort weight, >= 0)
        factory_status: 제조사 여부 0/1 (Manufacturer flag)
        show_status: 노출 여부 0/1 (Visibility flag)
        logo: 로고 URL (Logo URL, optional)
        big_pic: 대표 이미지 URL (Banner image URL)
        brand_story: 브랜드 스토리 (Brand story)
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str | None = None
    first_letter: str | None = None
    category: str | None = None
    sort: int | None = None
    factory_status: int | None = None
    show_status: int | None = None
    logo: str | None = None
    big_pic: str | None = None
    brand_story: str | None = None


class BrandResponse(BaseModel):
    """브랜드 응답 스키마.

    Brand record as returned by the API.
    """

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )

    id: int
    name: str
    first_letter: str | None = None
    category: str | None = None
    sort: int = 0
    factory_status: int = 0
    show_status: int = 0
    product_count: int = 0
    product_comment_count: int = 0
    logo: str | None = None
    big_pic: str | None = None
    brand_story: str | None = None


class FieldError(BaseModel):
    """단일 필드 검증 오류.

    A single field validation error.

    Attributes:
        field: 요청 상의 필드 이름 (Wire name of the offending field)
        message: 오류 메시지 (Human-readable message)
    """

    field: str
    message: str


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def validate_brand_param(param: BrandParam) -> list[FieldError]:
    """브랜드 파라미터를 검증하고 오류 목록을 반환합니다.

    Validate a brand payload and return every rule violation, in field
    order. An empty list means the payload is acceptable.

    Rules:
        - name: 공백 불가 (must not be blank)
        - sort: 0 이상 (at least 0 when given)
        - factoryStatus, showStatus: 0 또는 1 (0 or 1 when given)

    Args:
        param: 검증할 요청 데이터 (Payload to validate)

    Returns:
        list[FieldError]: 검증 오류 목록 (Validation errors, possibly empty)
    """
    errors: list[FieldError] = []

    if _is_blank(param.name):
        errors.append(FieldError(field="name", message="name must not be empty"))
    if param.sort is not None and param.sort < 0:
        errors.append(FieldError(field="sort", message="sort must be at least 0"))
    if param.factory_status is not None and param.factory_status not in FLAG_VALUES:
        errors.append(
            FieldError(field="factoryStatus", message="factoryStatus must be 0 or 1")
        )
    if param.show_status is not None and param.show_status not in FLAG_VALUES:
        errors.append(
            FieldError(field="showStatus", message="showStatus must be 0 or 1")
        )

    return errors
