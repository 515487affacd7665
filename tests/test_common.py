"""공통 스키마 단위 테스트 — 봉투, 파라미터 검증, 페이지."""

import pytest
from pydantic import TypeAdapter, ValidationError

from app.schemas.brand import BrandParam, validate_brand_param
from app.schemas.common import Failure, Success, failed, success, validate_failed
from app.utils.pagination import Page


class TestEnvelope:
    """봉투 — 성공/실패 중 정확히 하나."""

    def test_success_wraps_data(self):
        assert success(3).model_dump() == {"code": 200, "message": "Operation succeeded", "data": 3}

    def test_failed_defaults(self):
        assert failed().model_dump() == {"code": 500, "message": "Operation failed", "data": None}

    def test_validate_failed_message(self):
        result = validate_failed("name must not be empty")
        assert result.code == 404
        assert result.message == "name must not be empty"

    def test_failure_rejects_success_code(self):
        with pytest.raises(ValidationError):
            Failure(code=200)

    def test_union_picks_branch_by_code(self):
        adapter = TypeAdapter(Success[int] | Failure)
        assert isinstance(adapter.validate_python({"code": 200, "message": "ok", "data": 1}), Success)
        assert isinstance(adapter.validate_python({"code": 500, "message": "no", "data": None}), Failure)

    def test_failure_cannot_carry_data(self):
        with pytest.raises(ValidationError):
            Failure(data=1)


class TestValidateBrandParam:
    """브랜드 파라미터 검증 함수."""

    def test_valid(self):
        assert validate_brand_param(BrandParam(name="Nike", logo="l.png", sort=0, show_status=1)) == []

    def test_collects_every_error_in_order(self):
        errors = validate_brand_param(BrandParam(sort=-5, show_status=7))
        assert [e.field for e in errors] == ["name", "sort", "showStatus"]

    def test_logo_is_optional(self):
        assert validate_brand_param(BrandParam(name="Nike")) == []

    def test_optional_flags_may_be_omitted(self):
        param = BrandParam(name="Nike", logo="l.png")
        assert param.factory_status is None
        assert validate_brand_param(param) == []

    def test_accepts_camel_case_payload(self):
        param = BrandParam.model_validate(
            {"name": "Nike", "logo": "l.png", "factoryStatus": 1, "bigPic": "b.png"}
        )
        assert param.factory_status == 1
        assert param.big_pic == "b.png"


class TestPage:
    """페이지 메타데이터."""

    def test_total_page_rounds_up(self):
        page = Page[int].of([1, 2, 3, 4, 5], total=11, page_num=1, page_size=5)
        assert page.total_page == 3

    def test_serialized_keys(self):
        page = Page[int].of([], total=0, page_num=1, page_size=5)
        assert page.model_dump(by_alias=True) == {
            "pageNum": 1,
            "pageSize": 5,
            "totalPage": 0,
            "total": 0,
            "list": [],
        }
