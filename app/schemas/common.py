"""공통 응답 봉투(envelope) 스키마 정의.

Common response envelope schema definitions.
Every brand endpoint answers with ``{code, message, data}``. The envelope is
modelled as a tagged union of :class:`Success` and :class:`Failure`; the
literal success code keeps the two branches apart when FastAPI validates
the response, so a response is always exactly one of them.

Usage:
    from app.schemas.common import Failure, Success, failed, success
    return success(count)
    return failed()
"""

from enum import Enum
from typing import Generic, Literal, TypeVar

from pydantic import BaseModel, field_validator

T = TypeVar("T")


class ResultCode(Enum):
    """봉투 결과 코드 — (코드, 기본 메시지) 쌍.

    Envelope result codes as (code, default message) pairs.
    """

    SUCCESS = (200, "Operation succeeded")
    FAILED = (500, "Operation failed")
    VALIDATE_FAILED = (404, "Parameter validation failed")

    @property
    def code(self) -> int:
        return self.value[0]

    @property
    def message(self) -> str:
        return self.value[1]


class Success(BaseModel, Generic[T]):
    """성공 봉투 — 결과 데이터를 담습니다.

    Success envelope carrying the operation payload.

    Attributes:
        code: 항상 200 (Always 200)
        message: 성공 메시지 (Success message)
        data: 결과 데이터, null 가능 (Payload, may be null)
    """

    code: Literal[200] = 200
    message: str = ResultCode.SUCCESS.message
    data: T | None = None


class Failure(BaseModel):
    """실패 봉투 — 데이터 없이 실패 코드와 메시지만 담습니다.

    Failure envelope. Carries a failure code and message, never data.

    Attributes:
        code: 실패 코드 (Failure code, any code except 200)
        message: 실패 사유 (Failure reason)
        data: 항상 null (Always null)
    """

    code: int = ResultCode.FAILED.code
    message: str = ResultCode.FAILED.message
    data: None = None

    @field_validator("code")
    @classmethod
    def check_not_success_code(cls, value: int) -> int:
        if value == ResultCode.SUCCESS.code:
            raise ValueError("a failure envelope cannot carry the success code")
        return value


def success(data: T | None = None) -> Success[T]:
    """성공 봉투를 생성합니다.

    Wrap ``data`` in a success envelope.
    """
    return Success(data=data)


def failed(message: str | None = None) -> Failure:
    """일반 실패 봉투를 생성합니다.

    Build the generic failure envelope, optionally with a custom message.
    """
    return Failure(
        code=ResultCode.FAILED.code,
        message=message or ResultCode.FAILED.message,
    )


def validate_failed(message: str | None = None) -> Failure:
    """파라미터 검증 실패 봉투를 생성합니다.

    Build the validation-failure envelope, usually with the first field error.
    """
    return Failure(
        code=ResultCode.VALIDATE_FAILED.code,
        message=message or ResultCode.VALIDATE_FAILED.message,
    )
