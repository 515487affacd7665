"""커스텀 HTTP 예외 클래스 모듈.

Custom HTTP exception classes module.
Binding helpers raise these instead of building envelopes themselves;
``app.main`` renders them as envelope responses.

Usage:
    from app.utils.exceptions import ValidationFailedError
    raise ValidationFailedError("ids must be a list of integers")
"""

from fastapi import HTTPException, status

from app.schemas.common import ResultCode


class ValidationFailedError(HTTPException):
    """파라미터 검증 실패 예외.

    Raised when request parameters cannot be bound or fail a rule that the
    request schema cannot express (e.g. a malformed ``ids`` list).
    Rendered as the validate-failed envelope.

    Args:
        detail: 오류 메시지 (Error message, default: "Parameter validation failed")
    """

    def __init__(self, detail: str = ResultCode.VALIDATE_FAILED.message) -> None:
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)
