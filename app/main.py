"""FastAPI 애플리케이션 엔트리포인트 — 미들웨어, 예외 처리기 및 라우터 등록.

FastAPI application entry point — Middleware, exception handler and router
registration. Binding failures are rendered as the validate-failed envelope
so that every brand endpoint answers with ``{code, message, data}``.
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import settings
from app.middleware.axiom_logging import AxiomLoggingMiddleware
from app.schemas.common import validate_failed
from app.utils.exceptions import ValidationFailedError

app: FastAPI = FastAPI(
    title=settings.APP_NAME,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

# Axiom API 로깅 미들웨어 — Axiom API request/response logging
# CORS보다 먼저 등록하여 모든 요청을 캡처 (Registered before CORS to capture all requests)
app.add_middleware(AxiomLoggingMiddleware)

# CORS 미들웨어 — Cross-Origin Resource Sharing middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _first_error_message(exc: RequestValidationError) -> str:
    """첫 번째 검증 오류를 "필드: 사유" 형태로 변환합니다.

    Format the first validation error as ``"<field>: <reason>"``.
    """
    errors = exc.errors()
    if not errors:
        return validate_failed().message
    first = errors[0]
    # loc 예: ("body", "sort") / ("query", "showStatus") / ("body", 12) JSON 오류 위치
    loc: tuple = tuple(first.get("loc", ()))
    names: list[str] = [part for part in loc[1:] if isinstance(part, str)]
    if not names and loc:
        names = [str(loc[0])]
    field: str = ".".join(names)
    reason: str = first.get("msg", "invalid value")
    return f"{field}: {reason}" if field else reason


@app.exception_handler(RequestValidationError)
async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """요청 바인딩 오류를 검증 실패 봉투로 응답합니다.

    Render request binding errors as the validate-failed envelope.
    """
    return JSONResponse(content=validate_failed(_first_error_message(exc)).model_dump())


@app.exception_handler(ValidationFailedError)
async def validation_failed_handler(
    request: Request, exc: ValidationFailedError
) -> JSONResponse:
    """파라미터 검증 실패 예외를 검증 실패 봉투로 응답합니다.

    Render ValidationFailedError as the validate-failed envelope.
    """
    return JSONResponse(content=validate_failed(str(exc.detail)).model_dump())


@app.get("/health")
async def health_check() -> dict[str, str]:
    """서버 상태 확인 엔드포인트.

    Health check endpoint for load balancers and monitoring.
    """
    return {"status": "ok"}


# ---------------------------------------------------------------------------
# 라우터 등록 — Router registration
# ---------------------------------------------------------------------------
from app.api.admin import admin_router  # noqa: E402

app.include_router(admin_router)
