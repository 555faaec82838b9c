# catalog_api/api/errors.py
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from catalog_api.domain.errors import CatalogError
from catalog_api.domain.schemas import ErrorBody


def error_response(
    request: Request,
    status: int,
    message: str,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    body = ErrorBody(status=status, error=message, path=request.url.path)

    profile = getattr(request.app.state, "profile", None)
    if profile is not None and profile.error_timestamps:
        body.timestamp = datetime.now(timezone.utc)

    return JSONResponse(
        status_code=status,
        content=body.model_dump(mode="json", exclude_none=True),
        headers=headers,
    )


def _describe(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Malformed request"
    first = errors[0]
    # loc is ("body" | "query" | "path", field, ...)
    field = ".".join(str(part) for part in first.get("loc", ())[1:])
    return f"{field}: {first['msg']}" if field else first["msg"]


async def catalog_error_handler(request: Request, exc: CatalogError):
    return error_response(request, exc.status_code, exc.message)


async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return error_response(
        request, exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None)
    )


async def request_validation_handler(request: Request, exc: RequestValidationError):
    return error_response(request, 400, _describe(exc))


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(CatalogError, catalog_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
