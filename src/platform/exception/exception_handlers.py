from typing import Any, Callable, Coroutine

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.responses import Response

from src.platform.exception.exceptions import CustomBaseError, UnavailableError

ExceptionHandler = Callable[[Request, Exception], Coroutine[Any, Any, Response]]

# Seconds a caller should wait before retrying an idempotent operation
UNAVAILABLE_RETRY_AFTER = '5'


def _error_body(error: CustomBaseError) -> dict[str, str]:
    return {'detail': error.message, 'error': type(error).__name__}


async def custom_error_handler(request: Request, exc: Exception) -> JSONResponse:
    error = exc if isinstance(exc, CustomBaseError) else CustomBaseError(str(exc))
    return JSONResponse(status_code=error.status_code, content=_error_body(error))


async def unavailable_error_handler(request: Request, exc: Exception) -> JSONResponse:
    error = exc if isinstance(exc, UnavailableError) else UnavailableError(str(exc))
    return JSONResponse(
        status_code=error.status_code,
        content=_error_body(error),
        headers={'Retry-After': UNAVAILABLE_RETRY_AFTER},
    )


async def validation_error_handler(request: Request, exc: Exception) -> JSONResponse:
    errors = exc.errors() if isinstance(exc, RequestValidationError) else []
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={'detail': errors, 'error': 'ValidationError'},
    )


async def general_500_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={'detail': 'Internal server error'},
    )


# Starlette resolves handlers by MRO, so the subclass entry wins over CustomBaseError
EXCEPTION_HANDLERS: dict[type[Exception], ExceptionHandler] = {
    UnavailableError: unavailable_error_handler,
    CustomBaseError: custom_error_handler,
    RequestValidationError: validation_error_handler,
    Exception: general_500_exception_handler,
}


def register_exception_handlers(app: FastAPI) -> None:
    for exception_class, handler in EXCEPTION_HANDLERS.items():
        app.add_exception_handler(exception_class, handler)
