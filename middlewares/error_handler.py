import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from schemas.common import ErrorDetail, ErrorResponse
from services.errors import RemunerationError, SelectionMissing, ValidationFailed
from services.records import EXAMINER_INVALID, SUBJECT_INVALID

logger = logging.getLogger(__name__)

SELECTION_INVALID = "Please select an examiner and a subject"

# request body rejected by FastAPI -> the error the form would have shown
BODY_ERRORS = {
    "/v1/examiners": ValidationFailed(EXAMINER_INVALID),
    "/v1/subjects": ValidationFailed(SUBJECT_INVALID),
    "/v1/calculations": SelectionMissing(SELECTION_INVALID, status_code=400),
}


def error_response(status_code: int, code: str, message: str) -> JSONResponse:
    body = ErrorResponse(error=ErrorDetail(code=code, message=message))
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


def body_error(method: str, path: str) -> RemunerationError:
    if method == "POST":
        for prefix, error in BODY_ERRORS.items():
            if path.startswith(prefix):
                return error
    return ValidationFailed("Invalid request")


def add_error_handlers(app: FastAPI):
    # ✅ domain failures: validation / missing selection / empty report
    @app.exception_handler(RemunerationError)
    async def remuneration_error_handler(request: Request, exc: RemunerationError):
        return error_response(exc.status_code, exc.code, exc.message)

    # ✅ request bodies / path params FastAPI could not parse
    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        logger.warning("request rejected %s %s: %s", request.method, request.url.path, exc.errors())
        error = body_error(request.method, request.url.path)
        return error_response(error.status_code, error.code, error.message)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception("unhandled error on %s %s", request.method, request.url.path)
        return error_response(500, "INTERNAL_ERROR", str(exc))
