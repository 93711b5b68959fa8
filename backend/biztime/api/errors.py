import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from biztime.errors import ErrorKind, ServiceError

log = logging.getLogger("biztime.api")

STATUS_BY_KIND = {
    ErrorKind.INVALID_INPUT: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.CONFLICT: 409,
    ErrorKind.STORE_ERROR: 500,
}


def error_response(message: str, status: int) -> JSONResponse:
    return JSONResponse(
        status_code=status,
        content={"error": {"message": message, "status": status}},
    )


async def handle_service_error(request: Request, exc: ServiceError):
    status = STATUS_BY_KIND.get(exc.kind, 500)
    if status >= 500:
        # keep store details in the log, not in the response
        log.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        return error_response("Internal server error", status)
    return error_response(exc.message, status)


async def handle_validation_error(request: Request, exc: RequestValidationError):
    problems = "; ".join(
        f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
    )
    return error_response(problems or "Invalid request", 400)


async def handle_unexpected_error(request: Request, exc: Exception):
    log.exception("unhandled error on %s %s", request.method, request.url.path)
    return error_response("Internal server error", 500)


def install_error_handlers(app: FastAPI):
    app.add_exception_handler(ServiceError, handle_service_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
