import logging

from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from workout_log.errors import WorkoutLogError

log = logging.getLogger(__name__)

REQUEST_PARTS = ("body", "query", "path", "header", "cookie")


def _issue(error: dict) -> dict:
    loc = list(error.get("loc", ()))
    location = loc.pop(0) if loc and loc[0] in REQUEST_PARTS else None
    return {
        "location": location,
        "path": loc,
        "message": error.get("msg", ""),
        "code": error.get("type", ""),
    }


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=jsonable_encoder({
            "message": "Validation failed",
            "issues": [_issue(e) for e in exc.errors()],
        }),
    )


async def domain_exception_handler(request: Request, exc: WorkoutLogError):
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    rid = getattr(request.state, "request_id", None)
    log.exception("rid=%s unhandled error on %s %s", rid, request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": str(exc) or "Internal Server Error"},
    )
