# workout_log/main.py
import time
import logging
import uuid
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text
from starlette.exceptions import HTTPException as StarletteHTTPException

from workout_log import handlers
from workout_log.errors import WorkoutLogError
from workout_log.routers.sessions import router as sessions_router
from workout_log.routers.workouts import router as workouts_router
from workout_log.db import SessionLocal  # for healthz DB check
from workout_log.settings import get_settings

log = logging.getLogger("uvicorn")
settings = get_settings()

app = FastAPI(
    title="Workout Log API",
    openapi_tags=[
        {"name": "workouts", "description": "Workout templates and their default exercises"},
        {"name": "sessions", "description": "Logged workout sessions and their sets"},
    ],
)


# CORS origins come from CORS_ORIGIN (comma-separated), read once at startup
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.middleware("http")
async def add_request_id_and_log(request: Request, call_next):
    req_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
    request.state.request_id = req_id
    start = time.perf_counter()
    response = await call_next(request)
    duration_ms = (time.perf_counter() - start) * 1000
    response.headers["X-Request-ID"] = req_id
    log.info("rid=%s %s %s -> %s in %.1fms",
             req_id, request.method, request.url.path, response.status_code, duration_ms)
    return response

# Exception handlers
app.add_exception_handler(RequestValidationError, handlers.validation_exception_handler)  # type: ignore
app.add_exception_handler(WorkoutLogError, handlers.domain_exception_handler)  # type: ignore
app.add_exception_handler(StarletteHTTPException, handlers.http_exception_handler)  # type: ignore
app.add_exception_handler(Exception, handlers.unhandled_exception_handler)

@app.get("/")
async def root():
    return {"ok": True, "name": "Workout Log API"}

@app.get("/ping")
async def ping():
    return {"pong": True}

@app.get("/healthz")
async def healthz():
    # Quick DB sanity check
    try:
        async with SessionLocal() as db:
            await db.execute(text("SELECT 1"))
        return {"status": "ok"}
    except Exception as e:
        return {"status": "degraded", "error": str(e)}

@app.get("/version")
async def version():
    return {"version": settings.API_VERSION}

# Routers
app.include_router(workouts_router, prefix=settings.API_PREFIX)
app.include_router(sessions_router, prefix=settings.API_PREFIX)


def run() -> None:
    import uvicorn

    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(app, host="0.0.0.0", port=settings.PORT)


if __name__ == "__main__":
    run()
