# gymtracker/main.py
import os
import time
import logging
import uuid
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text

from gymtracker.errors import EditorStateError, NotFoundError, StorageFailureError, ValidationFailedError
from gymtracker.routers.exercises import router as exercises_router
from gymtracker.routers.groups import router as groups_router
from gymtracker.routers.performances import router as performances_router
from gymtracker.routers.editors import router as editors_router
from gymtracker.services.editor_registry import EditorRegistry
from gymtracker.db import SessionLocal  # for healthz DB check
from gymtracker.settings import get_settings

log = logging.getLogger("uvicorn")

app = FastAPI(
    title="GymTracker API",
    openapi_tags=[
        {"name": "exercises", "description": "Exercises and their performance history"},
        {"name": "groups", "description": "Exercise groups"},
        {"name": "performances", "description": "Stored workout sessions"},
        {"name": "editors", "description": "Performance entry sessions (weight rows)"},
    ],
)

# One registry per app instance
_settings = get_settings()
app.state.editors = EditorRegistry(
    idle_seconds=_settings.EDITOR_IDLE_SECONDS, max_open=_settings.EDITOR_MAX_OPEN
)


# CORS (relax for local dev; tighten origins in prod via env)
ALLOW_ORIGINS = os.getenv("ALLOW_ORIGINS", "*").split(",")
app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOW_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.middleware("http")
async def add_request_id_and_log(request: Request, call_next):
    req_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
    start = time.perf_counter()
    response = await call_next(request)
    duration_ms = (time.perf_counter() - start) * 1000
    response.headers["X-Request-ID"] = req_id
    log.info("rid=%s %s %s -> %s in %.1fms",
             req_id, request.method, request.url.path, response.status_code, duration_ms)
    return response

# Error mapping: repositories and services raise plain exceptions
def _error(code: int, exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=code, content={"detail": str(exc)})

@app.exception_handler(NotFoundError)
async def not_found(_request: Request, exc: NotFoundError):
    return _error(status.HTTP_404_NOT_FOUND, exc)

@app.exception_handler(ValidationFailedError)
async def validation_failed(_request: Request, exc: ValidationFailedError):
    return _error(status.HTTP_422_UNPROCESSABLE_ENTITY, exc)

@app.exception_handler(EditorStateError)
async def editor_busy(_request: Request, exc: EditorStateError):
    return _error(status.HTTP_409_CONFLICT, exc)

@app.exception_handler(StorageFailureError)
async def storage_failure(_request: Request, exc: StorageFailureError):
    log.warning("storage failure: %s", exc)
    return _error(status.HTTP_503_SERVICE_UNAVAILABLE, exc)

@app.get("/")
def root():
    return {"ok": True, "name": "GymTracker API"}

@app.get("/ping")
def ping():
    return {"pong": True}

@app.get("/healthz")
def healthz():
    # Quick DB sanity check
    try:
        with SessionLocal() as db:
            db.execute(text("SELECT 1"))
        return {"status": "ok"}
    except Exception as e:
        return {"status": "degraded", "error": str(e)}

@app.get("/version")
def version():
    return {"version": os.getenv("API_VERSION", "dev")}

# Routers
app.include_router(exercises_router)
app.include_router(groups_router)
app.include_router(performances_router)
app.include_router(editors_router)
