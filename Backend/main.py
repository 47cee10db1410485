import logging
import os
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

import models  # noqa: F401  registers tables on Base.metadata
from config import CORS_ORIGINS, LOG_LEVEL, LOGS_DIR, UPLOADS_DIR
from database import Base, engine
from routers import (
    auth_router,
    pharmacies_router,
    orders_router,
    dashboard_router,
)
from services.errors import ServiceError, ValidationError

logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# Tables are created on startup; there are no migrations
Base.metadata.create_all(bind=engine)

app = FastAPI(
    title="MediFinder API",
    description="Local pharmacy discovery, ordering and pharmacy dashboard API",
    version="1.0.0",
)


def _build_error_logger() -> logging.Logger:
    log = logging.getLogger("medifinder.errors")
    if log.handlers:
        return log
    os.makedirs(LOGS_DIR, exist_ok=True)
    handler = logging.FileHandler(os.path.join(LOGS_DIR, "errors.log"), encoding="utf-8")
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
    log.setLevel(logging.ERROR)
    log.addHandler(handler)
    log.propagate = False
    return log


error_logger = _build_error_logger()

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_origin_regex=r"^https?://(localhost|127\.0\.0\.1)(:\d+)?$",
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routers
app.include_router(auth_router)
app.include_router(pharmacies_router)
app.include_router(orders_router)
app.include_router(dashboard_router)

os.makedirs(UPLOADS_DIR, exist_ok=True)
app.mount("/uploads", StaticFiles(directory=UPLOADS_DIR), name="uploads")


def _error_body(kind: str, message: str) -> dict:
    return {"error": kind, "message": message}


@app.exception_handler(ServiceError)
async def _service_error(request: Request, exc: ServiceError):
    if exc.status_code >= 500:
        error_logger.error("Service failure on %s %s: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content=_error_body(exc.kind, exc.message))


@app.exception_handler(StarletteHTTPException)
async def _http_error(request: Request, exc: StarletteHTTPException):
    try:
        kind = HTTPStatus(exc.status_code).phrase
    except ValueError:
        kind = "Request failed"
    message = exc.detail if isinstance(exc.detail, str) else kind
    return JSONResponse(status_code=exc.status_code, content=_error_body(kind, message), headers=exc.headers)


@app.exception_handler(RequestValidationError)
async def _request_validation_error(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    message = "Invalid request"
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{field}: {first.get('msg')}" if field else str(first.get("msg"))
    return JSONResponse(status_code=400, content=_error_body(ValidationError.kind, message))


@app.middleware("http")
async def _capture_unhandled_errors(request: Request, call_next):
    try:
        return await call_next(request)
    except Exception as exc:  # pragma: no cover
        error_logger.exception("Unhandled server error on %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=500, content=_error_body("Internal server error", "Request failed"))


@app.get("/", tags=["Health"])
def health_check():
    return {"status": "ok", "service": "MediFinder API", "version": "1.0.0"}
