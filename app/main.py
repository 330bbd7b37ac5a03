# app/main.py

import sys
import logging
import time
import asyncio

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import KV_BACKEND, LOG_LEVEL, LOG_FILE
from app.core.exceptions import AssignmentAPIException
from app.core.responses import api_response, cors_preflight_response

# --- Configure logging FIRST ---
handlers = [logging.StreamHandler(sys.stdout)]
if LOG_FILE:
    handlers.append(logging.FileHandler(LOG_FILE, mode="a"))

# Configure root logger
logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format="%(asctime)s [%(name)s:%(levelname)s] %(message)s",
    handlers=handlers,
)

# Create main logger
logger = logging.getLogger("assignments")
logger.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))

# Set uvicorn and fastapi loggers to same level
for name in ("uvicorn.error", "uvicorn.access", "fastapi"):
    logging.getLogger(name).setLevel(getattr(logging, LOG_LEVEL, logging.INFO))

logger.info(f"Logging configured at {LOG_LEVEL} level")

# --- Routers ---
from app.api.assignments import router as assignments_router
from app.api.webapp      import router as webapp_router

HTTP_STATUS_MESSAGES = {
    404: "Not found",
    405: "Method not allowed",
}

# --- Create FastAPI app ---
app = FastAPI(
    title       = "Assignment Publisher API",
    version     = "1.0.0",
    description = "Publish a daily assignment note per calendar date"
)


@app.middleware("http")
async def cors_and_logging(request: Request, call_next):
    # Preflight for every path: 200, CORS headers, no body
    if request.method == "OPTIONS":
        return cors_preflight_response()

    start_time = time.time()
    logger.info(f"📥 Incoming request: {request.method} {request.url.path}")

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(f"Headers: {dict(request.headers)}")

    response = await call_next(request)

    process_time = time.time() - start_time
    logger.info(f"✅ Request completed in {process_time:.3f}s with status {response.status_code}")
    return response


# --- Error handlers: everything leaves as an envelope ---
@app.exception_handler(AssignmentAPIException)
async def assignment_exception_handler(request: Request, exc: AssignmentAPIException):
    logger.warning(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    return api_response(None, exc.status_code, exc.message)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    message = HTTP_STATUS_MESSAGES.get(exc.status_code, str(exc.detail))
    return api_response(None, exc.status_code, message, headers=getattr(exc, "headers", None))


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.error(
        f"\n❗️ Validation error for {request.url.path}\n"
        f"Errors:\n{exc.errors()!r}"
    )
    return api_response(None, 400, "Invalid request")


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return api_response(None, 500, "Internal server error")


# --- Include all routers ---
app.include_router(assignments_router, tags=["Assignments"])
app.include_router(webapp_router,      tags=["Web App"])


@app.on_event("startup")
async def startup_event():
    logger.info("🚀 Starting Assignment Publisher API")
    logger.info(f"📋 Key-value backend: {KV_BACKEND}")

    if KV_BACKEND != "redis":
        logger.warning("⚠️  Not using Redis - assignments live in process memory")
        return

    from app.core.redis import redis_client
    try:
        logger.info("🔄 Testing Redis connection...")
        await asyncio.wait_for(redis_client.ping(), timeout=5.0)
        logger.info("✅ Redis connection OK")
    except asyncio.TimeoutError:
        logger.warning("⚠️  Redis connection timeout - requests will fail until it is reachable")
    except Exception as e:
        logger.warning(f"⚠️  Redis connection failed: {e} - requests will fail until it is reachable")


@app.get("/health", tags=["Health"])
async def health_check():
    return {"status": "healthy"}
