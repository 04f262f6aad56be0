# /portal/main.py

import logging
import time
from contextlib import asynccontextmanager

# --- Core FastAPI Imports ---
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

# --- Application-specific Imports ---
from .core.config import settings
from .core.logging_config import generate_request_id, set_request_id, setup_logging
from .db.database import init_db
from .routers import auth_router, dashboard_router, students_router, timetable_router

logger = logging.getLogger(__name__)


# --- Application Lifecycle Management ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    # Runs ONCE when the application starts up.
    setup_logging()
    init_db()
    logger.info("%s started (environment=%s)", settings.APP_NAME, settings.ENVIRONMENT)
    yield
    logger.info("%s shutting down", settings.APP_NAME)


# --- FastAPI Application Instance Creation ---
app = FastAPI(
    title="Campus Timetable Portal API",
    description="Student registration, course requests, timetables and the instructor dashboard.",
    version="1.0.0",
    lifespan=lifespan
)

# --- Middleware Configuration ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Assigns a request id and logs one line per request."""
    request_id = request.headers.get("X-Request-ID") or generate_request_id()
    set_request_id(request_id)
    started = time.perf_counter()

    response = await call_next(request)

    duration_ms = (time.perf_counter() - started) * 1000
    logger.info("%s %s -> %s (%.1f ms)", request.method, request.url.path, response.status_code, duration_ms)
    response.headers["X-Request-ID"] = request_id
    return response


# --- API Router Inclusion ---
app.include_router(auth_router.router, prefix="/api/auth", tags=["Auth"])
app.include_router(students_router.router, prefix="/api/students", tags=["Students"])
app.include_router(timetable_router.router, prefix="/api/timetable", tags=["Timetable"])
app.include_router(dashboard_router.router, prefix="/api/dashboard", tags=["Dashboard"])


# --- Root / Health Check Endpoint ---
@app.get("/", tags=["Health Check"])
async def read_root():
    """A simple health check endpoint to confirm the API is online."""
    return {"status": "Campus Timetable Portal is running!", "version": app.version}
