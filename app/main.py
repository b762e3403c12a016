# /app/main.py

import logging

# --- Core FastAPI Imports ---
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .core import config

# --- Application-specific Router Imports ---
from .routers import (
    auth_router,
    bio_router,
    dashboard_router,
    history_router,
    user_router,
)

# --- Service Imports for Startup Logic ---
from .db.database import init_db
from .services.llm_service import build_llm_client

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


# --- Application Lifecycle Management ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    # This code runs ONCE when the application starts up.
    init_db()
    try:
        app.state.llm_client = build_llm_client()
    except ValueError as e:
        # The API still serves history and auth; generation answers 503.
        logger.error("LLM client could not be configured: %s", e)
        app.state.llm_client = None
    yield
    # This code runs ONCE when the application shuts down.


# --- FastAPI Application Instance Creation ---
app = FastAPI(
    title="Bio Generator API",
    description="AI-powered social media bio generation, history and accounts.",
    version="1.0.0",
    lifespan=lifespan
)

# --- Middleware Configuration ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# --- Error Payloads ---
# Every failure reaches the client as {"success": false, "error": ...}.
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    details = [
        {
            "field": ".".join(str(part) for part in err.get("loc", ()) if part != "body"),
            "message": err.get("msg", ""),
        }
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=jsonable_encoder({"success": False, "error": "Invalid input.", "details": details}),
    )


# --- API Router Inclusion ---
app.include_router(auth_router.router, prefix="/api/auth", tags=["Auth"])
app.include_router(bio_router.router, prefix="/api/bios", tags=["Bios"])
app.include_router(history_router.router, prefix="/api/bios", tags=["History"])
app.include_router(dashboard_router.router, prefix="/api/dashboard", tags=["Dashboard"])
app.include_router(user_router.router, prefix="/api/users", tags=["Users"])


# --- Root / Health Check Endpoint ---
@app.get("/", tags=["Health Check"])
async def read_root():
    """A simple health check endpoint to confirm the API is online."""
    return {"status": "Bio Generator API is running!", "version": app.version}
