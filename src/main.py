from contextlib import asynccontextmanager
from pathlib import Path

import structlog
import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import get_settings
from .exceptions import UtilityAPIError
from .log_config import configure_logging
from .middleware import MaxBodySizeMiddleware
from src.operations.router import router as operations_router
from src.system.router import router as system_router


settings = get_settings()
logger = structlog.get_logger("server")

ENDPOINTS = (
    ("GET", "/api/health", "Health check"),
    ("GET", "/api/users", "Get users list"),
    ("POST", "/api/calculate", "Calculator"),
    ("POST", "/api/text/process", "Text manipulation"),
    ("POST", "/api/random", "Generate random data"),
    ("GET", "/api/system", "System information"),
    ("POST", "/api/echo", "Echo request data"),
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: logging and banner
    configure_logging(settings.LOG_LEVEL, settings.LOG_JSON)
    base_url = f"http://localhost:{settings.PORT}"
    logger.info(
        "server_started",
        app=settings.APP_NAME,
        url=f"{base_url}/",
        api_base=f"{base_url}/api/",
        static_dir=str(Path(settings.STATIC_DIR).resolve()),
    )
    for method, path, summary in ENDPOINTS:
        logger.info("endpoint_available", method=method, path=path, summary=summary)

    yield

    logger.info("server_stopped", app=settings.APP_NAME)


app = FastAPI(
    title=settings.APP_NAME,
    lifespan=lifespan,
    debug=settings.DEBUG
)

app.add_middleware(MaxBodySizeMiddleware, max_body_size=settings.MAX_BODY_BYTES)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)


# Global exception handlers
@app.exception_handler(UtilityAPIError)
async def utility_error_handler(request: Request, exc: UtilityAPIError):
    if exc.status_code >= 500:
        logger.error("request_failed", path=request.url.path, error=exc.code, message=exc.message)
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_payload()
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404:
        return JSONResponse(
            status_code=404,
            content={
                "error": "Not Found",
                "path": request.url.path,
                "message": "The requested resource was not found"
            }
        )
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail), "message": str(exc.detail)},
        headers=getattr(exc, "headers", None)
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(
        "unhandled_exception",
        method=request.method,
        path=request.url.path,
        error_type=type(exc).__name__,
        exc_info=exc,
    )
    return JSONResponse(
        status_code=500,
        content={"error": "Internal Server Error", "message": "An unexpected error occurred"}
    )


@app.get("/health")
async def health_check():
    return {"status": "ok", "app": settings.APP_NAME}


@app.get("/", include_in_schema=False)
async def root():
    index_path = Path(settings.STATIC_DIR) / settings.INDEX_FILE
    if index_path.is_file():
        return FileResponse(index_path)
    return {
        "service": settings.APP_NAME,
        "endpoints": {path: f"{method} - {summary}" for method, path, summary in ENDPOINTS},
    }


# Include routers
app.include_router(system_router)
app.include_router(operations_router)

if Path(settings.STATIC_DIR).is_dir():
    app.mount("/static", StaticFiles(directory=settings.STATIC_DIR), name="static")


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
