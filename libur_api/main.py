"""
FastAPI application entry point
"""
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

from libur_api.config import settings
from libur_api.core.errors import LiburError
from libur_api.middleware.request_id import RequestIdMiddleware
from libur_api.api.routes import libur, meta

app = FastAPI(
    title=settings.APP_NAME,
    debug=settings.DEBUG,
    # /docs serves the static documentation page
    docs_url="/swagger",
    redoc_url=None,
)

app.add_middleware(RequestIdMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["*"],
)

app.include_router(meta.router)
app.include_router(libur.router)


@app.exception_handler(LiburError)
async def libur_error_handler(request: Request, exc: LiburError):
    """Map holiday errors to the {error, message} body"""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    else:
        logger.warning(f"{request.method} {request.url.path} rejected: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.error, "message": exc.message},
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    """Any other failure still answers with the {error, message} body"""
    logger.exception(f"{request.method} {request.url.path} crashed: {exc}")
    return JSONResponse(
        status_code=500,
        content={"error": LiburError.error, "message": str(exc) or exc.__class__.__name__},
    )


@app.on_event("startup")
async def startup_event():
    """Configure logging and the cache table"""
    from libur_api.core.request import configure_logger_with_request_id
    from libur_api.database import init_db

    configure_logger_with_request_id()
    if settings.CACHE_BACKEND == "sqlite":
        init_db()
    logger.info(f"{settings.APP_NAME} started, cache backend: {settings.CACHE_BACKEND}")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "libur_api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG
    )
