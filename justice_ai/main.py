import logging
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from justice_ai.api.schemas import ErrorResponse
from justice_ai.api.routes import router
from justice_ai.core.config import get_settings
from justice_ai.core.logging_config import configure_logging

settings = get_settings()

configure_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> Any:
    logger.info(
        "Starting | env=%s | model=%s | ollama=%s | timeout=%s",
        settings.ENVIRONMENT,
        settings.OLLAMA_MODEL.value,
        settings.OLLAMA_BASE_URL,
        settings.OLLAMA_TIMEOUT,
    )

    try:
        yield
    finally:
        logger.info("Shutting down")


# Docs are disabled in production
app = FastAPI(
    title="JusticeAI Pakistan API",
    description="Structured legal guidance grounded in Pakistani statutes",
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs" if settings.ENVIRONMENT != "production" else None,
    redoc_url=None,
)

app.include_router(router)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.exception(
        "Unhandled exception",
        extra={
            "path": request.url.path,
            "method": request.method,
            "client_ip": request.client.host if request.client else "unknown",
        }
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse(error="Internal server error").model_dump(exclude_none=True),
    )


@app.get("/health", include_in_schema=False)
async def health_check():
    return {"status": "healthy"}
