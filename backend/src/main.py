import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from access_codes.interfaces.routes import router as public_router
from documents.interfaces.routes import router as documents_router
from shared.config import settings
from shared.exceptions import (
    AppError,
    ExpiredError,
    NotFoundError,
    ResourceExhaustedError,
    ValidationError,
)
from shared.infrastructure.database import create_tables, engine

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting with %s repository backend", settings.REPOSITORY_BACKEND)
    if settings.REPOSITORY_BACKEND == "sql" and settings.CREATE_TABLES:
        await create_tables()
    yield
    await engine.dispose()


app = FastAPI(
    title="Document Share",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(documents_router)
app.include_router(public_router)


@app.exception_handler(ValidationError)
async def validation_error_handler(request, exc: ValidationError):
    return JSONResponse(status_code=400, content={"detail": exc.message})


@app.exception_handler(NotFoundError)
async def not_found_handler(request, exc: NotFoundError):
    return JSONResponse(status_code=404, content={"detail": exc.message})


@app.exception_handler(ExpiredError)
async def expired_handler(request, exc: ExpiredError):
    return JSONResponse(status_code=410, content={"detail": exc.message})


@app.exception_handler(ResourceExhaustedError)
async def exhausted_handler(request, exc: ResourceExhaustedError):
    return JSONResponse(status_code=503, content={"detail": exc.message})


@app.exception_handler(AppError)
async def app_error_handler(request, exc: AppError):
    logger.error("Unhandled application error: %s", exc.message)
    return JSONResponse(status_code=500, content={"detail": exc.message})


@app.get("/health")
async def health_check():
    return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}
