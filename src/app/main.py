# app/main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from src.app.core.config import settings
from src.app.core.logging import get_logs_writer_logger
from src.db.session import engine
from src.db import Base
from src.app.routers import api, observations, resources, sessions, strategy, surveys
from src.app.routers import settings as settings_router

logging.basicConfig(level=logging.DEBUG if settings.DEBUG else logging.INFO)
logger = get_logs_writer_logger()

STORAGE_UNAVAILABLE = "Não foi possível salvar os dados. Tente novamente em instantes."


@asynccontextmanager
async def lifespan(app: FastAPI):
    Base.metadata.create_all(bind=engine)
    yield


app = FastAPI(title=settings.APP_NAME, debug=settings.DEBUG, lifespan=lifespan)

app.include_router(surveys.router)
app.include_router(api.router)
app.include_router(settings_router.router)
app.include_router(sessions.router)
app.include_router(observations.router)
app.include_router(resources.router)
app.include_router(strategy.router)


@app.exception_handler(SQLAlchemyError)
async def storage_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error(f"Storage error on {request.method} {request.url.path}: {exc!r}")
    return JSONResponse(status_code=503, content={"detail": STORAGE_UNAVAILABLE})


@app.get("/health")
def health():
    return {"status": "ok"}
