# roi_calculator/main.py
# -----------------------------------------------------------------------------
# FastAPI entrypoint
# - logging setup, CORS, tables created on startup
# -----------------------------------------------------------------------------
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from roi_calculator.core.config import settings
from roi_calculator.core.logging import setup_logging
from roi_calculator.db.session import init_models
from roi_calculator.routers import roi

setup_logging()

app = FastAPI(title=settings.APP_NAME)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
async def on_startup():
    await init_models()
    logger.info("{} started (env={})", settings.APP_NAME, settings.ENV)


app.include_router(roi.router)


@app.get("/")
async def root():
    return {"statusCode": 200, "message": settings.APP_NAME + " App"}


@app.get("/health")
async def health():
    return {"status": "ok"}
