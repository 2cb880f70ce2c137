"""
FastAPI 应用入口点。
"""

from loguru import logger
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.server.certificate.router import router as certificate_router
from src.server.config import config

app = FastAPI(title=config.app_title)
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(certificate_router, prefix="/v1")

logger.info(f"config: {config.model_dump_json(indent=4)}")
