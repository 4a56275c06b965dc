import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from resume_scorer.config import CORS_ORIGINS, PROCESSED_TEXTS_DIR, configure_logging
from resume_scorer.routers import scoring

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup code
    configure_logging()
    logger.info("Serving profiles from %s", PROCESSED_TEXTS_DIR)
    yield
    # Shutdown code
    logger.info("Resume scoring API stopped")


app = FastAPI(title="Resume Scoring API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["Origin", "Content-Type", "Accept"],
)

app.include_router(scoring.router)
