import logging
import os
import sys

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Profile store settings
PROCESSED_TEXTS_DIR = os.getenv("PROCESSED_TEXTS_DIR", "processed_texts")

# Service settings
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
RANKING_N_JOBS = int(os.getenv("RANKING_N_JOBS", "1"))
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",")
    if origin.strip()
]

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Send records from the resume_scorer loggers to stdout."""
    logger = logging.getLogger("resume_scorer")
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    logger.addHandler(handler)
