from fastapi import FastAPI
from contextlib import asynccontextmanager
from datetime import datetime, timezone
import logging

from src.core.config import settings
from src.core.database import Base, engine

import src.models  # Ensure models are registered

from src.routes.invoices import invoice_router


logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # ---- STARTUP ----
    Base.metadata.create_all(bind=engine)
    logger.info(f"Invoice tracker started ({settings.ENVIRONMENT})")

    yield

app = FastAPI(
    title=settings.APP_TITLE,
    version="1.0.0",
    lifespan=lifespan
)

API_PREFIX = settings.API_PREFIX

app.include_router(invoice_router, prefix=API_PREFIX)


@app.get(f"{API_PREFIX}/healthcheck", operation_id="healthcheck")
def healthcheck():
    return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}
