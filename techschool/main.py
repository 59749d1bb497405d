from techschool.core.env import load_env
load_env()
# Initialize structured logging early
from techschool.core.config import settings
from techschool.core.logging import configure_logging
configure_logging(settings.LOG_LEVEL)

import datetime
import time

from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.orm import Session

import techschool.models  # noqa: F401  (register all mappers)
from techschool.api.errors import register_exception_handlers
from techschool.api.v1.routes import api_router
from techschool.core.logging import get_logger
from techschool.db.deps import get_db
from techschool.middleware.logging import logging_middleware

logger = get_logger(__name__)

app = FastAPI(title="techschool API")
# Record process start time for uptime reporting
_START_TIME = time.time()

app.middleware("http")(logging_middleware)
register_exception_handlers(app)
app.include_router(api_router, prefix="/api/v1")


@app.get("/health")
async def health():
    """Simple health endpoint returning status, uptime, and timestamp."""
    uptime = time.time() - _START_TIME
    payload = {
        "status": "ok",
        "uptime_seconds": round(uptime, 2),
        "timestamp": datetime.datetime.now(datetime.timezone.utc).isoformat(),
    }
    return JSONResponse(content=payload)


@app.get("/db/health")
def db_health_sa(db: Session = Depends(get_db)):
    db.execute(text("SELECT 1"))
    return {"db": "ok"}


logger.info("fastapi process started")
