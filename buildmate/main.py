# buildmate/main.py

import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from buildmate.api.v1 import users, resume
from buildmate.core.config import settings
from buildmate.core.errors import register_exception_handlers
from buildmate.core.logging import setup_logging
from buildmate.db.checkdb import verify_database_connection
from buildmate.db.database import get_db, get_engine
from buildmate.db.models import Base

setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Boot check the database and create missing tables on startup."""
    engine = get_engine()
    # A failed check is logged but does not stop the server
    if verify_database_connection(engine) and settings.DB_CREATE_TABLES:
        Base.metadata.create_all(bind=engine)
    logger.info("BuildMate API listening on port %s", settings.PORT)
    yield
    engine.dispose()


app = FastAPI(
    title="BuildMate API",
    description="Accounts and resume storage for the BuildMate resume builder",
    version="0.1.0",
    lifespan=lifespan,
)


@app.middleware("http")
async def limit_body_size(request: Request, call_next):
    """Reject request bodies above MAX_BODY_SIZE before they reach a route."""
    content_length = request.headers.get("content-length")
    if content_length and content_length.isdigit() and int(content_length) > settings.MAX_BODY_SIZE:
        return JSONResponse(
            status_code=status.HTTP_413_CONTENT_TOO_LARGE,
            content={"message": "Payload too large"},
        )
    return await call_next(request)


# Outermost middleware, so 413 responses carry CORS headers too
app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.FRONTEND_ORIGIN],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


app.include_router(users.router, prefix="/api")
app.include_router(resume.router, prefix="/api")


@app.get("/health", tags=["health"])
async def health_check():
    return {"ok": True}


@app.get("/dbcheck", tags=["health"])
def db_check(db: Session = Depends(get_db)):
    """Round-trips to the database and returns its clock."""
    try:
        ts = db.execute(select(func.now())).scalar_one()
    except SQLAlchemyError as e:
        logger.exception("DB check failed")
        # Diagnostic endpoint: the driver message is part of its contract
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"ok": False, "error": str(getattr(e, "orig", None) or e)},
        )
    return {"ok": True, "ts": ts}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=settings.PORT)
