import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import settings
from app.core.db import engine, Base
from app.core.errors import register_exception_handlers
from app.core.scheduler import start_scheduler, stop_scheduler
from app.routers import athletes, auth, events, inventory, upload, users
from app import models  # noqa: F401  (registers the ORM tables)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: startup and shutdown events"""
    # Startup
    Base.metadata.create_all(bind=engine)

    if settings.SCHEDULER_ENABLED:
        start_scheduler()
        logger.info("[Scheduler] Uniform audit scheduler started")

    yield

    # Shutdown
    if settings.SCHEDULER_ENABLED:
        stop_scheduler()
        logger.info("[Scheduler] Uniform audit scheduler stopped")


app = FastAPI(
    title="Club Manager API",
    version="0.1",
    root_path=settings.ROOT_PATH,
    lifespan=lifespan,
)

# CORS: the SPA is served from a different origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # In production, restrict to specific origins
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)

register_exception_handlers(app)


@app.get("/health", tags=["system"])
def health():
    return {"ok": True}


@app.get("/", tags=["system"])
def root():
    return {"message": "Backend running"}


app.include_router(auth.router)
app.include_router(users.router)
app.include_router(athletes.router)
app.include_router(inventory.router)
app.include_router(events.router)
app.include_router(upload.router)
