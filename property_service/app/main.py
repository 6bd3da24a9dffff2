import logging
from datetime import datetime, timezone
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.core.config import settings
from shared.core.database import property_engine, Base
from shared.helpers.exception_handler import setup_exception_handlers

from .models import properties, tasks
from .router import properties_router, tasks_router

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# Create all tables
Base.metadata.create_all(bind=property_engine)

app = FastAPI(
    title="Property Management API",
    description="API for managing properties and tasks",
    version="1.0.0",
    docs_url=f"{settings.API_PREFIX}/docs",
    openapi_url=f"{settings.API_PREFIX}/openapi.json",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register exception handlers
setup_exception_handlers(app)

# Include routers
app.include_router(properties_router.router, prefix=settings.API_PREFIX)
app.include_router(tasks_router.router, prefix=settings.API_PREFIX)


@app.get(f"{settings.API_PREFIX}/health", tags=["health"])
def health():
    return {
        "status": "ok",
        "message": "Property Management API is running",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


logger.info("Property service ready, routes mounted under %s", settings.API_PREFIX)
