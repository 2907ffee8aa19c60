from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from sitetracker.core.config import get_cors_origins
from sitetracker.core.errors import error_response, register_error_handlers
from sitetracker.core.logging import configure_logging, request_fields
from sitetracker.routers.labor import router as labor_router
from sitetracker.routers.materials import router as materials_router
from sitetracker.routers.system import router as system_router
from sitetracker.routers.tasks import router as tasks_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    logger.info("Site tracker API starting")
    yield


app = FastAPI(
    title="Site Tracker API",
    lifespan=lifespan,
)


@app.middleware("http")
async def catch_unhandled_exceptions(request: Request, call_next):
    try:
        return await call_next(request)
    except Exception as exc:
        logger.exception(
            "Unhandled exception",
            extra=request_fields(request, status_code=500),
        )
        return error_response(500, str(exc) or "Internal Server Error")


app.add_middleware(
    CORSMiddleware,
    allow_origins=get_cors_origins(),
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

app.include_router(system_router)
app.include_router(tasks_router)
app.include_router(labor_router)
app.include_router(materials_router)
