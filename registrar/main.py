import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, APIRouter, Request, status
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware

from registrar.core.config import settings
from registrar.core.database import check_connection, create_db_engine, create_session_factory
from registrar.core.exceptions import RegistrarError, registrar_exception_handler
from registrar.core.logging import setup_logging
from registrar.routers import course, enrollment, student

setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    engine = create_db_engine()
    if check_connection(engine):
        logger.info("Database connection established.")
    else:
        logger.error("Could not connect to the database.")
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)
    yield
    engine.dispose()
    logger.info("Database connections closed")


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    lifespan=lifespan
)

app.add_exception_handler(RegistrarError, registrar_exception_handler)

# Set all CORS enabled origins
if settings.BACKEND_CORS_ORIGINS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[str(origin) for origin in settings.BACKEND_CORS_ORIGINS],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )


@app.get("/")
async def root():
    return {
        "message": f"Welcome to {settings.PROJECT_NAME}",
        "version": settings.VERSION,
        "docs_url": "/docs"
    }

@app.get("/health")
async def health_check(request: Request):
    engine = request.app.state.engine
    if not check_connection(engine):
        return JSONResponse(
            content={"status": "unhealthy", "database": "unreachable"},
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE
        )
    return {"status": "healthy", "database": "ok"}

api_router = APIRouter()

api_router.include_router(student.router)
api_router.include_router(course.router)
api_router.include_router(enrollment.router)

app.include_router(api_router, prefix=settings.API_V1_STR)
