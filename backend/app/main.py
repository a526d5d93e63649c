import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from config import LOG_LEVEL, CORS_ORIGINS
from app.database import engine, Base
import app.models
from app.api import users, login, diet_plan

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
)
logger = logging.getLogger(__name__)


# Run Alembic migrations on startup (replaces create_all)
def run_migrations():
    """Run pending Alembic migrations automatically on startup."""
    try:
        from alembic.config import Config
        from alembic import command
        alembic_cfg = Config("alembic.ini")
        command.upgrade(alembic_cfg, "head")
        logger.info("[Alembic] Migrations applied successfully")
    except Exception as e:
        logger.warning(f"[Alembic] Migration failed, falling back to create_all: {e}")

    # Ensure all tables exist
    Base.metadata.create_all(bind=engine)


app = FastAPI(title="Diet Planner API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
def startup():
    run_migrations()


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


app.include_router(users.router)
app.include_router(login.router)
app.include_router(diet_plan.router)

# Root endpoint
@app.get("/")
def root():
    return {
        "message": "Welcome to Diet Planner API",
        "docs": "/docs",
        "redoc": "/redoc"
    }

# Health check endpoint
@app.get("/health")
def health_check():
    return {"status": "healthy", "message": "API is running"}
