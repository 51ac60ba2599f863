from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging
import os

from .database import engine, Base
from .routers import catalog, units, projects, insulated_glass

logger = logging.getLogger("glazier")

# Create tables (handles new tables but won't add columns to existing ones)
Base.metadata.create_all(bind=engine)

BASE_REVISION = "3b9e51c0d7a2"


def _run_migrations():
    """Run pending Alembic migrations on startup.

    Databases created by Base.metadata.create_all() have no alembic_version
    table. If the application tables already exist, the base revision is
    stamped as applied first so upgrade() does not try to recreate them.
    """
    try:
        from alembic.config import Config
        from alembic import command
        from sqlalchemy import inspect

        alembic_ini = os.path.join(os.path.dirname(__file__), "..", "alembic.ini")
        if not os.path.exists(alembic_ini):
            logger.info("alembic.ini not found, skipping migrations")
            return

        alembic_cfg = Config(alembic_ini)
        alembic_cfg.set_main_option(
            "script_location", os.path.join(os.path.dirname(alembic_ini), "alembic")
        )

        # Override sqlalchemy.url from environment if DATABASE_URL is set
        database_url = os.environ.get("DATABASE_URL")
        if database_url:
            alembic_cfg.set_main_option("sqlalchemy.url", database_url)

        insp = inspect(engine)
        has_alembic = "alembic_version" in insp.get_table_names()
        has_projects = "projects" in insp.get_table_names()

        if not has_alembic and has_projects:
            logger.info("Stamping base migration %s (tables already exist)", BASE_REVISION)
            command.stamp(alembic_cfg, BASE_REVISION)

        logger.info("Running pending Alembic migrations...")
        command.upgrade(alembic_cfg, "head")
        logger.info("Migrations complete")

    except Exception as e:
        # Never let migration errors prevent app startup
        logger.warning(f"Alembic migration warning: {e}")


app = FastAPI(
    title="Glazier Configurator",
    description="Window and door configurator: layout, pricing and cut lists",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# API routes
app.include_router(catalog.router, prefix="/api")
app.include_router(units.router, prefix="/api")
app.include_router(projects.router, prefix="/api")
app.include_router(insulated_glass.router, prefix="/api")


@app.get("/health")
def health():
    return {"status": "ok", "app": "glazier-configurator"}


@app.on_event("startup")
def auto_migrate():
    """Run pending Alembic migrations on startup."""
    _run_migrations()
