"""
FastAPI application factory for the clinic web front end.

The lifespan opens the database engine, optionally creates the schema and
loads the sample data, and takes the reference-data snapshot every request
shares. Lookups that find nothing render a 404 page; any other failure
renders a 500 page.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .. import __version__
from ..database import (
    SessionManager,
    create_engine,
    seed_sample_data,
    wait_for_database,
)
from ..exceptions import (
    EntityNotFoundException,
    create_error_response,
    log_exception_context,
)
from ..repositories import load_reference_data
from ..utils import AppSettings
from . import owners, pets, system, vets, visits
from .dependencies import templates

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the database for the lifetime of the application."""
    settings: AppSettings = app.state.settings
    logger.info("Starting petclinic")

    engine = create_engine(
        settings.database_url,
        pool_size=settings.pool_size,
        max_overflow=settings.max_overflow,
        echo=settings.echo,
    )
    manager = SessionManager(engine)

    try:
        await wait_for_database(engine)
        if settings.create_schema:
            await manager.create_schema()
        async with manager.get_transaction() as session:
            if settings.load_sample_data:
                await seed_sample_data(session)
            app.state.reference_data = await load_reference_data(session)
    except Exception as e:
        logger.error(f"Failed to initialize database: {e}")
        await manager.close()
        raise

    app.state.session_manager = manager
    logger.info("Petclinic ready")

    yield

    logger.info("Shutting down petclinic")
    await manager.close()


async def entity_not_found_handler(request: Request, exc: EntityNotFoundException):
    logger.info(f"{request.method} {request.url.path}: {exc.message}")
    if "application/json" in request.headers.get("accept", ""):
        return JSONResponse(create_error_response(exc), status_code=404)
    return templates.TemplateResponse(
        request,
        "error.html",
        {"status": 404, "message": exc.message},
        status_code=404,
    )


async def general_exception_handler(request: Request, exc: Exception):
    log_exception_context(
        exc, {"method": request.method, "path": request.url.path}, logger
    )
    return templates.TemplateResponse(
        request,
        "error.html",
        {"status": 500, "message": str(exc)},
        status_code=500,
    )


def create_app(settings: Optional[AppSettings] = None) -> FastAPI:
    """
    Build the application.

    Args:
        settings: Explicit settings; read from the environment when omitted

    Returns:
        Configured FastAPI application
    """
    settings = settings or AppSettings.from_environment()

    app = FastAPI(
        title="PetClinic",
        description="Owners, pets, vets and visits of a veterinary clinic",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_exception_handler(EntityNotFoundException, entity_not_found_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    app.include_router(system.router)
    app.include_router(owners.router)
    app.include_router(pets.router)
    app.include_router(visits.router)
    app.include_router(vets.router)

    return app


def main(host: str = "0.0.0.0", port: int = 8080) -> None:
    """Run the application with uvicorn."""
    import uvicorn

    settings = AppSettings.from_environment()
    settings.configure_logging()
    uvicorn.run(create_app(settings), host=host, port=port, log_config=None)
