import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from .core.config import get_settings
from .core.logs import configure_logging
from .routers import api_router          # all sub-routers live here
from .services import database

log = logging.getLogger("main")


# connection lifecycle -------------------------------------------------
@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    configure_logging(settings.log_level)
    client = database.connect(settings)
    app.state.mongo = client
    app.state.db = client.get_default_database()
    await database.ensure_indexes(app.state.db)
    log.info("Startup complete")
    try:
        yield
    finally:
        database.close(client)


app = FastAPI(title="Around the US", lifespan=lifespan)
app.include_router(api_router)
