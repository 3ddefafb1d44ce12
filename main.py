# main.py
from contextlib import asynccontextmanager
from pathlib import Path

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

from config import Settings, get_settings
from errors import register_error_handlers
from logging_config import get_logger, setup_logging
from routers import root, tasks
from storage import TaskStore

BASE_DIR = Path(__file__).parent
API_PREFIX = "/api"
DOCS_URL = "/api-docs"

logger = get_logger(__name__)


# --- App Lifecycle (Lifespan) ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manages application startup and shutdown events.
    """
    store: TaskStore = app.state.task_store
    logger.info(f"Application starting up, tasks stored in {store.path}")
    # Make sure there is a tasks file to read from
    store.initialize()
    yield
    logger.info("Application shutting down...")


def create_app(settings: Settings | None = None, store: TaskStore | None = None) -> FastAPI:
    """Builds the API with its middleware, routers and error handlers."""
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(
        title="Task API",
        description="A simple API for managing tasks",
        version=root.API_VERSION,
        lifespan=lifespan,
        docs_url=DOCS_URL,
        redoc_url=None,
        openapi_url=f"{DOCS_URL}/openapi.json",
        servers=[{"url": f"http://localhost:{settings.port}"}],
    )
    app.state.settings = settings
    app.state.task_store = store or TaskStore(settings.tasks_file)

    # --- CORS for the browser client ---
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.frontend_origin],
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["Content-Type", "Authorization"],
    )

    register_error_handlers(app)

    # --- Mount Static Files ---
    app.mount("/static", StaticFiles(directory=BASE_DIR / "static"), name="static")

    # --- Include API Routers ---
    app.include_router(root.router, prefix=API_PREFIX)
    app.include_router(tasks.router, prefix=API_PREFIX)

    # --- Client Page ---
    @app.get("/", include_in_schema=False)
    async def read_index():
        """Serves the task board page."""
        return FileResponse(BASE_DIR / "templates" / "index.html")

    return app


app = create_app()

# --- Main Entry Point ---
if __name__ == "__main__":
    settings = get_settings()
    logger.info(f"Server is running on http://localhost:{settings.port}")
    logger.info(f"Swagger docs available at http://localhost:{settings.port}{DOCS_URL}")
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)
