from contextlib import asynccontextmanager
from pathlib import Path
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from utility_dashboard import __version__
from utility_dashboard.core.config import Settings, get_settings
from utility_dashboard.core.container import ApplicationContainer
from utility_dashboard.core.logging import configure_logging
from utility_dashboard.interfaces.http import create_api_router
from utility_dashboard.modules.accounts import AccountFilter

logger = logging.getLogger(__name__)

BASE_DIR = Path(__file__).resolve().parent
PROJECT_ROOT = BASE_DIR.parent


def _resolve_path(path: Path) -> Path:
    if path.is_absolute():
        return path
    return (PROJECT_ROOT / path).resolve()


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.container.settings
    logger.info("%s started (environment=%s)", settings.project_name, settings.environment)
    yield


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title=settings.project_name,
        description="Utility account dashboard with a mock card payment endpoint",
        version=__version__,
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.state.container = ApplicationContainer(settings=settings)
    # Cache-busting suffix for static asset URLs.
    app.state.static_version = __version__

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    static_dir = _resolve_path(settings.static_dir)
    if static_dir.exists():
        app.mount("/static", StaticFiles(directory=str(static_dir)), name="static")
    else:
        logger.warning("Static directory %s not found; dashboard assets will not be served", static_dir)

    templates = Jinja2Templates(directory=str(_resolve_path(settings.template_dir)))

    app.include_router(create_api_router(settings.api_prefix))

    @app.get("/", response_class=HTMLResponse, include_in_schema=False)
    async def dashboard_page(request: Request):
        return templates.TemplateResponse(
            request,
            "index.html",
            {
                "api_prefix": settings.api_prefix,
                "account_filters": list(AccountFilter),
                "static_version": app.state.static_version,
                "title": settings.project_name,
            },
        )

    return app


app = create_app()
