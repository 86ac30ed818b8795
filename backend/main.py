import logging

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from core.config import Settings, load_settings
from routers.report import router as report_router

logger = logging.getLogger(__name__)


def create_app(settings: Settings) -> FastAPI:
    app = FastAPI(title="Startup Timeline Viewer", docs_url=None, redoc_url=None, openapi_url=None)
    app.state.settings = settings
    app.state.templates = Jinja2Templates(directory=str(settings.templates_dir))

    # static mount and /healthz must be registered before the catch-all report route
    app.mount("/static", StaticFiles(directory=settings.static_dir), name="static")

    @app.get("/healthz")
    def healthz():
        return {"ok": True}

    app.include_router(report_router)
    return app


def main(argv: list[str] | None = None) -> None:
    settings = load_settings(argv)
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("serving report %s on %s:%s", settings.report_path, settings.host, settings.port)

    import uvicorn

    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=int(settings.port),
        log_level=settings.log_level,
    )


if __name__ == "__main__":
    main()
