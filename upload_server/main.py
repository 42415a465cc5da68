import logging
import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import Settings, settings as default_settings
from .routers import upload
from .services.errors import UploadError, MethodNotAllowed
from .services.storage import UploadStore
from . import deps

log = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


async def upload_error_handler(request: Request, exc: UploadError):
    return PlainTextResponse(exc.message, status_code=exc.status_code)


async def http_error_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 405:
        err = MethodNotAllowed()
        return PlainTextResponse(err.message, status_code=err.status_code, headers=exc.headers)
    return PlainTextResponse(f"{exc.detail}\n", status_code=exc.status_code, headers=exc.headers)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or default_settings
    app = FastAPI(title="Upload Server")
    app.state.settings = settings
    app.state.store = UploadStore(settings.upload_dir, naming=settings.naming)

    if settings.cors_enabled:
        deps.apply_cors(app, settings.upload_routes)

    app.include_router(upload.build_router(settings.upload_routes, allow_options=settings.cors_enabled))
    app.add_exception_handler(UploadError, upload_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)

    @app.get("/health")
    def health():
        return {"ok": True}

    return app


app = create_app()


def run():
    logging.basicConfig(level=default_settings.log_level, format=LOG_FORMAT)
    log.info("Server started at http://%s:%d (uploads -> %s)",
             default_settings.host, default_settings.port, default_settings.upload_dir)
    # uvicorn exits non-zero when the port cannot be bound
    uvicorn.run(app, host=default_settings.host, port=default_settings.port,
                log_level=default_settings.log_level.lower())


if __name__ == "__main__":
    run()
