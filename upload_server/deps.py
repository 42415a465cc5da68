from fastapi import Request
from .config import Settings
from .services.storage import UploadStore

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST",
    "Access-Control-Allow-Headers": "Content-Type",
}

def get_settings(request: Request) -> Settings:
    return request.app.state.settings

def get_store(request: Request) -> UploadStore:
    return request.app.state.store

def apply_cors(app, paths: list[str]):
    """Stamp the static CORS headers on every response served from an upload path."""
    cors_paths = {p.rstrip("/") for p in paths}

    @app.middleware("http")
    async def cors_headers(request: Request, call_next):
        response = await call_next(request)
        if request.url.path.rstrip("/") in cors_paths:
            response.headers.update(CORS_HEADERS)
        return response
