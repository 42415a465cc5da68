import os
from pydantic import BaseModel
from dotenv import load_dotenv
load_dotenv()


def _flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default) in ("1", "true", "True", "yes")


def _routes(raw: str) -> list[str]:
    return [p.strip() for p in raw.split(",") if p.strip()]


class Settings(BaseModel):
    upload_dir: str = os.getenv("UPLOAD_DIR", "./uploads")
    field_name: str = os.getenv("UPLOAD_FIELD", "file")
    upload_routes: list[str] = _routes(os.getenv("UPLOAD_ROUTES", "/upload"))
    cors_enabled: bool = _flag("UPLOAD_CORS")
    # "unique" appends a random token to the timestamp, "timestamp" keeps the bare stamp
    naming: str = os.getenv("UPLOAD_NAMING", "unique")
    max_part_size: int = int(os.getenv("UPLOAD_MAX_PART_SIZE", str(32 << 20)))
    host: str = os.getenv("UPLOAD_HOST", "0.0.0.0")
    port: int = int(os.getenv("UPLOAD_PORT", "8080"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()

settings = Settings()
