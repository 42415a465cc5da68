# upload_server/services/storage.py
import logging, secrets, shutil, time
from datetime import datetime
from pathlib import Path
from typing import BinaryIO, Callable, Optional

from ..models import StoredArtifact
from .errors import DirectoryUnavailable, WriteFailed

log = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%d_%H-%M-%S.%f"
NAMING_MODES = ("unique", "timestamp")
CHUNK_SIZE = 1024 * 1024


class UploadStore:
    """Writes uploaded payloads into a single directory, one file per upload.

    Files are named after the wall clock at creation time. In ``timestamp``
    mode two uploads landing on the same tick share a name and the second
    silently replaces the first; ``unique`` mode appends a random token.
    """

    def __init__(self, directory, naming: str = "unique",
                 clock: Callable[[], datetime] = datetime.now, chunk_size: int = CHUNK_SIZE):
        if naming not in NAMING_MODES:
            raise ValueError(f"unknown naming mode: {naming!r}")
        self.directory = Path(directory)
        self.naming = naming
        self.clock = clock
        self.chunk_size = chunk_size

    def ensure_directory(self) -> Path:
        if self.directory.is_dir():
            return self.directory
        try:
            # exist_ok: a concurrent request may create it between the check and here
            self.directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            log.error("cannot create upload directory %s: %s", self.directory, e)
            raise DirectoryUnavailable() from e
        log.info("created upload directory %s", self.directory)
        return self.directory

    def artifact_name(self) -> str:
        stamp = self.clock().strftime(TIMESTAMP_FORMAT)
        if self.naming == "timestamp":
            return stamp
        return f"{stamp}_{secrets.token_hex(4)}"

    def save(self, src: BinaryIO, original_filename: Optional[str] = None) -> StoredArtifact:
        start = time.perf_counter()
        self.ensure_directory()

        dst = self.directory / self.artifact_name()
        mode = "wb" if self.naming == "timestamp" else "xb"
        try:
            out = dst.open(mode)
        except OSError as e:
            log.error("cannot create %s: %s", dst, e)
            raise WriteFailed("Unable to create file\n") from e

        try:
            with out:
                shutil.copyfileobj(src, out, self.chunk_size)
        except OSError as e:
            log.error("copy into %s failed: %s", dst, e)
            dst.unlink(missing_ok=True)
            raise WriteFailed("Unable to save file\n") from e

        elapsed = time.perf_counter() - start
        return StoredArtifact(
            name=dst.name,
            path=str(dst),
            size=dst.stat().st_size,
            original_filename=original_filename,
            elapsed=elapsed,
        )
