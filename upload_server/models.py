from pydantic import BaseModel
from typing import Optional

class StoredArtifact(BaseModel):
    name: str
    path: str
    size: int
    original_filename: Optional[str] = None
    elapsed: float = 0.0

class UploadResult(BaseModel):
    # success | bad_request | server_error | unexpected
    outcome: str
    status_code: int
    message: str

    @property
    def ok(self) -> bool:
        return self.outcome == "success"
