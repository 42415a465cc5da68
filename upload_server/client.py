# upload_server/client.py
import os, sys
from pathlib import Path
from typing import Optional
import httpx

from .models import UploadResult

DEFAULT_ROUTE = "/upload"
OUTCOMES = {200: "success", 400: "bad_request", 500: "server_error"}


class UploadClient:
    def __init__(self, base_url: str, field: str = "file", timeout: float = 60.0,
                 client: Optional[httpx.Client] = None):
        self.base_url = base_url.rstrip("/")
        self.field = field
        self.timeout = timeout
        self._client = client

    def upload(self, path, route: str = DEFAULT_ROUTE) -> UploadResult:
        path = Path(path)
        with path.open("rb") as fh:
            files = {self.field: (path.name, fh, "application/octet-stream")}
            if self._client is not None:
                r = self._client.post(route, files=files)
            else:
                r = httpx.post(f"{self.base_url}{route}", files=files, timeout=self.timeout)
        return classify(r)


def classify(r: httpx.Response) -> UploadResult:
    outcome = OUTCOMES.get(r.status_code, "unexpected")
    return UploadResult(outcome=outcome, status_code=r.status_code,
                        message=r.text.strip() or r.reason_phrase)


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    url = os.getenv("UPLOAD_URL", "http://127.0.0.1:8080/upload")
    field = os.getenv("UPLOAD_FIELD", "file")
    if not argv:
        print("usage: upload-client FILE [FILE ...]  (target: UPLOAD_URL)", file=sys.stderr)
        return 2

    target = httpx.URL(url)
    client = UploadClient(f"{target.scheme}://{target.netloc.decode()}", field=field)
    route = target.path if target.path not in ("", "/") else DEFAULT_ROUTE
    failed = 0
    for name in argv:
        try:
            res = client.upload(name, route=route)
        except (OSError, httpx.HTTPError) as e:
            print(f"[ERROR] {name}: {e}")
            failed += 1
            continue
        print(f"[{res.outcome.upper()}] {name}: {res.status_code} {res.message}")
        if not res.ok:
            failed += 1
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
