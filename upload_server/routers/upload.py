# upload_server/routers/upload.py
import logging
from fastapi import APIRouter, Depends, Request, Response
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import PlainTextResponse
from starlette.datastructures import UploadFile
from starlette.exceptions import HTTPException
from starlette.formparsers import MultiPartException

from ..config import Settings
from ..deps import get_settings, get_store
from ..services.errors import BadRequest
from ..services.storage import UploadStore

log = logging.getLogger(__name__)

SUCCESS_MESSAGE = "File successfully uploaded\n"


async def upload_file(request: Request,
                      settings: Settings = Depends(get_settings),
                      store: UploadStore = Depends(get_store)):
    if request.method == "OPTIONS":
        # pre-flight: headers come from the CORS middleware
        return Response(status_code=200)

    if not request.headers.get("content-type", "").lower().startswith("multipart/form-data"):
        raise BadRequest()
    try:
        form = await request.form(max_part_size=settings.max_part_size)
    except (MultiPartException, HTTPException, ValueError) as e:
        raise BadRequest() from e

    try:
        upload = form.get(settings.field_name)
        # a part with filename="" is what a form sends when no file was chosen
        if not isinstance(upload, UploadFile) or not upload.filename:
            raise BadRequest("Error retrieving the file\n")
        artifact = await run_in_threadpool(store.save, upload.file, upload.filename)
    finally:
        await form.close()

    log.info("Saved to file %s (%d bytes) in %.3fs", artifact.path, artifact.size, artifact.elapsed)
    return PlainTextResponse(SUCCESS_MESSAGE)


def build_router(paths: list[str], allow_options: bool = False) -> APIRouter:
    router = APIRouter(tags=["upload"])
    methods = ["POST", "OPTIONS"] if allow_options else ["POST"]
    for path in paths:
        router.add_api_route(path, upload_file, methods=methods,
                             response_class=PlainTextResponse)
    return router
