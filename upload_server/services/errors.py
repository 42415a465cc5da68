class UploadError(Exception):
    """Request-local failure with a fixed HTTP status and a plain-text body."""
    status_code = 500
    message = "Upload failed\n"

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message.strip())


class BadRequest(UploadError):
    status_code = 400
    message = "Could not parse form\n"


class MethodNotAllowed(UploadError):
    status_code = 405
    message = "Invalid request method\n"


class DirectoryUnavailable(UploadError):
    status_code = 500
    message = "Unable to create upload directory\n"


class WriteFailed(UploadError):
    status_code = 500
    message = "Unable to save file\n"
