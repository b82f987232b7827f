"""
Error taxonomy for Shortlink Platform.

Each error carries a machine-readable `error` tag, a human `message` and the
HTTP status the API layer should answer with. Unexpected failures are not
modelled here; they surface as a generic 500 from the app's catch-all handler.
"""


class ShortlinkError(Exception):
    status_code = 500

    def __init__(self, error: str, message: str):
        super().__init__(message)
        self.error = error
        self.message = message


class ValidationError(ShortlinkError):
    """Missing or malformed input (400)."""
    status_code = 400


class NotFoundError(ShortlinkError):
    """Short code is not in the registry (404)."""
    status_code = 404

    def __init__(
        self,
        error: str = "Short URL not found",
        message: str = "The requested short URL does not exist",
    ):
        super().__init__(error, message)
