"""TM Forum error taxonomy — framework-independent.

Every kind carries the HTTP status and the stable TMF error code that the
error translator renders into the standard error envelope.
"""


class TMForumApiError(Exception):
    """Base class for errors that map onto a TMF error envelope."""

    code: str = "1"
    http_status: int = 500
    reason: str = "Internal Server Error"

    def __init__(self, message: str | None = None, reference_error: str | None = None):
        self.message = message or self.reason
        self.reference_error = reference_error
        super().__init__(self.message)


class NotFoundError(TMForumApiError):
    """Raised when a referenced resource id does not exist."""

    code = "60"
    http_status = 404
    reason = "Not Found"

    def __init__(
        self,
        entity_type: str = "Resource",
        entity_id: str | None = None,
        message: str | None = None,
    ):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(message or f"{entity_type} with id {entity_id} not found")


class BadRequestError(TMForumApiError):
    """Raised for a malformed request shape."""

    code = "20"
    http_status = 400
    reason = "Bad Request"


class ValidationError(TMForumApiError):
    """Raised for a semantically invalid field value."""

    code = "21"
    http_status = 400
    reason = "Validation Error"


class ConflictError(TMForumApiError):
    """Raised when a request conflicts with the current resource state."""

    code = "62"
    http_status = 409
    reason = "Conflict"


class InternalServerError(TMForumApiError):
    """Uncaught or unclassified failure."""

    def __init__(self, message: str | None = None):
        super().__init__(message or "An unexpected error occurred")
