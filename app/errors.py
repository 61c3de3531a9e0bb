"""Error taxonomy shared by services and routers.

Every failure an operation can report is a ``PromptBuilderError`` carrying a
machine-readable ``code``; the handlers in ``app.main`` turn these into the
``{"success": false, "error": {...}}`` envelope.
"""

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


class PromptBuilderError(Exception):
    """Base exception for the prompt builder API."""

    code = "INTERNAL"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str = "An error occurred"):
        self.message = message
        super().__init__(self.message)


class UnauthorizedError(PromptBuilderError):
    """Raised when no authenticated identity is attached to the request."""

    code = "UNAUTHORIZED"
    status_code = status.HTTP_401_UNAUTHORIZED


class NotFoundError(PromptBuilderError):
    """Raised when a requested entity does not exist (or is hidden from the caller)."""

    code = "NOT_FOUND"
    status_code = status.HTTP_404_NOT_FOUND


class ForbiddenError(PromptBuilderError):
    """Raised when an entity exists but belongs to another user."""

    code = "FORBIDDEN"
    status_code = status.HTTP_403_FORBIDDEN


class ValidationFailedError(PromptBuilderError):
    """Raised when input fails a shape or constraint check."""

    code = "VALIDATION"
    status_code = 422

    def __init__(self, message: str = "Invalid input.", issues: list[dict] | None = None):
        super().__init__(message)
        self.issues = issues or []

    @classmethod
    def from_request_error(cls, exc: RequestValidationError) -> "ValidationFailedError":
        issues = [
            {"loc": [str(part) for part in err.get("loc", ())], "msg": err.get("msg", "")}
            for err in exc.errors()
        ]
        return cls(issues[0]["msg"] if issues else "Invalid input.", issues=issues)


def error_body(exc: PromptBuilderError) -> dict:
    error = {"code": exc.code, "message": exc.message}
    if isinstance(exc, ValidationFailedError):
        error["issues"] = exc.issues
    return {"success": False, "error": error}


async def prompt_builder_error_handler(request: Request, exc: PromptBuilderError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=error_body(exc))


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return await prompt_builder_error_handler(request, ValidationFailedError.from_request_error(exc))
