"""
Wisdom Lenses — Error taxonomy

Services raise these; ``wisdom_lenses.main`` renders them as JSON error
bodies carrying ``status_code``.  Parsing never raises: the perspective
parser degrades to a best-effort card instead.
"""

from __future__ import annotations


class WisdomLensesError(Exception):
    """Base class for every domain error surfaced to API callers."""

    status_code: int = 500
    error_type: str = "InternalError"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(WisdomLensesError):
    """Missing or malformed request data; rejected before any I/O."""

    status_code = 400
    error_type = "ValidationError"


class UnknownPerspectiveError(ValidationError):
    error_type = "UnknownPerspective"

    def __init__(self, perspective: str) -> None:
        super().__init__(f"Unknown perspective: {perspective!r}")
        self.perspective = perspective


class NotFoundError(WisdomLensesError):
    status_code = 404
    error_type = "NotFoundError"


class PermissionDeniedError(WisdomLensesError):
    """Username or edit token did not match the stored memo."""

    status_code = 403
    error_type = "PermissionDenied"


class ConflictError(WisdomLensesError):
    status_code = 409
    error_type = "ConflictError"


class GenerationError(WisdomLensesError):
    """The generation service failed; the SDK message is preserved."""

    status_code = 502
    error_type = "GenerationError"

    def __init__(self, message: str, model: str | None = None) -> None:
        super().__init__(message)
        self.model = model


class EmptyResponseError(GenerationError):
    """The generation service answered without any usable text."""

    error_type = "EmptyResponse"


class UnknownFunctionError(WisdomLensesError):
    """A function call named something outside the declared toolbox.

    The orchestrator records this inside the function-call result rather
    than raising it.
    """

    status_code = 400
    error_type = "UnknownFunction"

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown function: {name}")
        self.name = name
