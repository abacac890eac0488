"""
Failure envelope and error taxonomy.

Only one class of failure is allowed to cross the core boundary:

- LoadError: the catalog source is unreachable or is not a usable table.

Lookup misses (unknown arena, unknown card name) and numeric coercion
failures never raise inside the core. They degrade to a safe default
(0, an empty list, or "unclassified") so exploration keeps working on
partial data.

The API layer converts every KnownError into an ApiResponse so that no
raw 500 reaches the browser.
"""

from enum import Enum

from pydantic import BaseModel, Field


class FailureKind(str, Enum):
    """Classification of failure types."""

    INVALID_INPUT = "invalid_input"
    NOT_FOUND = "not_found"
    SCHEMA_MISMATCH = "schema_mismatch"
    SERVICE_UNAVAILABLE = "service_unavailable"
    UNKNOWN = "unknown"


class OutcomeType(str, Enum):
    """High-level outcome classification."""

    KNOWN_FAILURE = "known_failure"
    UNKNOWN_FAILURE = "unknown_failure"


class FailureDetail(BaseModel):
    """Detailed information about a failure."""

    kind: FailureKind = Field(
        ...,
        description="Classification of the failure",
    )
    message: str = Field(
        ...,
        description="User-appropriate explanation of what went wrong",
    )
    detail: str | None = Field(
        default=None,
        description="Additional technical detail (optional)",
    )
    suggestion: str | None = Field(
        default=None,
        description="Suggested action for the user",
    )


class ApiResponse(BaseModel):
    """
    Response envelope used for failures leaving the API.

    The chart and search views render an empty/error state from the
    failure block instead of crashing the page.
    """

    outcome: OutcomeType
    failure: FailureDetail | None = None

    @classmethod
    def known_failure(
        cls,
        kind: FailureKind,
        message: str,
        detail: str | None = None,
        suggestion: str | None = None,
    ) -> "ApiResponse":
        """Create a known failure response."""
        return cls(
            outcome=OutcomeType.KNOWN_FAILURE,
            failure=FailureDetail(
                kind=kind,
                message=message,
                detail=detail,
                suggestion=suggestion,
            ),
        )

    @classmethod
    def unknown_failure(cls, detail: str | None = None) -> "ApiResponse":
        """Create an unknown failure response (catch-all for unexpected exceptions)."""
        return cls(
            outcome=OutcomeType.UNKNOWN_FAILURE,
            failure=FailureDetail(
                kind=FailureKind.UNKNOWN,
                message="The request failed for an unexpected reason.",
                detail=detail,
                suggestion="If this persists, please report the issue.",
            ),
        )


class KnownError(Exception):
    """
    Base class for exceptions that represent known, explainable failures.

    Subclass this for errors where the system knows exactly what went wrong.
    """

    def __init__(
        self,
        kind: FailureKind,
        message: str,
        detail: str | None = None,
        suggestion: str | None = None,
        status_code: int = 400,
    ):
        self.kind = kind
        self.message = message
        self.detail = detail
        self.suggestion = suggestion
        self.status_code = status_code
        super().__init__(message)

    def to_response(self) -> ApiResponse:
        """Convert to an ApiResponse."""
        return ApiResponse.known_failure(
            kind=self.kind,
            message=self.message,
            detail=self.detail,
            suggestion=self.suggestion,
        )


class LoadError(KnownError):
    """
    Raised when the card catalog cannot be fetched or parsed.

    Fatal to every feature that needs the catalog. Every waiter on the
    failed load receives the same exception.
    """

    def __init__(
        self,
        source: str,
        reason: str,
        kind: FailureKind = FailureKind.SERVICE_UNAVAILABLE,
    ):
        self.source = source
        self.reason = reason
        super().__init__(
            kind=kind,
            message="The card catalog could not be loaded.",
            detail=f"{source}: {reason}",
            suggestion="Check that the catalog file exists and is a valid CardList CSV.",
            status_code=503,
        )


class ArenaNotFoundError(KnownError):
    """Raised at the API boundary when an arena reference matches nothing."""

    def __init__(self, arena_ref: str):
        self.arena_ref = arena_ref
        super().__init__(
            kind=FailureKind.NOT_FOUND,
            message=f"Unknown arena: {arena_ref!r}",
            suggestion="Use an arena display name or a count_N column key.",
            status_code=404,
        )


class UnknownGroupError(KnownError):
    """Raised at the API boundary when a group key is not assignable."""

    def __init__(self, group: str):
        self.group = group
        super().__init__(
            kind=FailureKind.INVALID_INPUT,
            message=f"Unknown group: {group!r}",
            suggestion="Use 'toxic_troop' or 'cheap_spell'.",
            status_code=400,
        )
