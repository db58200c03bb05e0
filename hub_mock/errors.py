"""Error catalog for the mock server.

The real HUB reports per-line import errors and free-text error messages.
The mock only ever produces the canned entries below.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class LineError:
    """A canned entry for ImportResponseEnvelope.errors."""

    line_no: int
    message: str

    def as_dict(self) -> dict[str, Any]:
        return {"lineNo": self.line_no, "message": self.message}


# Import outcomes
VALIDATION_ERROR = LineError(line_no=1, message="Validation error (mock)")
SIMULATED_SERVER_ERROR = LineError(line_no=1, message="Simulated server error (mock)")
IMPORT_FAILURE_MESSAGE = "Simulated import failure"

# Search outcomes
SEARCH_FAILURE_MESSAGE = "Simulated error for testing"

# Platform-level failures
UNEXPECTED_ERROR_MESSAGE = "Unexpected error in mock server"
PAYLOAD_TOO_LARGE_MESSAGE = "Request body exceeds the configured size limit"
NOT_FOUND_MESSAGE = "Endpoint is not served by the mock"


def error_from_exception(exc: Exception) -> str:
    """Best-effort conversion of an unexpected exception into errorMessage text."""

    text = str(exc)
    return f"{type(exc).__name__}: {text}" if text else type(exc).__name__
