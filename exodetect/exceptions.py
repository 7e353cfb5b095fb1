"""Exceptions raised by the ExoDetect analysis pipeline."""

from typing import Any, Dict, List, Optional


class ExoDetectError(Exception):
    """Base exception for all ExoDetect errors."""

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.cause = cause


class ValidationError(ExoDetectError):
    """Raised when a raw form record fails type, range or enum constraints."""

    def __init__(
        self,
        message: str = "Invalid input data.",
        errors: Optional[List[Dict[str, str]]] = None,
        cause: Optional[Exception] = None
    ) -> None:
        self.errors = errors or []
        super().__init__(message, details={"errors": self.errors}, cause=cause)

    @property
    def fields(self) -> List[str]:
        """Names of the fields that failed validation, in report order."""
        seen = []
        for error in self.errors:
            if error["field"] not in seen:
                seen.append(error["field"])
        return seen


class AdvisoryServiceError(ExoDetectError):
    """Raised when the advisory service fails or times out."""
    pass


class PipelineError(ExoDetectError):
    """Raised when a pipeline stage fails after validation."""
    pass
