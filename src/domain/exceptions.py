"""Exceptions raised while picking problems."""


class ProblemPickerError(Exception):
    """Base error. The message is shown to the user as-is."""

    pass


class NetworkFailure(ProblemPickerError):
    """Transport error or non-2xx status from the problem list request."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class ApiFailure(ProblemPickerError):
    """Codeforces answered, but reported a failure in the envelope."""

    pass


class StatementExtractionFailure(ProblemPickerError):
    """A single statement page could not be fetched or read."""

    pass


class ValidationFailure(ProblemPickerError, ValueError):
    """User input rejected before any request is made."""

    pass
