class RemunerationError(Exception):
    """Base for user-facing failures (rendered as an error notification)."""

    code = "REMUNERATION_ERROR"
    status_code = 400

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationFailed(RemunerationError):
    """A required field is blank or a numeric field is not a positive integer."""

    code = "VALIDATION_FAILED"
    status_code = 422


class SelectionMissing(RemunerationError):
    """No examiner chosen, or the examiner/subject id does not resolve."""

    code = "SELECTION_MISSING"
    status_code = 404


class EmptyReport(RemunerationError):
    """Export or print requested while there are no examiners."""

    code = "EMPTY_REPORT"
    status_code = 404
