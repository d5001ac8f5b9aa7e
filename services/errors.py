from typing import List, Optional


class SubmissionError(Exception):
    """Base class for failures while handling a loan submission."""


class ClientInputError(SubmissionError):
    """Raised when required form fields or documents are missing, or a document is sent twice."""

    def __init__(self, missing: List[str], duplicated: Optional[List[str]] = None):
        self.missing = list(missing)
        self.duplicated = list(duplicated or [])
        problems = []
        if self.missing:
            problems.append(f"Missing or empty required field(s): {', '.join(self.missing)}")
        if self.duplicated:
            problems.append(f"Only one file allowed for: {', '.join(self.duplicated)}")
        super().__init__("; ".join(problems))


class StorageError(SubmissionError):
    """Raised when an upload cannot be written to or read back from the staging directory."""


class DeliveryError(SubmissionError):
    """
    Raised when the email provider rejects the message or cannot be reached.
    `detail` keeps the provider's error body for the operational log only.
    """

    def __init__(self, message: str, status_code: Optional[int] = None, detail=None):
        self.status_code = status_code
        self.detail = detail
        super().__init__(message)
