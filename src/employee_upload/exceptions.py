"""Custom exceptions for the employee upload client."""


class MissingFileError(Exception):
    """Raised when no file is selected or the selection can no longer be read."""

    def __init__(self, file_path: str | None = None, cause: Exception | None = None):
        self.file_path = file_path
        self.cause = cause
        super().__init__(f"No readable file selected: '{file_path or ''}'")


class ProcessCallError(Exception):
    """Raised when the application process call fails at the transport level."""

    def __init__(self, process_name: str, cause: Exception | None = None):
        self.process_name = process_name
        self.cause = cause
        super().__init__(f"Failed to call application process '{process_name}'")


class DocumentUploadError(Exception):
    """Raised when the document service answers with a non-200 status."""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"Document service returned HTTP {status_code}")


class UploadNetworkError(Exception):
    """Raised when the document service cannot be reached at all."""

    def __init__(self, endpoint: str, cause: Exception | None = None):
        self.endpoint = endpoint
        self.cause = cause
        super().__init__(f"No response from document service at '{endpoint}'")
