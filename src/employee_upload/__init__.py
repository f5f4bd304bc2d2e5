"""Employee record save and document upload client."""

from employee_upload.config import AppConfig, load_config
from employee_upload.exceptions import (
    DocumentUploadError,
    MissingFileError,
    ProcessCallError,
    UploadNetworkError,
)
from employee_upload.logging import setup_logging

__all__ = [
    "setup_logging",
    "AppConfig",
    "load_config",
    "DocumentUploadError",
    "MissingFileError",
    "ProcessCallError",
    "UploadNetworkError",
]
