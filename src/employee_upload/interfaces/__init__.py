"""Abstract interfaces for infrastructure dependencies."""

from .document_uploader import DocumentUploader
from .notifier import Notifier
from .process_client import ProcessClient

__all__ = ["DocumentUploader", "Notifier", "ProcessClient"]
