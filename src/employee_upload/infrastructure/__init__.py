"""Concrete implementations of infrastructure interfaces."""

from .apex_process_client import ApexProcessClient
from .console_notifier import ConsoleNotifier
from .rest_document_uploader import RestDocumentUploader

__all__ = ["ApexProcessClient", "ConsoleNotifier", "RestDocumentUploader"]
