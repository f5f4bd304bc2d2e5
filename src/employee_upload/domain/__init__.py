"""Domain layer exports."""

from .models import (
    FileReference,
    FlowResult,
    FlowState,
    FormSnapshot,
    Notice,
    ProcessResponse,
    UploadReceipt,
)

__all__ = [
    "FileReference",
    "FlowResult",
    "FlowState",
    "FormSnapshot",
    "Notice",
    "ProcessResponse",
    "UploadReceipt",
]
