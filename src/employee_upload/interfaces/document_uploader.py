"""Abstract interface for document uploads."""

from abc import ABC, abstractmethod

from employee_upload.domain import UploadReceipt


class DocumentUploader(ABC):
    """Abstract base class for document service backends."""

    @abstractmethod
    def upload(
        self,
        document_id: int | str,
        file_name: str,
        content: bytes,
        application_id: str,
        session_id: str,
    ) -> UploadReceipt | None:
        """
        Sends a file's raw bytes to the document service.

        Args:
            document_id: Identifier of the record the file belongs to.
            file_name: Original name of the file.
            content: Complete file content.
            application_id: Value sent as the application id header.
            session_id: Platform session id.

        Returns:
            The parsed service reply, or None when the reply is not JSON.

        Raises:
            DocumentUploadError: If the service answers with a non-200 status.
            UploadNetworkError: If no response is received.
        """
        pass
