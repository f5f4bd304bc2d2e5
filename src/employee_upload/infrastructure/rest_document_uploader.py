"""REST implementation of the DocumentUploader interface."""

import requests

from employee_upload.config import DocumentServiceConfig
from employee_upload.domain import UploadReceipt
from employee_upload.exceptions import DocumentUploadError, UploadNetworkError
from employee_upload.interfaces import DocumentUploader
from employee_upload.logging import setup_logging

logger = setup_logging()

HEADER_DOC_ID = "X-Doc-Id"
HEADER_FILE_NAME = "X-File-Name"
HEADER_DOC_TYPE = "X-Doc-Type"
HEADER_APP_ID = "p_app_id"
HEADER_SESSION_ID = "p_session_id"


class RestDocumentUploader(DocumentUploader):
    """Streams raw file bytes to the SaveDocumentV2 endpoint."""

    def __init__(
        self,
        session: requests.Session,
        config: DocumentServiceConfig,
        timeout_seconds: float,
    ):
        self._session = session
        self._config = config
        self._timeout_seconds = timeout_seconds

    def upload(
        self,
        document_id: int | str,
        file_name: str,
        content: bytes,
        application_id: str,
        session_id: str,
    ) -> UploadReceipt | None:
        headers = {
            "Content-Type": "application/octet-stream",
            HEADER_DOC_ID: str(document_id),
            # http.client encodes str header values as Latin-1 only
            HEADER_FILE_NAME: file_name.encode("utf-8"),
            HEADER_DOC_TYPE: self._config.document_type,
            HEADER_APP_ID: application_id,
            HEADER_SESSION_ID: session_id,
        }

        try:
            response = self._session.post(
                self._config.endpoint,
                data=content,
                headers=headers,
                timeout=self._timeout_seconds,
            )
        except requests.RequestException as e:
            logger.exception(
                "Document service unreachable",
                extra={"endpoint": self._config.endpoint, "document_id": document_id},
            )
            raise UploadNetworkError(self._config.endpoint, e) from e

        body = response.text
        receipt = UploadReceipt.from_body(body)

        if response.status_code != 200:
            logger.error(
                "Document upload rejected",
                extra={
                    "endpoint": self._config.endpoint,
                    "document_id": document_id,
                    "status_code": response.status_code,
                    "error": receipt.error if receipt else None,
                },
            )
            raise DocumentUploadError(response.status_code, body)

        logger.info(
            "Document uploaded",
            extra={
                "document_id": document_id,
                "file_name": file_name,
                "size": len(content),
                "stored_as": receipt.file if receipt else None,
            },
        )
        return receipt
