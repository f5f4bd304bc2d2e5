"""Handler for saving an employee record and uploading its document."""

from typing import Literal

from employee_upload.domain import (
    FileReference,
    FlowResult,
    FlowState,
    FormSnapshot,
    Notice,
)
from employee_upload.exceptions import (
    DocumentUploadError,
    MissingFileError,
    ProcessCallError,
    UploadNetworkError,
)
from employee_upload.interfaces import DocumentUploader, Notifier, ProcessClient
from employee_upload.logging import setup_logging

logger = setup_logging()

MSG_NO_FILE = "Please select a file"
MSG_SAVE_FAILED = "Save failed"
MSG_SAVE_ERROR = "Error saving employee data"
MSG_UPLOAD_FAILED = "Upload failed: "
MSG_NETWORK_ERROR = "Network error during upload"
MSG_SUCCESS = "Employee saved and file uploaded successfully"


class EmployeeFormHandler:
    """
    Orchestrates the save-then-upload flow.

    The upload only starts from the success branch of the save step. Every
    failure ends the invocation with a single alert.
    """

    def __init__(
        self,
        process_client: ProcessClient,
        uploader: DocumentUploader,
        notifier: Notifier,
        process_name: str = "SAVE_DATA_V2",
        app_id_source: Literal["token", "application_id"] = "token",
    ):
        self._process_client = process_client
        self._uploader = uploader
        self._notifier = notifier
        self._process_name = process_name
        self._app_id_source = app_id_source

    def run(self, form: FormSnapshot, file: FileReference | None) -> FlowResult:
        """Runs one complete invocation of the flow."""
        logger.info(
            "Flow started",
            extra={"state": FlowState.IDLE.value, "employee_name": form.employee_name},
        )
        result = self.save_employee(form, file)
        logger.info(
            "Flow finished",
            extra={"state": result.state.value, "document_id": result.document_id},
        )
        return result

    def save_employee(
        self, form: FormSnapshot, file: FileReference | None
    ) -> FlowResult:
        """
        Submits the form values and file metadata to the save process.

        Args:
            form: Employee form values.
            file: The selected file, or None when nothing is selected.

        Returns:
            FlowResult of the whole invocation, including the upload when the
            save succeeded.
        """
        if file is None:
            return self._fail(MSG_NO_FILE)

        values = [
            form.employee_name,
            form.hire_date,
            form.salary,
            form.application_id,
            form.session_id,
            file.name,
            file.mime_type,
        ]

        logger.info(
            "Submitting employee data",
            extra={
                "state": FlowState.SUBMITTING.value,
                "process_name": self._process_name,
                "file_name": file.name,
                "mime_type": file.mime_type,
            },
        )

        try:
            response = self._process_client.call(self._process_name, form, values)
        except ProcessCallError as e:
            logger.error(
                "Employee save failed",
                extra={"process_name": e.process_name, "error": str(e.cause)},
            )
            return self._fail(MSG_SAVE_ERROR)

        if not response.is_success:
            logger.warning(
                "Employee save rejected",
                extra={"status": response.status, "reason": response.message},
            )
            return self._fail(response.message or MSG_SAVE_FAILED)

        if not response.has_document_id:
            logger.warning(
                "Employee save returned no document id",
                extra={"status": response.status},
            )
            return self._fail(MSG_SAVE_FAILED)

        logger.info(
            "Employee saved",
            extra={"state": FlowState.SUBMITTED.value, "document_id": response.id},
        )
        return self.upload_document(response.id, response.cs, form, file)

    def upload_document(
        self,
        document_id: int | str,
        token: str | None,
        form: FormSnapshot,
        file: FileReference | None,
    ) -> FlowResult:
        """
        Reads the selected file and sends it to the document service.

        Args:
            document_id: Identifier returned by the save process.
            token: Optional token returned by the save process.
            form: Employee form values supplying the session context.
            file: The selected file, or None when nothing is selected.
        """
        if file is None or not file.is_present():
            return self._fail(MSG_NO_FILE, document_id)

        try:
            content = file.read_content()
        except MissingFileError:
            logger.warning(
                "Selected file is no longer readable",
                extra={"file_path": str(file.path)},
            )
            return self._fail(MSG_NO_FILE, document_id)

        logger.info(
            "Uploading document",
            extra={
                "state": FlowState.UPLOADING.value,
                "document_id": document_id,
                "size": len(content),
            },
        )

        try:
            self._uploader.upload(
                document_id=document_id,
                file_name=file.name,
                content=content,
                application_id=self._resolve_app_id(token, form),
                session_id=form.session_id,
            )
        except DocumentUploadError as e:
            return self._fail(MSG_UPLOAD_FAILED + e.body, document_id)
        except UploadNetworkError:
            return self._fail(MSG_NETWORK_ERROR, document_id)

        notice = Notice(kind="success", text=MSG_SUCCESS)
        self._notifier.show_success(notice.text)
        return FlowResult(state=FlowState.DONE, document_id=document_id, notice=notice)

    def _resolve_app_id(self, token: str | None, form: FormSnapshot) -> str:
        """Picks the value sent as the application id header."""
        if self._app_id_source == "token":
            if token:
                return token
            logger.warning(
                "Save process returned no token, sending application id instead",
                extra={"application_id": form.application_id},
            )
        return form.application_id

    def _fail(self, text: str, document_id: int | str | None = None) -> FlowResult:
        notice = Notice(kind="alert", text=text)
        self._notifier.alert(notice.text)
        return FlowResult(state=FlowState.FAILED, document_id=document_id, notice=notice)
