"""Shared fixtures and in-memory fakes for the employee upload tests."""

from collections.abc import Sequence

import pytest

from employee_upload.domain import FileReference, FormSnapshot, ProcessResponse, UploadReceipt
from employee_upload.handlers import EmployeeFormHandler
from employee_upload.interfaces import DocumentUploader, Notifier, ProcessClient


class FakeProcessClient(ProcessClient):
    def __init__(self, response: ProcessResponse | None = None, error: Exception | None = None):
        self.response = response or ProcessResponse(status="SUCCESS", id=123, cs="cs-token")
        self.error = error
        self.calls = []

    def call(self, process_name: str, form: FormSnapshot, values: Sequence[str]) -> ProcessResponse:
        self.calls.append((process_name, form, list(values)))
        if self.error:
            raise self.error
        return self.response


class FakeUploader(DocumentUploader):
    def __init__(self, error: Exception | None = None):
        self.error = error
        self.uploads = []

    def upload(self, document_id, file_name, content, application_id, session_id):
        self.uploads.append(
            {
                "document_id": document_id,
                "file_name": file_name,
                "content": content,
                "application_id": application_id,
                "session_id": session_id,
            }
        )
        if self.error:
            raise self.error
        return UploadReceipt(status="OK", file=f"{document_id}_{file_name}")


class RecordingNotifier(Notifier):
    def __init__(self):
        self.successes = []
        self.alerts = []

    def show_success(self, text: str) -> None:
        self.successes.append(text)

    def alert(self, text: str) -> None:
        self.alerts.append(text)


@pytest.fixture
def form():
    return FormSnapshot(
        employee_name="SMITH",
        hire_date="2024-03-01",
        salary="4200",
        application_id="100",
        session_id="8811223344",
    )


@pytest.fixture
def document(tmp_path):
    path = tmp_path / "contract.pdf"
    path.write_bytes(b"%PDF-1.7 employee contract")
    return FileReference.from_path(path)


@pytest.fixture
def process_client():
    return FakeProcessClient()


@pytest.fixture
def uploader():
    return FakeUploader()


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def handler(process_client, uploader, notifier):
    return EmployeeFormHandler(process_client, uploader, notifier)
