"""Domain models for the employee save and document upload flow."""

import json
import mimetypes
from enum import Enum
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, ValidationError

from employee_upload.exceptions import MissingFileError


class FormSnapshot(BaseModel, frozen=True):
    """Employee form values read at submission time."""

    employee_name: str
    hire_date: str
    salary: str
    application_id: str
    session_id: str
    page_id: str | None = None


class FileReference(BaseModel, frozen=True):
    """
    A selected file.

    Metadata is captured when the reference is built; the binary content is
    read separately, when the upload runs.
    """

    path: Path
    name: str
    mime_type: str = ""

    @classmethod
    def from_path(cls, path: str | Path) -> "FileReference":
        """
        Builds a reference for a file on disk.

        Args:
            path: Location of the selected file.

        Returns:
            FileReference with the file's base name and guessed MIME type.
            The MIME type is an empty string when it cannot be guessed.

        Raises:
            MissingFileError: If the path does not point to a regular file.
        """
        file_path = Path(path)
        if not file_path.is_file():
            raise MissingFileError(str(file_path))

        mime_type, _ = mimetypes.guess_type(file_path.name)
        return cls(path=file_path, name=file_path.name, mime_type=mime_type or "")

    def is_present(self) -> bool:
        return self.path.is_file()

    def read_content(self) -> bytes:
        """Reads the whole file, raising MissingFileError if it is gone."""
        try:
            return self.path.read_bytes()
        except OSError as e:
            raise MissingFileError(str(self.path), e) from e


class ProcessResponse(BaseModel):
    """
    JSON object returned by the save process.

    Every field is optional: a reply without a SUCCESS status is a rejection,
    not a transport failure. Numeric messages and tokens are read as strings.
    """

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    status: str | None = None
    id: int | str | None = None
    message: str | None = None
    cs: str | None = None

    @property
    def is_success(self) -> bool:
        return self.status == "SUCCESS"

    @property
    def has_document_id(self) -> bool:
        return self.id is not None and str(self.id).strip() != ""


class UploadReceipt(BaseModel, frozen=True):
    """Parsed reply of the document service."""

    status: str | None = None
    file: str | None = None
    error: str | None = None

    @classmethod
    def from_body(cls, body: str) -> "UploadReceipt | None":
        """Parses a reply body, returning None when it is not a JSON object."""
        try:
            data = json.loads(body)
        except ValueError:
            return None
        if not isinstance(data, dict):
            return None
        try:
            return cls.model_validate(data)
        except ValidationError:
            return None


class FlowState(str, Enum):
    """States of a single save-and-upload invocation."""

    IDLE = "idle"
    SUBMITTING = "submitting"
    SUBMITTED = "submitted"
    UPLOADING = "uploading"
    DONE = "done"
    FAILED = "failed"


class Notice(BaseModel, frozen=True):
    """A user facing message."""

    kind: Literal["success", "alert"]
    text: str


class FlowResult(BaseModel, frozen=True):
    """Outcome of one invocation."""

    state: FlowState
    document_id: int | str | None = None
    notice: Notice | None = None

    @property
    def succeeded(self) -> bool:
        return self.state == FlowState.DONE
