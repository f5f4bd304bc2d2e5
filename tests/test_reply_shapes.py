"""Save-process replies run through the real APEX client and the handler."""

from unittest.mock import MagicMock

import pytest
import requests

from employee_upload.config import ApexConfig
from employee_upload.handlers import EmployeeFormHandler
from employee_upload.handlers.employee_form_handler import (
    MSG_SAVE_ERROR,
    MSG_SAVE_FAILED,
    MSG_SUCCESS,
)
from employee_upload.infrastructure import ApexProcessClient

from .conftest import FakeUploader, RecordingNotifier


def run_with_reply(payload, form, document):
    session = MagicMock(spec=requests.Session)
    response = MagicMock()
    response.json.return_value = payload
    session.post.return_value = response

    uploader = FakeUploader()
    notifier = RecordingNotifier()
    client = ApexProcessClient(session, ApexConfig(base_url="http://apex.local/ords"), 5)
    result = EmployeeFormHandler(client, uploader, notifier).run(form, document)
    return result, uploader, notifier


@pytest.mark.parametrize(
    "payload, alert",
    [
        ({}, MSG_SAVE_FAILED),
        ({"message": "bad date"}, "bad date"),
        ({"status": "FAIL", "message": 42}, "42"),
    ],
)
def test_rejections_show_server_message_or_fallback(form, document, payload, alert):
    _, uploader, notifier = run_with_reply(payload, form, document)

    assert notifier.alerts == [alert]
    assert MSG_SAVE_ERROR not in notifier.alerts
    assert uploader.uploads == []


def test_numeric_token_still_uploads(form, document):
    result, uploader, notifier = run_with_reply(
        {"status": "SUCCESS", "id": 5, "cs": 98765}, form, document
    )

    assert result.succeeded
    assert len(uploader.uploads) == 1
    assert uploader.uploads[0]["document_id"] == 5
    assert uploader.uploads[0]["application_id"] == "98765"
    assert notifier.successes == [MSG_SUCCESS]


def test_non_object_reply_is_still_a_transport_error(form, document):
    _, uploader, notifier = run_with_reply(["SUCCESS"], form, document)

    assert notifier.alerts == [MSG_SAVE_ERROR]
    assert uploader.uploads == []
