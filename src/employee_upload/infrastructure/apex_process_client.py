"""APEX implementation of the ProcessClient interface."""

from collections.abc import Sequence

import requests

from employee_upload.config import ApexConfig
from employee_upload.domain import FormSnapshot, ProcessResponse
from employee_upload.exceptions import ProcessCallError
from employee_upload.interfaces import ProcessClient
from employee_upload.logging import setup_logging

logger = setup_logging()

AJAX_PATH = "wwv_flow.ajax"


class ApexProcessClient(ProcessClient):
    """Invokes APEX application processes over the wwv_flow.ajax endpoint."""

    def __init__(
        self,
        session: requests.Session,
        config: ApexConfig,
        timeout_seconds: float,
    ):
        self._session = session
        self._config = config
        self._timeout_seconds = timeout_seconds

    def call(
        self,
        process_name: str,
        form: FormSnapshot,
        values: Sequence[str],
    ) -> ProcessResponse:
        """
        Posts the process request the way apex.server.process does.

        Positional values are sent as x01, x02, ... in order.
        """
        url = f"{self._config.base_url.rstrip('/')}/{AJAX_PATH}"
        data = {
            "p_request": f"APPLICATION_PROCESS={process_name}",
            "p_flow_id": form.application_id,
            "p_flow_step_id": form.page_id or self._config.page_id,
            "p_instance": form.session_id,
        }
        for position, value in enumerate(values, start=1):
            data[f"x{position:02d}"] = value

        try:
            response = self._session.post(url, data=data, timeout=self._timeout_seconds)
            response.raise_for_status()
            payload = response.json()

            if not isinstance(payload, dict):
                raise ProcessCallError(
                    process_name,
                    ValueError("Process reply is not a JSON object"),
                )

            result = ProcessResponse.model_validate(payload)
            logger.info(
                "Application process completed",
                extra={
                    "process_name": process_name,
                    "status": result.status,
                    "document_id": result.id,
                },
            )
            return result

        except ProcessCallError:
            logger.error(
                "Application process returned an unexpected reply",
                extra={"process_name": process_name, "url": url},
            )
            raise
        except Exception as e:
            logger.exception(
                "Application process call failed",
                extra={"process_name": process_name, "url": url},
            )
            raise ProcessCallError(process_name, e) from e
