"""Dependency injection configuration for the employee upload client."""

import requests

from employee_upload.config import AppConfig, load_config
from employee_upload.handlers import EmployeeFormHandler
from employee_upload.infrastructure import (
    ApexProcessClient,
    ConsoleNotifier,
    RestDocumentUploader,
)
from employee_upload.interfaces import Notifier
from employee_upload.logging import setup_logging

logger = setup_logging()


def get_config() -> AppConfig:
    """Returns the configuration read from the environment."""
    return load_config()


def get_handler(
    session: requests.Session,
    config: AppConfig | None = None,
    notifier: Notifier | None = None,
) -> EmployeeFormHandler:
    """Returns a handler wired to the APEX process and the document service."""
    config = config or get_config()

    logger.info(
        "Client configured",
        extra={
            "apex_base_url": config.apex.base_url,
            "document_service": config.document_service.endpoint,
            "app_id_source": config.document_service.app_id_source,
        },
    )

    return EmployeeFormHandler(
        process_client=ApexProcessClient(
            session, config.apex, config.http.timeout_seconds
        ),
        uploader=RestDocumentUploader(
            session, config.document_service, config.http.timeout_seconds
        ),
        notifier=notifier or ConsoleNotifier(),
        process_name=config.apex.process_name,
        app_id_source=config.document_service.app_id_source,
    )
