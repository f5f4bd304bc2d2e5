"""Client configuration loaded from environment variables."""

import os
from typing import Literal

from pydantic import BaseModel


class ApexConfig(BaseModel, frozen=True):
    """APEX application process configuration."""

    base_url: str
    process_name: str = "SAVE_DATA_V2"
    page_id: str = "4"


class DocumentServiceConfig(BaseModel, frozen=True):
    """REST document service configuration."""

    endpoint: str
    document_type: str = "EMP_DOC"
    app_id_source: Literal["token", "application_id"] = "token"


class HttpConfig(BaseModel, frozen=True):
    """Shared HTTP client settings."""

    timeout_seconds: float = 10.0


class AppConfig(BaseModel, frozen=True):
    """Root client configuration."""

    apex: ApexConfig
    document_service: DocumentServiceConfig
    http: HttpConfig = HttpConfig()


def load_config() -> AppConfig:
    """Loads configuration from environment variables."""
    return AppConfig(
        apex=ApexConfig(
            base_url=os.getenv("APEX_BASE_URL", "http://localhost:8080/ords"),
            process_name=os.getenv("APEX_PROCESS_NAME", "SAVE_DATA_V2"),
            page_id=os.getenv("APEX_PAGE_ID", "4"),
        ),
        document_service=DocumentServiceConfig(
            endpoint=os.getenv(
                "DOCUMENT_SERVICE_URL",
                "http://localhost:9001/rest_token/SaveDocumentV2",
            ),
            document_type=os.getenv("DOCUMENT_TYPE", "EMP_DOC"),
            app_id_source=os.getenv("DOCUMENT_APP_ID_SOURCE", "token"),
        ),
        http=HttpConfig(
            timeout_seconds=float(os.getenv("HTTP_TIMEOUT_SECONDS", "10")),
        ),
    )
