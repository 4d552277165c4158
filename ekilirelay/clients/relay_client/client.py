from http import HTTPStatus
from pathlib import Path
from typing import IO

import niquests
import structlog
from niquests import AsyncSession

from ekilirelay.clients.base_client import BaseClient
from ekilirelay.clients.models import Attachment
from ekilirelay.settings import DEFAULT_TIMEOUT, RelayConfig
from .exceptions import (
    RelayAuthenticationConfigError,
    RelayHTTPError,
    RelayUnexpectedError,
)
from .models import EmailRequest, EmailResult, UploadRequest, UploadResult
from .validation import validate_email_request


logger = structlog.get_logger(__name__)

UNEXPECTED_EMAIL_ERROR = "An unexpected error occurred while sending the email"


class RelayClient(BaseClient):
    """Client for the Ekilie relay: sends emails and uploads files.

    Each call is a single multipart POST. Construction fails fast on a missing
    API key; ``send_email`` raises for invalid input and for HTTP error
    statuses and returns an error result for every other failure.
    """

    def __init__(
        self,
        api_key: str | None,
        timeout: float = DEFAULT_TIMEOUT,
        session: AsyncSession | None = None,
    ) -> None:
        if not isinstance(api_key, str) or not api_key.strip():
            logger.error("missing_api_key", service="ekilirelay")
            raise RelayAuthenticationConfigError("API key is required")

        self.config = RelayConfig(api_key=api_key, timeout=timeout)

        super().__init__(
            api_url=self.config.endpoint_url,
            service_name="ekilirelay",
            transport_error_class=RelayUnexpectedError,
            timeout=self.config.timeout,
            session=session,
        )
        self.logger.debug("relay_client_initialized")

    @property
    def api_key(self) -> str:
        return self.config.api_key

    def validate_request(self, request: EmailRequest) -> None:
        validate_email_request(request, max_message_bytes=self.config.max_message_bytes)

    async def send_email(
        self,
        to: str,
        subject: str,
        message: str,
        headers: str | None = None,
    ) -> EmailResult:
        request = EmailRequest(to=to, subject=subject, message=message, headers=headers)
        self.validate_request(request)
        request = request.sanitized()

        self.logger.debug(
            "sending_email",
            to=request.to,
            subject=request.subject,
            has_headers=request.headers is not None,
        )

        try:
            response_data = await self._make_request(
                method="POST",
                url=self.config.endpoint_url,
                files=request.to_form_fields(self.api_key),
            )
            result = EmailResult.model_validate(response_data)
        except RelayHTTPError:
            raise
        except Exception:
            self.logger.exception("email_send_failed", to=request.to)
            return EmailResult(status="error", message=UNEXPECTED_EMAIL_ERROR)

        self.logger.debug("email_sent", to=request.to, status=result.status)
        return result

    async def send_file(
        self,
        file: bytes | IO[bytes] | Path,
        filename: str | None = None,
    ) -> UploadResult:
        # No size or type checks: the storage endpoint decides what it accepts.
        try:
            request = UploadRequest(file=Attachment.from_source(file, filename), api_key=self.api_key)

            self.logger.debug(
                "uploading_file",
                filename=request.file.name,
                content_type=request.file.content_type,
                size=len(request.file.data),
            )

            response_data = await self._make_request(
                method="POST",
                url=self.config.storage_url,
                files=request.to_form_fields(),
            )
            result = UploadResult.model_validate(response_data)
        except RelayHTTPError as e:
            self.logger.warning("file_upload_rejected", status_code=e.status_code, detail=e.detail)
            return UploadResult(status="error", message=e.detail or str(e))
        except Exception as e:
            self.logger.exception("file_upload_failed")
            return UploadResult(status="error", message=str(e) or type(e).__name__)

        self.logger.debug("file_uploaded", filename=request.file.name, status=result.status)
        return result

    upload_file = send_file

    def _get_headers(self) -> dict[str, str]:
        return {"Accept": "application/json"}

    def _handle_response_errors(self, response: niquests.Response) -> None:
        if HTTPStatus.OK <= response.status_code < HTTPStatus.MULTIPLE_CHOICES:
            return

        detail = self._extract_error_message(response)

        if response.status_code == HTTPStatus.UNAUTHORIZED:
            self.logger.error("authentication_failed", status_code=HTTPStatus.UNAUTHORIZED, detail=detail)
        elif response.status_code == HTTPStatus.TOO_MANY_REQUESTS:
            self.logger.warning("rate_limit_exceeded", status_code=HTTPStatus.TOO_MANY_REQUESTS, detail=detail)
        else:
            self.logger.error(
                "request_failed",
                status_code=response.status_code,
                response=response.text,
            )

        raise RelayHTTPError(response.status_code, detail=detail)

    @staticmethod
    def _extract_error_message(response: niquests.Response) -> str | None:
        try:
            body = response.json()
        except ValueError:
            return None
        if isinstance(body, dict) and isinstance(body.get("message"), str):
            return body["message"]
        return None
