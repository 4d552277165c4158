from abc import ABC, abstractmethod
from types import TracebackType
from typing import Any, Self

import niquests
import structlog
from niquests import AsyncSession

from ekilirelay.clients.exceptions import BaseClientError


logger = structlog.get_logger(__name__)


class BaseClient(ABC):
    def __init__(
        self,
        api_url: str,
        service_name: str,
        transport_error_class: type[BaseClientError] = BaseClientError,
        timeout: float = 30,
        session: AsyncSession | None = None,
    ) -> None:
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self._session = session
        self._owned_session = session is None
        self.transport_error_class = transport_error_class

        self.logger = logger.bind(
            service=service_name,
            api_url=self.api_url,
        )

    async def __aenter__(self) -> Self:
        if self._session is None:
            self._session = AsyncSession()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if self._owned_session and self._session:
            await self._session.close()
            self._session = None

    @abstractmethod
    def _get_headers(self) -> dict[str, str]:
        """Return headers for the request."""

    @abstractmethod
    def _handle_response_errors(self, response: niquests.Response) -> None:
        """Handle response errors."""

    async def _send(
        self,
        session: AsyncSession,
        method: str,
        url: str,
        files: list[tuple[str, Any]] | None,
    ) -> niquests.Response:
        return await session.request(
            method=method,
            url=url,
            files=files,
            headers=self._get_headers(),
            timeout=self.timeout,
        )

    async def _make_request(
        self,
        method: str,
        url: str,
        files: list[tuple[str, Any]] | None = None,
    ) -> dict[str, Any]:
        """Perform a single request and return the decoded JSON object.

        Without an open session (the client was not entered as a context
        manager and none was injected) a short-lived one is used for this call.
        """
        self.logger.debug(
            "making_request",
            method=method,
            url=url,
            has_data=files is not None,
        )

        try:
            if self._session is not None:
                response = await self._send(self._session, method, url, files)
            else:
                async with AsyncSession() as session:
                    response = await self._send(session, method, url, files)

            self._handle_response_errors(response)

            response_data = response.json()

            self.logger.debug(
                "request_successful",
                method=method,
                url=url,
                status_code=response.status_code,
            )

        except niquests.exceptions.Timeout as e:
            self.logger.exception("request_timeout", method=method, url=url, error=str(e))
            raise self.transport_error_class(f"Request timeout: {e}") from e

        except niquests.exceptions.RequestException as e:
            self.logger.exception(
                "request_exception",
                method=method,
                url=url,
                error=str(e),
            )
            raise self.transport_error_class(f"Request failed: {e}") from e

        except ValueError as e:
            self.logger.exception("malformed_response", method=method, url=url, error=str(e))
            raise self.transport_error_class(f"Malformed response body: {e}") from e

        if not isinstance(response_data, dict):
            self.logger.error("malformed_response", method=method, url=url, body_type=type(response_data).__name__)
            raise self.transport_error_class("Malformed response body: expected a JSON object")

        return response_data
