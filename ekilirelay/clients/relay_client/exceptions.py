from http import HTTPStatus

from ekilirelay.clients.exceptions import (
    BaseAuthenticationError,
    BaseClientError,
    BaseHTTPError,
    BaseValidationError,
)


class RelayError(BaseClientError):
    pass


class RelayAuthenticationConfigError(RelayError, BaseAuthenticationError):
    default_status_code = HTTPStatus.UNAUTHORIZED


class RelayValidationError(RelayError, BaseValidationError):
    default_status_code = HTTPStatus.BAD_REQUEST

    def __init__(self, errors: list[str]) -> None:
        super().__init__(", ".join(errors))
        self.errors = errors


class RelayHTTPError(RelayError, BaseHTTPError):
    def __init__(self, status_code: int, detail: str | None = None) -> None:
        super().__init__(f"HTTP error {status_code}", status_code=status_code)
        self.detail = detail


class RelayUnexpectedError(RelayError):
    pass
