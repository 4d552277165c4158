class BaseClientError(Exception):
    default_status_code: int | None = None

    def __init__(self, message: str = "", status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code if status_code is not None else self.default_status_code


class BaseAuthenticationError(BaseClientError):
    pass


class BaseValidationError(BaseClientError):
    pass


class BaseHTTPError(BaseClientError):
    pass
