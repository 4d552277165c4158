from .client import RelayClient
from .exceptions import (
    RelayAuthenticationConfigError,
    RelayError,
    RelayHTTPError,
    RelayUnexpectedError,
    RelayValidationError,
)
from .models import (
    Attachment,
    EmailRequest,
    EmailResult,
    RelayResult,
    UploadRequest,
    UploadResult,
)
from .validation import sanitize, validate_email_address, validate_email_request


__all__ = [
    "Attachment",
    "EmailRequest",
    "EmailResult",
    "RelayAuthenticationConfigError",
    "RelayClient",
    "RelayError",
    "RelayHTTPError",
    "RelayResult",
    "RelayUnexpectedError",
    "RelayValidationError",
    "UploadRequest",
    "UploadResult",
    "sanitize",
    "validate_email_address",
    "validate_email_request",
]
