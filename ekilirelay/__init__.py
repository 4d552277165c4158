"""Async client for the Ekilie email relay.

Do not ship this client or its API key to untrusted or client-side
environments: the key authorizes sending through your relay account.
"""

from ekilirelay.clients.relay_client import (
    Attachment,
    EmailRequest,
    EmailResult,
    RelayAuthenticationConfigError,
    RelayClient,
    RelayError,
    RelayHTTPError,
    RelayResult,
    RelayUnexpectedError,
    RelayValidationError,
    UploadRequest,
    UploadResult,
    sanitize,
    validate_email_address,
    validate_email_request,
)
from ekilirelay.settings import RelayConfig


__version__ = "0.1.0"
__all__ = [
    "Attachment",
    "EmailRequest",
    "EmailResult",
    "RelayAuthenticationConfigError",
    "RelayClient",
    "RelayConfig",
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
