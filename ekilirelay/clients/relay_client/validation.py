from __future__ import annotations

import re
from typing import TYPE_CHECKING

from ekilirelay.settings import MAX_MESSAGE_BYTES
from .exceptions import RelayValidationError


if TYPE_CHECKING:
    from .models import EmailRequest


EMAIL_ADDRESS_RE = re.compile(
    r"(?:"
    r"[^<>()\[\]\\.,;:\s@\"]+(?:\.[^<>()\[\]\\.,;:\s@\"]+)*"  # dot-separated atoms
    r"|\".+\""  # quoted local part
    r")@(?:"
    r"\[[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\]"  # [127.0.0.1]
    r"|(?:[a-zA-Z\-0-9]+\.)+[a-zA-Z]{2,}"
    r")",
)

INVALID_RECIPIENT = "Invalid recipient email address"
SUBJECT_REQUIRED = "Subject is required"
MESSAGE_REQUIRED = "Message is required"
MESSAGE_TOO_LARGE = "Message exceeds maximum size limit"
HEADERS_NOT_TEXT = "Headers must be a string"


def validate_email_address(address: object) -> bool:
    """Syntactic check only, no DNS or mailbox lookups."""
    if not isinstance(address, str):
        return False
    return EMAIL_ADDRESS_RE.fullmatch(address) is not None


def sanitize(value: str | None) -> str:
    if value is None:
        return ""
    return value.replace("<", "").replace(">", "").strip()


def _is_text(value: object) -> bool:
    return isinstance(value, str) and bool(value.strip())


def validate_email_request(request: EmailRequest, max_message_bytes: int = MAX_MESSAGE_BYTES) -> None:
    errors = []

    if not validate_email_address(request.to):
        errors.append(INVALID_RECIPIENT)

    if not _is_text(request.subject):
        errors.append(SUBJECT_REQUIRED)

    if not _is_text(request.message):
        errors.append(MESSAGE_REQUIRED)

    if isinstance(request.message, str) and len(request.message.encode("utf-8")) > max_message_bytes:
        errors.append(MESSAGE_TOO_LARGE)

    if request.headers is not None and not isinstance(request.headers, str):
        errors.append(HEADERS_NOT_TEXT)

    if errors:
        raise RelayValidationError(errors)
