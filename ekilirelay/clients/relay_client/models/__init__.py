from ekilirelay.clients.models import Attachment
from .requests import EmailRequest, UploadRequest
from .responses import EmailResult, RelayResult, UploadResult


__all__ = [
    "Attachment",
    "EmailRequest",
    "EmailResult",
    "RelayResult",
    "UploadRequest",
    "UploadResult",
]
