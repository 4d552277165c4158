from typing import Any, Self

from pydantic import BaseModel, Field

from ekilirelay.clients.models import Attachment
from ..validation import sanitize


FormFields = list[tuple[str, tuple[str | None, Any] | tuple[str, bytes, str]]]


class EmailRequest(BaseModel):
    """Caller input as given; type and content checks live in ``validate_email_request``."""

    to: Any = None
    subject: Any = None
    message: Any = None
    headers: Any = None

    def sanitized(self) -> Self:
        return self.model_copy(
            update={
                "to": sanitize(self.to),
                "subject": sanitize(self.subject),
                "message": sanitize(self.message),
                "headers": sanitize(self.headers) or None,
            },
        )

    def to_form_fields(self, api_key: str) -> FormFields:
        fields: FormFields = [
            ("to", (None, self.to)),
            ("subject", (None, self.subject)),
            ("message", (None, self.message)),
            ("apikey", (None, api_key)),
        ]
        if self.headers:
            fields.append(("headers", (None, self.headers)))
        return fields


class UploadRequest(BaseModel):
    file: Attachment
    api_key: str = Field(min_length=1, repr=False)

    def to_form_fields(self) -> FormFields:
        return [
            ("file", (self.file.name, self.file.data, self.file.content_type)),
            ("apikey", (None, self.api_key)),
        ]
