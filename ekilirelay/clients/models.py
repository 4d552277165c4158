import mimetypes
from pathlib import Path
from typing import IO, Self

from pydantic import BaseModel


DEFAULT_CONTENT_TYPE = "application/octet-stream"
DEFAULT_FILENAME = "file"


class Attachment(BaseModel):
    name: str
    content_type: str
    data: bytes

    @classmethod
    def from_source(cls, source: bytes | IO[bytes] | Path, filename: str | None = None) -> Self:
        """Build an attachment from raw bytes, a binary file object or a path.

        When ``filename`` is not given it is taken from the path or from the
        file object's ``name``; the content type is guessed from the filename.
        """
        if isinstance(source, Path):
            data = source.read_bytes()
            name = filename or source.name
        elif isinstance(source, bytes | bytearray):
            data = bytes(source)
            name = filename or DEFAULT_FILENAME
        else:
            data = source.read()
            source_name = getattr(source, "name", None)
            name = filename or (Path(source_name).name if isinstance(source_name, str) else DEFAULT_FILENAME)

        content_type, _ = mimetypes.guess_type(name)
        return cls(name=name, content_type=content_type or DEFAULT_CONTENT_TYPE, data=data)
