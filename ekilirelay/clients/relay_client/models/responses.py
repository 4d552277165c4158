from typing import Any, Literal, Self

from pydantic import BaseModel, ConfigDict, model_validator


class RelayResult(BaseModel):
    model_config = ConfigDict(extra="allow")

    status: Literal["success", "error"]
    message: str | None = None
    data: Any = None

    @model_validator(mode="after")
    def validate_message(self) -> Self:
        if self.status == "error" and not self.message:
            raise ValueError("An error result must carry a message")
        return self

    @property
    def is_success(self) -> bool:
        return self.status == "success"


class EmailResult(RelayResult):
    pass


class UploadResult(RelayResult):
    pass
