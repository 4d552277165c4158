from functools import lru_cache
from typing import final

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


RELAY_API_URL = "https://relay.ekilie.com/api/index.php"
RELAY_STORAGE_URL = "https://relay.ekilie.com/api/storage/v1/index.php"
MAX_MESSAGE_BYTES = 10 * 1024 * 1024
DEFAULT_TIMEOUT = 30


@final
class RelayConfig(BaseModel):
    """Per-client configuration, fixed at construction."""

    model_config = ConfigDict(frozen=True)

    api_key: str = Field(min_length=1, repr=False)
    endpoint_url: str = RELAY_API_URL
    storage_url: str = RELAY_STORAGE_URL
    max_message_bytes: int = MAX_MESSAGE_BYTES
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)


@final
class LogSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="EKILIRELAY_")

    log_level: str = "INFO"
    console_render: bool = True


@lru_cache  # get it from memory
def get_log_settings() -> LogSettings:
    return LogSettings()
