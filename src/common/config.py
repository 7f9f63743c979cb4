import os
from functools import lru_cache
from typing import Final

from pydantic import BaseModel, Field, ValidationError

from .errors import ConfigError

DEFAULT_API_HOST: Final[str] = "developer-apis.awair.is"
DEFAULT_KEY_PREFIX: Final[str] = "airdata/"


class Settings(BaseModel):
    device_type: str = Field(validation_alias="DEVICE_TYPE")
    device_id: str = Field(validation_alias="DEVICE_ID")
    api_key: str = Field(validation_alias="AWAIR_API_KEY")
    bucket: str = Field(validation_alias="BUCKET")

    api_host: str = Field(default=DEFAULT_API_HOST, validation_alias="AWAIR_API_HOST")
    key_prefix: str = Field(default=DEFAULT_KEY_PREFIX, validation_alias="KEY_PREFIX")
    timeout_secs: float = Field(default=15.0, gt=0, validation_alias="AWAIR_TIMEOUT_SECS")


REQUIRED_KEYS: Final[tuple[str, ...]] = ("DEVICE_TYPE", "DEVICE_ID", "AWAIR_API_KEY", "BUCKET")
ENV_KEYS: Final[tuple[str, ...]] = (
    *REQUIRED_KEYS,
    "AWAIR_API_HOST",
    "KEY_PREFIX",
    "AWAIR_TIMEOUT_SECS",
)


def load_settings() -> Settings:
    data: dict[str, str] = {}
    for key in ENV_KEYS:
        if key in os.environ:
            data[key] = os.environ[key]

    missing = [k for k in REQUIRED_KEYS if not data.get(k)]
    if missing:
        raise ConfigError(f"Missing required configuration: {', '.join(missing)}")
    try:
        return Settings.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e


@lru_cache
def get_settings() -> Settings:
    """Settings for the running container; read from the environment once."""
    return load_settings()
