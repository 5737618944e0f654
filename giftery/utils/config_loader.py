"""
Configuration loader for the Giftery client
"""

import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional
import logging

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from giftery import __version__
from giftery.contracts.commands import HttpMethod
from giftery.errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_ENDPOINT = "https://ssl-api.giftery.ru"
DEFAULT_USER_AGENT = f"Giftery Api client for Python/{__version__}"

ENV_VARS = {
    "client_id": "GIFTERY_CLIENT_ID",
    "secret": "GIFTERY_SECRET",
    "endpoint": "GIFTERY_ENDPOINT",
    "http_method": "GIFTERY_HTTP_METHOD",
    "timeout": "GIFTERY_TIMEOUT",
}


class ClientSettings(BaseModel):
    """Credentials and transport options, fixed for a client's lifetime"""

    model_config = ConfigDict(frozen=True)

    client_id: int = Field(gt=0)
    secret: str = Field(min_length=1, repr=False)
    endpoint: str = DEFAULT_ENDPOINT
    http_method: HttpMethod = HttpMethod.GET
    timeout: Optional[float] = Field(default=None, gt=0)
    user_agent: str = DEFAULT_USER_AGENT

    @field_validator("endpoint")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        value = value.strip().rstrip("/")
        if not value:
            raise ValueError("endpoint must not be empty")
        return value

    @field_validator("http_method", mode="before")
    @classmethod
    def _normalize_method(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().upper()
        return value


def load_client_settings(
    config_path: Optional[Path] = None,
    env: Optional[Mapping[str, str]] = None,
) -> ClientSettings:
    """
    Load and validate client settings

    Values from the YAML file (either flat or under a ``giftery:`` key) are
    overridden by GIFTERY_* environment variables.

    Args:
        config_path: Optional path to a YAML config file
        env: Environment mapping. Defaults to os.environ

    Returns:
        Validated ClientSettings object

    Raises:
        FileNotFoundError: If config_path is given but doesn't exist
        ValidationError: If the merged values don't match the schema
    """
    env = os.environ if env is None else env
    data: Dict[str, Any] = {}

    if config_path is not None:
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        with open(config_path, "r", encoding="utf-8") as f:
            file_data = yaml.safe_load(f) or {}
        if not isinstance(file_data, dict):
            logger.error(f"Giftery config {config_path} must contain a mapping, got {type(file_data).__name__}")
            raise ConfigError(f"Config file must contain a mapping: {config_path}")
        if isinstance(file_data.get("giftery"), dict):
            file_data = file_data["giftery"]
        data.update(file_data)

    for field, var in ENV_VARS.items():
        value = env.get(var)
        if value not in (None, ""):
            data[field] = value

    try:
        settings = ClientSettings(**data)
    except ValidationError as e:
        logger.error(f"Giftery settings validation failed: {e}")
        raise
    source = config_path if config_path is not None else "environment"
    logger.info(f"Loaded Giftery settings from {source}")
    return settings
