"""Pydantic v2 configuration schema with strict validation."""

from enum import StrEnum

from pydantic import BaseModel, Field

from smhi.ingest.smhi_client import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT, SMHI_BASE_URL
from smhi.reporting.formatters import DEFAULT_TIME_FORMAT


class LogLevel(StrEnum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class ApiConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = SMHI_BASE_URL
    user_agent: str = DEFAULT_USER_AGENT
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0.0)


class DisplayConfig(BaseModel):
    model_config = {"extra": "forbid"}

    time_format: str = Field(default=DEFAULT_TIME_FORMAT, min_length=1)


class SmhiConfig(BaseModel):
    model_config = {"extra": "forbid"}

    api: ApiConfig = ApiConfig()
    display: DisplayConfig = DisplayConfig()
    log_level: LogLevel = LogLevel.WARNING
