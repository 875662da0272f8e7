from typing import Annotated, Literal

from pydantic import BeforeValidator, Field

from linewrap.core.configs.base_config import BaseConfig


class AppConfig(BaseConfig):
    ENVIRONMENT: Literal['local', 'staging', 'production', 'testing'] = 'local'

    # Logging: 'file' adds a daily-rotated JSON log under <project root>/logs
    LOG_LEVEL: str = 'INFO'
    LOG_HANDLERS: Annotated[list[Literal['stream', 'file']] | str, BeforeValidator(BaseConfig._parse_list)] = ['stream']

    # Values below 1 disable wrapping
    WRAP_MAX_LINE_LENGTH: int = Field(60, description='Default maximum output line length')

    # Temporal worker
    TEMPORAL_HOST: str = 'localhost:7233'
    TEMPORAL_NAMESPACE: str = 'default'
    TEMPORAL_TASK_QUEUE: str = 'linewrap-queue'


app_config = AppConfig()
