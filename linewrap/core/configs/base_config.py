import json
from typing import Any

from pydantic_settings import BaseSettings, SettingsConfigDict


class BaseConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=True,
        extra='ignore',
    )

    @staticmethod
    def _parse_list(value: Any) -> Any:
        """Accept list settings as a JSON array or a comma-separated string."""
        if not isinstance(value, str):
            return value
        value = value.strip()
        if value.startswith('['):
            return json.loads(value)
        return [item.strip() for item in value.split(',') if item.strip()]
