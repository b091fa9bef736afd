"""
Configuration - ~/.pushdispatch/config.json overlaid with PUSHDISPATCH_* env vars.
"""

import json
import os
from pathlib import Path
from typing import Optional, Union

from pydantic import BaseModel, ValidationError

from pushdispatch.errors import ConfigError
from pushdispatch.models.alert import DEFAULT_COLOR, DEFAULT_SMALL_ICON
from pushdispatch.transport.http import DEFAULT_BASE_URL, DEFAULT_TIMEOUT
from pushdispatch.transport.registrar import DEFAULT_APP_ID
from pushdispatch.images import DEFAULT_IMAGE_TIMEOUT

CONFIG_FILE = Path.home() / ".pushdispatch" / "config.json"
ENV_PREFIX = "PUSHDISPATCH_"


class Config(BaseModel):
    base_url: str = DEFAULT_BASE_URL
    access_token: Optional[str] = None
    device_token: Optional[str] = None
    app_id: str = DEFAULT_APP_ID
    request_timeout: float = DEFAULT_TIMEOUT
    image_timeout: float = DEFAULT_IMAGE_TIMEOUT
    small_icon: str = DEFAULT_SMALL_ICON
    color: str = DEFAULT_COLOR


def _read_file(path: Path) -> dict:
    try:
        data = json.loads(path.read_text())
    except (FileNotFoundError, json.JSONDecodeError):
        return {}
    return data if isinstance(data, dict) else {}


def load_config(path: Optional[Union[str, Path]] = None) -> Config:
    values = _read_file(Path(path) if path else CONFIG_FILE)
    for name in Config.model_fields:
        env_value = os.environ.get(f"{ENV_PREFIX}{name.upper()}")
        if env_value is not None:
            values[name] = env_value
    try:
        return Config.model_validate(values)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}")
