"""Single config object: CLI and app factory read it from the environment."""
from __future__ import annotations

import os
from dataclasses import dataclass, fields
from typing import Any

from slicekit.core.errors import ConfigError

ENV_PREFIX = "SLICEKIT_"


class Config:
    """
    Env loading helpers. User builds their own settings object
    from Config.load_from_env() or uses load_config_from_env().
    """

    @classmethod
    def load_from_env(cls, prefix: str = ENV_PREFIX, **defaults: Any) -> dict[str, Any]:
        """Load from os.environ with prefix and defaults. SLICEKIT_STORAGE_ROOT -> {"storage_root": ...}."""
        result = dict(defaults)
        for key, value in os.environ.items():
            if key.startswith(prefix):
                name = key[len(prefix):].lower()
                result[name] = value
        return result


@dataclass
class Settings:
    storage_root: str = "."
    host: str = "127.0.0.1"
    port: int = 8080
    log_level: str = "INFO"


def load_config_from_env(prefix: str = ENV_PREFIX) -> Settings:
    """Settings from env vars with prefix; unknown variables are ignored."""
    known = {f.name for f in fields(Settings)}
    values = {k: v for k, v in Config.load_from_env(prefix).items() if k in known}
    if "port" in values:
        try:
            values["port"] = int(values["port"])
        except ValueError:
            raise ConfigError(f"{prefix}PORT must be an integer, got {values['port']!r}") from None
    if "log_level" in values:
        values["log_level"] = values["log_level"].upper()
    return Settings(**values)
