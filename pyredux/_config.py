"""Build-mode configuration.

Development mode enables the advisory state shape checks and warnings of
``combine_reducers``. It is on by default and turned off by setting
``PYREDUX_ENV=production`` or by running Python with ``-O``.
``PYREDUX_DEVELOPMENT`` overrides both when set to a boolean word.
"""

from __future__ import annotations

import dataclasses
import os

from typing import Mapping, Optional


__all__ = (
    "Settings",
    "configure",
    "get_settings",
)


def _env_bool(value: Optional[str], default: bool) -> bool:
    if value is None:
        return default

    normalized = value.strip().lower()

    if normalized in {"1", "true", "yes", "y", "on"}:
        return True

    if normalized in {"0", "false", "no", "n", "off"}:
        return False

    return default


@dataclasses.dataclass(frozen=True)
class Settings:
    development: bool = True

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> Settings:
        if environ is None:
            environ = os.environ

        env = environ.get("PYREDUX_ENV", "").strip().lower()
        default = __debug__ and env != "production"

        return cls(
            development=_env_bool(environ.get("PYREDUX_DEVELOPMENT"), default)
        )


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    global _settings

    if _settings is None:
        _settings = Settings.from_env()

    return _settings


def configure(*, development: bool) -> Settings:
    global _settings

    _settings = Settings(development=development)

    return _settings
