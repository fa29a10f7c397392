"""Configuration management for taskbridge."""

import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Mapping

logger = logging.getLogger(__name__)

TASKBRIDGE_HOME = Path(os.environ.get("TASKBRIDGE_HOME", Path.home() / ".taskbridge"))
CONFIG_FILE = TASKBRIDGE_HOME / "config" / "taskbridge.conf"
GOOGLE_TOKEN_URI = "https://oauth2.googleapis.com/token"

# Environment variables that override the config file
ENV_KEYS = {
    "CLIENT_ID": "client_id",
    "CLIENT_SECRET": "client_secret",
    "ACCESS_TOKEN": "access_token",
    "REFRESH_TOKEN": "refresh_token",
}

SECRET_FIELDS = ("client_secret", "access_token", "refresh_token")
REQUIRED_FIELDS = ("client_id", "client_secret", "refresh_token")


@dataclass(frozen=True)
class Config:
    """Google OAuth credentials, fixed for the life of the process."""

    client_id: str = ""
    client_secret: str = ""
    refresh_token: str = ""
    access_token: str = ""
    token_uri: str = GOOGLE_TOKEN_URI

    def missing_credentials(self) -> list[str]:
        """Names of required credentials that are empty."""
        return [name for name in REQUIRED_FIELDS if not getattr(self, name)]

    def __repr__(self) -> str:
        parts = []
        for f in fields(self):
            value = getattr(self, f.name)
            if f.name in SECRET_FIELDS and value:
                value = "***"
            parts.append(f"{f.name}={value!r}")
        return f"Config({', '.join(parts)})"


def _parse_value(value: str) -> str:
    # Handle quoted values with inline comments: "value" # comment
    if value.startswith('"') or value.startswith("'"):
        quote = value[0]
        end_quote = value.find(quote, 1)
        if end_quote != -1:
            return value[1:end_quote]
        return value[1:]
    # Unquoted: strip inline comments
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def _read_config_file(path: Path) -> dict[str, str]:
    known = {f.name for f in fields(Config)}
    values: dict[str, str] = {}

    for line in path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        if key not in known:
            logger.warning(f"Ignoring unknown config key '{key}' in {path}")
            continue
        values[key] = _parse_value(value.strip())

    return values


def load_config(
    config_file: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> Config:
    """Load configuration from taskbridge.conf, then apply environment overrides."""
    config_file = config_file or CONFIG_FILE
    environ = os.environ if environ is None else environ

    values: dict[str, str] = {}
    if config_file.exists():
        values.update(_read_config_file(config_file))

    for env_key, field_name in ENV_KEYS.items():
        if environ.get(env_key):
            values[field_name] = environ[env_key]

    return Config(**values)
