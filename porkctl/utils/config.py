"""
Configuration management using Pydantic Settings
Reads porkctl settings from environment variables and loads the Porkbun
API key pair from an env-style credential file.
"""

import os
import sys
from pathlib import Path
from typing import Dict, List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from porkctl.api.exceptions import ConfigurationError
from porkctl.models import Credentials


DEFAULT_API_BASE = "https://api.porkbun.com/api/json/v3"

API_KEY_NAME = "PORKBUN_API_KEY"
SECRET_KEY_NAME = "PORKBUN_SECRET_KEY"

CREDENTIAL_FILE_NAME = "porkbun.env"


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    Built once in main() and handed to the client and services.
    """

    model_config = SettingsConfigDict(
        env_prefix="PORKCTL_",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # Porkbun credentials straight from the environment (take precedence
    # over any credential file)
    porkbun_api_key: str = Field(
        default="",
        validation_alias=API_KEY_NAME,
        description="Porkbun API key",
    )
    porkbun_secret_key: str = Field(
        default="",
        validation_alias=SECRET_KEY_NAME,
        description="Porkbun secret API key",
    )

    credentials_file: Optional[Path] = Field(
        default=None,
        validation_alias="PORKCTL_ENV_FILE",
        description="Explicit path to the credential file",
    )
    api_base: str = Field(
        default=DEFAULT_API_BASE,
        description="Porkbun JSON API base URL",
    )
    bulk_delay: float = Field(
        default=1.2,
        ge=0,
        description="Seconds to wait between lookups in check-bulk",
    )
    timeout: Optional[float] = Field(
        default=None,
        gt=0,
        description="HTTP timeout in seconds (no timeout when unset)",
    )

    # Logging Configuration
    log_level: str = Field(
        default="WARNING",
        description="Logging level: DEBUG, INFO, WARNING, ERROR, CRITICAL",
    )
    log_file: Optional[Path] = Field(
        default=None,
        description="Optional file that receives DEBUG-level logs",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is valid"""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return v_upper

    @field_validator("api_base")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("credentials_file", mode="before")
    @classmethod
    def blank_path_is_unset(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    def has_environment_credentials(self) -> bool:
        """Check if both keys are set in the environment"""
        return bool(self.porkbun_api_key.strip() and self.porkbun_secret_key.strip())


def get_user_config_dir() -> Path:
    """Per-user porkctl configuration directory for the current platform"""
    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "porkctl"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "porkctl"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "porkctl"
    return Path.home() / ".config" / "porkctl"


def candidate_paths(settings: Settings) -> List[Path]:
    """
    Credential file locations in lookup order.

    The explicit override comes first, then the working directory, then the
    per-user configuration directory.
    """
    candidates = []
    if settings.credentials_file is not None:
        candidates.append(settings.credentials_file.expanduser())
    candidates.extend([
        Path(".") / CREDENTIAL_FILE_NAME,
        Path(".") / ".env",
        get_user_config_dir() / CREDENTIAL_FILE_NAME,
    ])
    return candidates


def parse_env_content(content: str) -> Dict[str, str]:
    """
    Parse KEY=VALUE lines.

    Blank lines, ``#`` comments and lines without ``=`` are skipped.
    Surrounding double quotes are stripped from values.

    Args:
        content: Raw file content

    Returns:
        Mapping of keys to values
    """
    values = {}
    for raw_line in content.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        values[key.strip()] = value.strip().strip('"')
    return values


def _read_first_candidate(candidates: List[Path]) -> Optional[tuple]:
    for path in candidates:
        if not path.is_file():
            continue
        try:
            return path, path.read_text(encoding="utf-8")
        except OSError:
            continue
    return None


def load_credentials(settings: Settings) -> Credentials:
    """
    Resolve the Porkbun API key pair.

    Keys present in the environment win; otherwise the first readable
    credential file is parsed.

    Args:
        settings: Application settings

    Returns:
        Credentials

    Raises:
        ConfigurationError: If no source is found or a key is missing
    """
    if settings.has_environment_credentials():
        return Credentials(
            api_key=settings.porkbun_api_key.strip(),
            secret_key=settings.porkbun_secret_key.strip(),
            source="environment",
        )

    found = _read_first_candidate(candidate_paths(settings))
    if found is None:
        raise ConfigurationError(
            "no env file found; set PORKCTL_ENV_FILE or create "
            f"{get_user_config_dir() / CREDENTIAL_FILE_NAME}"
        )

    path, content = found
    values = parse_env_content(content)
    api_key = values.get(API_KEY_NAME, "")
    secret_key = values.get(SECRET_KEY_NAME, "")
    if not api_key or not secret_key:
        raise ConfigurationError(f"missing {API_KEY_NAME} or {SECRET_KEY_NAME} in {path}")

    return Credentials(api_key=api_key, secret_key=secret_key, source=str(path))
