"""
Configuration management using Pydantic Settings.

Provides type-safe access to:
- The tag allow-list for person requests (packaged data/tags.yaml)
- MAIS Person API connection settings (MAIS_* environment variables / .env)
"""

from importlib import resources
from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

TAGS_FILE = 'tags.yaml'


def read_tags_file() -> str:
    """
    Read the tag allow-list YAML.

    The copy shipped inside the package wins; a config/tags.yaml in the
    source checkout or the working directory is only a fallback.

    Raises:
        FileNotFoundError: If no tags.yaml can be found
    """
    packaged = resources.files('mais_person_client') / 'data' / TAGS_FILE
    if packaged.is_file():
        return packaged.read_text(encoding='utf-8')

    project_root = Path(__file__).parent.parent.parent  # src/mais_person_client/config.py -> root
    for config_path in (project_root / 'config' / TAGS_FILE, Path('config') / TAGS_FILE):
        if config_path.exists():
            return config_path.read_text(encoding='utf-8')

    raise FileNotFoundError(
        f"Config file {TAGS_FILE} not found in the mais_person_client package "
        f"or under config/. Reinstall the package or restore data/{TAGS_FILE}."
    )


class TagsConfig(BaseSettings):
    """
    Tag allow-list automatically loaded from the packaged data/tags.yaml.

    Tags scope which sections of a person record the API returns
    (e.g. 'name', 'email', 'affiliation').

    Attributes:
        allowed_tags: Every tag the person endpoint accepts, in request order

    Example:
        >>> config = TagsConfig()
        >>> config.is_valid_tag('email')
        True
        >>> config.is_valid_tag('ssn')
        False
    """

    allowed_tags: List[str] = Field(
        default_factory=list,
        description="Tags accepted by the person endpoint"
    )

    model_config = SettingsConfigDict(
        extra='ignore'
    )

    @model_validator(mode='before')
    @classmethod
    def load_yaml_config(cls, data: dict) -> dict:
        """
        Load configuration from the packaged data/tags.yaml if not already provided.

        Explicit values (e.g. from tests) take precedence over the file.
        """
        if data:
            return data

        yaml_data = yaml.safe_load(read_tags_file()) or {}

        return {
            'allowed_tags': yaml_data.get('allowed_tags', [])
        }

    def is_valid_tag(self, tag: Optional[str]) -> bool:
        if tag is None:
            return False
        return tag in self.allowed_tags


# Singleton pattern - the allow-list is static, load it once
_config: Optional[TagsConfig] = None


def get_config() -> TagsConfig:
    """
    Get the global tag configuration (lazy-loaded singleton).

    Returns:
        Singleton TagsConfig instance
    """
    global _config
    if _config is None:
        _config = TagsConfig()
    return _config


class ClientConfig(BaseSettings):
    """
    Connection settings for the MAIS Person API.

    Passed explicitly to MaisPersonClient / MaisTransport; there is no
    process-wide client configuration.

    Environment Variables (from .env):
        MAIS_BASE_URL: API base URL (e.g. "https://registry-uat.stanford.edu")
        MAIS_API_KEY: PEM-encoded private key for the TLS client certificate
        MAIS_API_CERT: PEM-encoded TLS client certificate
        MAIS_USER_AGENT: User-Agent header (default "stanford-library")

    Example:
        >>> config = ClientConfig(base_url="https://registry-uat.stanford.edu")
        >>> config.user_agent
        'stanford-library'
        >>> config.uses_client_certificate
        False
    """

    base_url: str = Field(
        ...,
        description="Base URL of the MAIS Person API"
    )

    api_key: Optional[str] = Field(
        default=None,
        repr=False,
        description="PEM private key used for client certificate authentication"
    )

    api_cert: Optional[str] = Field(
        default=None,
        repr=False,
        description="PEM client certificate issued by MAIS"
    )

    user_agent: str = Field(
        default="stanford-library",
        description="User-Agent header sent with every request"
    )

    timeout: float = Field(
        default=500.0,
        gt=0,
        description="Read/write/pool timeout in seconds"
    )

    open_timeout: float = Field(
        default=10.0,
        gt=0,
        description="Connect timeout in seconds"
    )

    max_retries: int = Field(
        default=3,
        ge=0,
        description="Extra attempts after a connection-level failure"
    )

    retry_interval: float = Field(
        default=0.5,
        ge=0,
        description="Initial backoff delay in seconds"
    )

    retry_backoff_factor: float = Field(
        default=2.0,
        ge=1,
        description="Multiplier applied to the delay after each retry"
    )

    retry_jitter: float = Field(
        default=0.25,
        ge=0,
        description="Maximum random jitter added to each delay, in seconds"
    )

    model_config = SettingsConfigDict(
        env_prefix='MAIS_',
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=False,
        extra='ignore',
        frozen=True
    )

    @property
    def uses_client_certificate(self) -> bool:
        """True when both the PEM key and certificate are configured."""
        return bool(self.api_key and self.api_cert)
