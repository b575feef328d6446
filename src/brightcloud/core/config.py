"""Configuration loader for the BrightCloud client.

This module loads the client YAML configuration (credentials and service
settings) and applies environment variable overrides.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml

from brightcloud.core.constants import DEFAULTS, ENV_BASE_URL, ENV_KEY, ENV_SECRET
from brightcloud.core.exceptions import ConfigError, CredentialsMissingError
from brightcloud.core.models import Credential


# ============================================================================
# Configuration Paths
# ============================================================================

def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to configs directory (./configs relative to project root)
    """
    # core/ -> brightcloud/ -> src/ -> root
    project_root = Path(__file__).parent.parent.parent.parent
    return project_root / "configs"


def get_default_config_path() -> Path:
    return Path.home() / ".config" / "brightcloud" / "client.yaml"


# ============================================================================
# Client Configuration
# ============================================================================

@dataclass(frozen=True)
class ClientConfig:
    """Settings needed to construct a BrightCloudService."""
    credential: Credential
    base_url: str = DEFAULTS["base_url"]
    timeout: float = DEFAULTS["timeout"]


def _read_yaml(config_path: Path) -> dict[str, Any]:
    try:
        with config_path.open("r") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Failed to parse client YAML: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read client config: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError("Client configuration must be a mapping")
    return data


def _section(data: Mapping[str, Any], name: str) -> dict[str, Any]:
    section = data.get(name) or {}
    if not isinstance(section, dict):
        raise ConfigError(f"'{name}' must be a mapping")
    return section


def load_client_config(
    config_file: Path | str | None = None,
    env: Optional[Mapping[str, str]] = None,
) -> ClientConfig:
    """Load client configuration from YAML and the environment.

    Environment variables (BRIGHTCLOUD_KEY, BRIGHTCLOUD_SECRET,
    BRIGHTCLOUD_BASE_URL) take precedence over the file.

    Args:
        config_file: Path to client YAML file. If None, the user config
            (~/.config/brightcloud/client.yaml) is used when it exists
        env: Environment mapping, defaults to os.environ

    Returns:
        ClientConfig with validated settings

    Raises:
        ConfigError: If an explicit file is missing or YAML parsing fails
        CredentialsMissingError: If key or secret is not configured
    """
    if env is None:
        env = os.environ

    if config_file is None:
        config_path = get_default_config_path()
        data = _read_yaml(config_path) if config_path.exists() else {}
    else:
        config_path = Path(config_file)
        if not config_path.exists():
            raise ConfigError(f"Config file not found: {config_path}")
        data = _read_yaml(config_path)

    credentials = _section(data, "credentials")
    service = _section(data, "service")

    key = env.get(ENV_KEY) or credentials.get("key")
    secret = env.get(ENV_SECRET) or credentials.get("secret")

    if not key:
        raise CredentialsMissingError(
            f"Missing consumer key: set 'credentials.key' or {ENV_KEY}"
        )
    if not secret:
        raise CredentialsMissingError(
            f"Missing consumer secret: set 'credentials.secret' or {ENV_SECRET}"
        )

    base_url = env.get(ENV_BASE_URL) or service.get("base_url", DEFAULTS["base_url"])
    timeout = service.get("timeout", DEFAULTS["timeout"])

    try:
        timeout = float(timeout)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"'service.timeout' must be a number, got {timeout!r}") from e
    if timeout <= 0:
        raise ConfigError("'service.timeout' must be positive")

    return ClientConfig(
        credential=Credential(key=str(key), secret=str(secret)),
        base_url=str(base_url).rstrip("/"),
        timeout=timeout,
    )
