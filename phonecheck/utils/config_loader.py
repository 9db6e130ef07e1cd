"""Configuration loader for YAML files."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

logger = logging.getLogger("phonecheck.config")

PROJECT_ROOT = Path(__file__).parent.parent.parent

DEFAULT_CONFIG_PATH = "config/phonecheck.yaml"
DEFAULT_API_KEYS_PATH = "config/api_keys.yaml"
DEFAULT_PROVIDER_URL = "https://phonevalidation.abstractapi.com/v1/"
API_KEY_ENV_VAR = "ABSTRACT_API_KEY"


@dataclass(frozen=True)
class Settings:
    """Runtime settings for the provider client and entry points."""

    provider_url: str = DEFAULT_PROVIDER_URL
    api_key: str = ""
    timeout: Optional[float] = None
    log_level: str = "INFO"
    log_file: Optional[Path] = None
    api_host: str = "0.0.0.0"
    api_port: int = 8000


def load_yaml(filepath: Path) -> Dict[str, Any]:
    """Load YAML file and return as dictionary.

    Args:
        filepath: Path to YAML file.

    Returns:
        Dictionary with YAML contents.

    Raises:
        FileNotFoundError: If file doesn't exist.
        yaml.YAMLError: If YAML is malformed.
    """
    if not filepath.exists():
        raise FileNotFoundError(f"Config file not found: {filepath}")

    try:
        with open(filepath, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        logger.error(f"Error parsing YAML file {filepath}: {e}")
        raise

    if config is None:
        logger.warning(f"YAML file is empty: {filepath}")
        return {}

    return config


def load_yaml_config(filepath: Union[str, Path]) -> Dict[str, Any]:
    """Load YAML file from string path or Path object.

    Relative paths are resolved against the project root.

    Args:
        filepath: Path to YAML file (string or Path).

    Returns:
        Dictionary with YAML contents.

    Raises:
        FileNotFoundError: If file doesn't exist.
        yaml.YAMLError: If YAML is malformed.
    """
    return load_yaml(_resolve(filepath))


def _resolve(filepath: Union[str, Path]) -> Path:
    path = Path(filepath)
    return path if path.is_absolute() else PROJECT_ROOT / path


def _load_api_key(api_keys_path: Union[str, Path]) -> str:
    env_key = os.getenv(API_KEY_ENV_VAR)
    if env_key:
        return env_key.strip()

    try:
        api_keys = load_yaml_config(api_keys_path)
    except FileNotFoundError:
        api_keys = {}

    return str(api_keys.get("abstract_api_key") or "").strip()


def load_settings(
    config_path: Union[str, Path] = DEFAULT_CONFIG_PATH,
    api_keys_path: Union[str, Path] = DEFAULT_API_KEYS_PATH,
) -> Settings:
    """Build ``Settings`` from the YAML config, env vars and api_keys.yaml.

    A missing config file is not an error: built-in defaults are used.
    """
    try:
        config = load_yaml_config(config_path)
    except FileNotFoundError:
        logger.info(f"No config file at {config_path}, using defaults")
        config = {}

    provider = config.get("provider", {}) or {}
    logging_cfg = config.get("logging", {}) or {}
    api_cfg = config.get("api", {}) or {}

    timeout = provider.get("timeout")
    api_key = _load_api_key(api_keys_path)
    if not api_key:
        logger.warning(
            f"No provider API key configured (set {API_KEY_ENV_VAR} or {DEFAULT_API_KEYS_PATH})"
        )

    return Settings(
        provider_url=provider.get("base_url") or DEFAULT_PROVIDER_URL,
        api_key=api_key,
        timeout=float(timeout) if timeout is not None else None,
        log_level=str(logging_cfg.get("level", "INFO")),
        log_file=_resolve(logging_cfg["file"]) if logging_cfg.get("file") else None,
        api_host=str(api_cfg.get("host", "0.0.0.0")),
        api_port=int(api_cfg.get("port", 8000)),
    )
