"""Settings loader for the Common Form renderer.

Loads the JSON settings file and returns a validated RenderSettings instance.
Uses module-level caching so a file is only parsed once per process.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from commonform_render.application.error_messages import format_validation_errors
from commonform_render.config.models import RenderSettings
from commonform_render.domain.errors import ConfigurationError

# Module-level cache
_config_cache: dict[str, RenderSettings] = {}

# Default settings path (next to this module)
_DEFAULT_CONFIG_PATH = Path(__file__).parent / "commonform_default.json"


def load_config(path: Optional[Path] = None) -> RenderSettings:
    """Load and validate settings from a JSON file.

    Parameters
    ----------
    path : Path | None
        Path to a custom JSON settings file.
        If ``None``, the built-in ``commonform_default.json`` is used.

    Returns
    -------
    RenderSettings
        Validated settings instance.

    Raises
    ------
    ConfigurationError
        If the file is missing, is not JSON, or does not match the schema.
    """
    config_path = Path(path) if path else _DEFAULT_CONFIG_PATH
    cache_key = str(config_path.resolve())

    if cache_key in _config_cache:
        return _config_cache[cache_key]

    if not config_path.exists():
        raise ConfigurationError(f"Config file not found: {config_path}")

    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"Config file is not valid JSON: {exc}") from exc

    try:
        config = RenderSettings.model_validate(raw)
    except ValidationError as exc:
        details = "; ".join(format_validation_errors(exc.errors()))
        raise ConfigurationError(f"Invalid config {config_path}: {details}") from exc

    _config_cache[cache_key] = config
    return config


def get_config() -> RenderSettings:
    """Get the default settings (cached)."""
    return load_config()


def clear_cache() -> None:
    """Clear the config cache."""
    _config_cache.clear()
