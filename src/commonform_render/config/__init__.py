"""Renderer settings package."""

from commonform_render.config.loader import get_config, load_config
from commonform_render.config.models import RenderSettings, ReportingSettings

__all__ = ["RenderSettings", "ReportingSettings", "get_config", "load_config"]
