"""Configuration — defaults, YAML files, environment and runtime overrides."""

from alignby.config.hierarchy import load_config_hierarchy, load_settings
from alignby.config.schema import Settings

__all__ = ["Settings", "load_config_hierarchy", "load_settings"]
