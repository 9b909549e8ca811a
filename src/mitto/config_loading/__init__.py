"""Configuration loading exports."""

from .config_loader import load_config

__all__ = ["load_config"]
