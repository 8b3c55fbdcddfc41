"""Configuration loading."""

from wsz_kit.config.schema import Config, load_config

__all__ = ["Config", "load_config"]
