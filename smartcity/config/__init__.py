"""Configuration management package.

Loads the packaged default YAML and optional user overrides, and exposes
values by dot-notation path.
"""

from smartcity.config.config_loader import Config

__all__ = ['Config']
