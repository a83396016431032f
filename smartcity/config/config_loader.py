"""Configuration loader for city generation.

Reads the packaged ``default.yaml`` and, optionally, a user YAML file whose
values are merged over the defaults.
"""
from pathlib import Path

import yaml

_MISSING = object()


class Config:
    """Configuration manager.

    Values are looked up through dot-notation paths such as ``'city.seed'``.
    """
    def __init__(self, path: str = None):
        """Load the default config and merge an optional user config over it.

        Args:
            path: Optional path to a user config file.

        Raises:
            FileNotFoundError: If the user config path does not exist.
            PermissionError: If a config file cannot be read.
        """
        default_path = Path(__file__).parent / 'default.yaml'
        self.default_config = self._load(default_path)

        if path is not None:
            user_path = Path(path)
            if not user_path.exists():
                raise FileNotFoundError(f'Config file not found: {user_path}')
            self._merge_dicts(self.default_config, self._load(user_path))

        self.config = self.default_config

    @staticmethod
    def _load(path: Path) -> dict:
        try:
            with open(path, 'r') as f:
                return yaml.safe_load(f) or {}
        except (PermissionError, IOError) as e:
            raise PermissionError(f'Cannot open config file: {path}') from e

    @classmethod
    def from_dict(cls, overrides: dict) -> 'Config':
        """Build a config from the defaults plus an in-memory override dict.

        Args:
            overrides: Nested dictionary merged over the defaults.

        Returns:
            A new Config instance.
        """
        config = cls()
        config._merge_dicts(config.config, overrides)
        return config

    def get(self, key_path: str, default=_MISSING):
        """Get a configuration value by its dot-notation path.

        Args:
            key_path: Dot-notation path, e.g. ``'citygen.quadtree.max_levels'``.
            default: Value returned when the key is missing; may be None.

        Returns:
            The configured value, or ``default`` when the key is missing.

        Raises:
            ValueError: If the key is missing and no default was given.
        """
        value = self.config
        for key in key_path.split('.'):
            if not isinstance(value, dict) or key not in value:
                if default is not _MISSING:
                    return default
                raise ValueError(f'Key {key_path} not found in config')
            value = value[key]
        return value

    def __getitem__(self, key_path: str):
        """Dictionary-style access, e.g. ``config['city.width']``."""
        return self.get(key_path)

    def _merge_dicts(self, base, updates):
        """Recursively merge ``updates`` into ``base`` in place."""
        for k, v in updates.items():
            if isinstance(v, dict) and isinstance(base.get(k), dict):
                self._merge_dicts(base[k], v)
            else:
                base[k] = v
