"""Configuration management."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Dict, Any
import os

import yaml

from link_colors.core.hashing import HashMode
from link_colors.core.logging_utils import get_logger
from link_colors.core.palettes import DEFAULT_PALETTE


_TRUE_VALUES = {'1', 'true', 'yes', 'on'}


class Config:
    """Configuration manager."""

    def __init__(self, config_file: Optional[Path] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to YAML config file (optional)
        """
        self.config = self._load_defaults()

        if config_file and config_file.exists():
            self.load_from_file(config_file)

        # Override with environment variables
        self._load_from_env()

    def _load_defaults(self) -> Dict[str, Any]:
        """Load default configuration."""
        return {
            'palette': DEFAULT_PALETTE,
            'ignore_prefix': True,
            'hash_mode': HashMode.STRICT_FULL.value,
            'underline_variants': False,
            'display': {
                'dark_mode': True,
            },
            'output': {
                'format': 'json',
            },
        }

    def load_from_file(self, config_file: Path) -> None:
        """Load configuration from YAML file."""
        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                file_config = yaml.safe_load(f)
                if isinstance(file_config, dict):
                    self._merge_config(self.config, file_config)
        except (OSError, yaml.YAMLError) as e:
            get_logger().warning(f"Could not load config file {config_file}: {e}")

    def _merge_config(self, base: Dict, override: Dict) -> None:
        """Recursively merge configuration dictionaries."""
        for key, value in override.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._merge_config(base[key], value)
            else:
                base[key] = value

    def _load_from_env(self) -> None:
        """Load configuration from environment variables."""
        env_mappings = {
            'LINKCOLOR_PALETTE': (('palette',), str),
            'LINKCOLOR_HASH_MODE': (('hash_mode',), str),
            'LINKCOLOR_IGNORE_PREFIX': (('ignore_prefix',), _parse_bool),
            'LINKCOLOR_UNDERLINE_VARIANTS': (('underline_variants',), _parse_bool),
            'LINKCOLOR_DARK_MODE': (('display', 'dark_mode'), _parse_bool),
        }

        for env_var, (config_path, convert) in env_mappings.items():
            value = os.getenv(env_var)
            if value:
                self._set_nested(self.config, config_path, convert(value))

    def _set_nested(self, config: Dict, path: tuple, value: Any) -> None:
        """Set nested configuration value."""
        for key in path[:-1]:
            if key not in config:
                config[key] = {}
            config = config[key]
        config[path[-1]] = value

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value."""
        keys = key.split('.')
        value = self.config
        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        return value

    def set(self, key: str, value: Any) -> None:
        """Set configuration value."""
        keys = key.split('.')
        self._set_nested(self.config, tuple(keys), value)


def _parse_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in _TRUE_VALUES


@dataclass(frozen=True)
class Settings:
    """Coloring settings owned by the host and read-only to the engine.

    Attributes:
        palette: Registered palette name (unknown names fall back to the default).
        ignore_prefix: Color "Char - Pamela" by "Pamela" only.
        hash_mode: Hash strategy used to pick the base palette slot.
        underline_variants: Attach an underline style as an extra cue.
    """

    palette: str = DEFAULT_PALETTE
    ignore_prefix: bool = True
    hash_mode: HashMode = HashMode.STRICT_FULL
    underline_variants: bool = False

    def __post_init__(self):
        try:
            mode = HashMode(self.hash_mode)
        except ValueError:
            valid = ", ".join(m.value for m in HashMode)
            raise ValueError(
                f"Unknown hash mode: {self.hash_mode!r} (expected one of: {valid})"
            ) from None
        object.__setattr__(self, 'hash_mode', mode)

    @classmethod
    def from_config(cls, cfg: Config) -> "Settings":
        """Build settings from a loaded configuration."""
        return cls(
            palette=str(cfg.get('palette', DEFAULT_PALETTE)),
            ignore_prefix=_parse_bool(cfg.get('ignore_prefix', True)),
            hash_mode=cfg.get('hash_mode', HashMode.STRICT_FULL.value),
            underline_variants=_parse_bool(cfg.get('underline_variants', False)),
        )


def load_config(config_file: Optional[Path] = None) -> Config:
    """
    Load configuration.

    Args:
        config_file: Path to config file (optional)

    Returns:
        Config instance
    """
    return Config(config_file)
