"""Configuration loader with YAML support and environment variable substitution."""

import copy
import os
import re
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

import yaml

from converters.plugins import default_rules
from logger import LOG_LEVELS
from models import RendererRule

DEFAULT_ARCHIVE_PREFIX = 'zendown-notes'
HEADING_STYLES = ('atx', 'atx_closed', 'underlined')


@dataclass(frozen=True)
class EngineConfig:
    """Immutable export engine settings, built once at startup."""

    archive_prefix: str = DEFAULT_ARCHIVE_PREFIX
    heading_style: str = 'atx'
    bullets: str = '-'
    wrap: bool = False
    wrap_width: int = 80
    show_progress: bool = False
    rules: Tuple[RendererRule, ...] = field(default_factory=default_rules)

    @classmethod
    def from_dict(cls, config: Optional[Dict[str, Any]] = None,
                  rules: Optional[Tuple[RendererRule, ...]] = None) -> 'EngineConfig':
        """Build engine settings from a loaded configuration dictionary."""
        config = config or {}
        return cls(
            archive_prefix=get_nested(config, 'export.archive_prefix', DEFAULT_ARCHIVE_PREFIX),
            heading_style=get_nested(config, 'export.heading_style', 'atx'),
            bullets=get_nested(config, 'export.bullets', '-'),
            wrap=get_nested(config, 'export.wrap', False),
            wrap_width=get_nested(config, 'export.wrap_width', 80),
            show_progress=get_nested(config, 'export.show_progress', False),
            rules=tuple(rules) if rules is not None else default_rules(),
        )

    def markdown_options(self) -> Dict[str, Any]:
        """Options forwarded to the markdown converter."""
        return {
            'heading_style': self.heading_style,
            'bullets': self.bullets,
            'wrap': self.wrap,
            'wrap_width': self.wrap_width,
        }


class ConfigLoader:
    """Handles loading and validation of configuration files."""

    ENV_VAR_PATTERN = re.compile(r'\$\{([A-Za-z_][A-Za-z0-9_]*)\}')

    @classmethod
    def load(cls, config_path: str) -> Dict[str, Any]:
        """
        Load configuration from YAML file with environment variable substitution.

        Args:
            config_path: Path to YAML configuration file

        Returns:
            Parsed configuration dictionary

        Raises:
            FileNotFoundError: If config file doesn't exist
            yaml.YAMLError: If YAML parsing fails
        """
        if not os.path.exists(config_path):
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, 'r', encoding='utf-8') as f:
            config_data = yaml.safe_load(f)

        # An empty file is a valid "all defaults" configuration
        if config_data is None:
            config_data = {}

        if not isinstance(config_data, dict):
            raise ValueError("Configuration file must contain a dictionary")

        config_data = cls._substitute_env_vars_recursive(config_data)

        return config_data

    @classmethod
    def validate(cls, config: Dict[str, Any]) -> None:
        """
        Validate configuration values.

        Args:
            config: Configuration dictionary to validate

        Raises:
            ValueError: If validation fails
        """
        archive_prefix = get_nested(config, 'export.archive_prefix', DEFAULT_ARCHIVE_PREFIX)
        if not isinstance(archive_prefix, str) or not archive_prefix.strip():
            raise ValueError("export.archive_prefix must be a non-empty string")
        if any(char in archive_prefix for char in '/\\'):
            raise ValueError("export.archive_prefix must not contain path separators")

        heading_style = get_nested(config, 'export.heading_style', 'atx')
        if heading_style not in HEADING_STYLES:
            raise ValueError(f"export.heading_style must be one of: {list(HEADING_STYLES)}")

        bullets = get_nested(config, 'export.bullets', '-')
        if not isinstance(bullets, str) or not bullets or any(b not in '*+-' for b in bullets):
            raise ValueError("export.bullets must be a string made of '*', '+' or '-'")

        for flag in ('export.wrap', 'export.show_progress'):
            value = get_nested(config, flag, False)
            if not isinstance(value, bool):
                raise ValueError(f"{flag} must be a boolean")

        wrap_width = get_nested(config, 'export.wrap_width', 80)
        if not isinstance(wrap_width, int) or isinstance(wrap_width, bool) or wrap_width < 1:
            raise ValueError("export.wrap_width must be a positive integer")

        level = get_nested(config, 'logging.level')
        if level is not None and str(level).upper() not in LOG_LEVELS:
            raise ValueError(f"logging.level must be one of: {list(LOG_LEVELS)}")

    @classmethod
    def merge_with_args(cls, config: Dict[str, Any], args) -> Dict[str, Any]:
        """
        Merge configuration file with CLI arguments.
        CLI arguments take precedence over config file values.

        Args:
            config: Base configuration dictionary
            args: CLI arguments with attributes matching config keys

        Returns:
            Merged configuration dictionary
        """
        merged = copy.deepcopy(config)

        if 'export' not in merged:
            merged['export'] = {}
        if 'logging' not in merged:
            merged['logging'] = {}

        if getattr(args, 'archive_prefix', None):
            merged['export']['archive_prefix'] = args.archive_prefix

        if getattr(args, 'progress', None) is not None:
            merged['export']['show_progress'] = args.progress

        if getattr(args, 'log_file', None):
            merged['logging']['file'] = args.log_file

        if getattr(args, 'log_level', None):
            merged['logging']['level'] = args.log_level

        return merged

    @classmethod
    def _substitute_env_vars_recursive(cls, data: Any) -> Any:
        """Recursively substitute environment variables in data structure."""
        if isinstance(data, dict):
            return {key: cls._substitute_env_vars_recursive(value) for key, value in data.items()}
        elif isinstance(data, list):
            return [cls._substitute_env_vars_recursive(item) for item in data]
        elif isinstance(data, str):
            return cls._substitute_env_vars(data)
        else:
            return data

    @classmethod
    def _substitute_env_vars(cls, value: str) -> str:
        """Substitute environment variables in a string value."""
        def replace_match(match):
            var_name = match.group(1)
            env_value = os.getenv(var_name)
            return env_value if env_value is not None else match.group(0)

        return cls.ENV_VAR_PATTERN.sub(replace_match, value)


def get_nested(config: dict, path: str, default: Any = None) -> Any:
    """Safely retrieve nested configuration values using dot notation.

    Args:
        config: Configuration dictionary
        path: Dot-separated path (e.g., "export.archive_prefix")
        default: Default value if path doesn't exist

    Returns:
        Value at the nested path or default
    """
    keys = path.split('.')
    value = config

    for key in keys:
        if isinstance(value, dict) and key in value:
            value = value[key]
        else:
            return default

    return value


__all__ = ['ConfigLoader', 'EngineConfig', 'get_nested', 'DEFAULT_ARCHIVE_PREFIX']
