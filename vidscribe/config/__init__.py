"""Simple YAML configuration loader for vidscribe."""

import os
import copy
import yaml
from pathlib import Path
from typing import Dict, Any, Optional
import logging

logger = logging.getLogger(__name__)


DEFAULT_CONFIG: Dict[str, Any] = {
    "logging": {
        "level": "INFO",
        "file_path": "data/logs/vidscribe.log",
        "console_output": True,
    },
    "recognition": {
        "language": "en-US",
        "continuous": True,
        "interim_results": True,
    },
    "media": {
        "default_mime_type": "video/webm",
    },
    "export": {
        "directory": "data/exports",
        "base_filename": "recording",
    },
}


class VidscribeConfig:
    """vidscribe configuration loader."""

    def __init__(self, config_path: Optional[str] = None):
        """Initialize configuration loader.

        Args:
            config_path: Path to YAML config file. If None, built-in defaults
                        are used with paths relative to the working directory.
        """
        if config_path is None:
            self.config_file: Optional[Path] = None
            logger.info("No configuration file given, using defaults")
            self.config = copy.deepcopy(DEFAULT_CONFIG)
            return

        self.config_file = Path(config_path)

        if not self.config_file.exists():
            raise FileNotFoundError(f"Configuration file not found: {self.config_file}")

        logger.info(f"Loading configuration from: {self.config_file}")
        self.config = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        """Load and parse YAML configuration file over the defaults."""
        try:
            with open(self.config_file, 'r', encoding='utf-8') as f:
                loaded = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in configuration file: {e}")

        if not loaded:
            raise ValueError("Configuration file is empty")
        if not isinstance(loaded, dict):
            raise ValueError("Configuration file must contain a mapping")

        config = _merge(copy.deepcopy(DEFAULT_CONFIG), loaded)

        # Resolve relative paths
        self._resolve_paths(config)

        logger.info("Configuration loaded successfully")
        return config

    def _resolve_paths(self, config: Dict[str, Any]) -> None:
        """Resolve relative paths in configuration relative to config file location."""
        config_dir = self.config_file.parent

        # Resolve export directory
        if 'export' in config and 'directory' in config['export']:
            export_dir = config['export']['directory']
            if not os.path.isabs(export_dir):
                config['export']['directory'] = str(config_dir / export_dir)

        # Resolve log file path
        if 'logging' in config and 'file_path' in config['logging']:
            log_path = config['logging']['file_path']
            if not os.path.isabs(log_path):
                config['logging']['file_path'] = str(config_dir / log_path)

    def get(self, key_path: str, default: Any = None) -> Any:
        """Look up a dotted key such as 'export.base_filename'.

        Returns ``default`` when any section along the path is missing or is
        not a mapping.
        """
        value: Any = self.config
        for key in key_path.split('.'):
            if not isinstance(value, dict) or key not in value:
                return default
            value = value[key]
        return value

    def set(self, key_path: str, value: Any) -> None:
        """Assign a dotted key such as 'recognition.language'.

        Missing sections are created.

        Raises:
            ValueError: If the path runs through a value that is not a section
        """
        *sections, leaf = key_path.split('.')
        section = self.config
        for key in sections:
            section = section.setdefault(key, {})
            if not isinstance(section, dict):
                raise ValueError(f"Configuration key '{key}' in '{key_path}' is not a section")
        section[leaf] = value
        logger.debug(f"Configuration key '{key_path}' set to: {value}")

    def get_export_directory(self) -> str:
        """Get export directory path."""
        export_dir = self.get('export.directory', 'data/exports')
        return str(Path(export_dir).absolute())


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge ``override`` into ``base``."""
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _merge(base[key], value)
        else:
            base[key] = value
    return base
