"""
Configuration management for code generation.

Handles loading and merging configuration from JSON files,
providing defaults and validation for generator settings.
"""

import copy
import json
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Dict, Any, List, Optional, Union

from so_creator.logging_config import get_logger

logger = get_logger(__name__)


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""

    pass


@dataclass
class GeneratorConfig:
    """Base configuration for code generators."""

    # Output settings
    output_file: Optional[str] = None

    # Preamble and class header
    usings: List[str] = field(default_factory=lambda: ["UnityEngine"])
    base_class: Optional[str] = None
    class_visibility: str = "public"

    # Code style settings
    use_tabs: bool = True
    indent_size: int = 4
    line_ending: str = "\n"

    # Diagnostics
    report_skipped: bool = True
    detect_duplicates: bool = True

    # Custom settings (language-specific)
    language_config: Dict[str, Any] = field(default_factory=dict)

    @property
    def indent(self) -> str:
        """One indentation unit."""
        return "\t" if self.use_tabs else " " * self.indent_size

    def to_dict(self) -> Dict[str, Any]:
        """Flatten to a JSON-friendly dict; language settings are inlined."""
        data = asdict(self)
        data.update(data.pop("language_config"))
        return data


# Named bundles of overrides
PRESETS: Dict[str, Dict[str, Any]] = {
    "unity": {},
    "scriptable_object": {"usings": ["UnityEngine"], "base_class": "ScriptableObject"},
    "plain": {"usings": [], "base_class": None},
}

VALID_VISIBILITIES = {"public", "internal"}
VALID_LINE_ENDINGS = {"\n", "\r\n"}


class ConfigManager:
    """Manages configuration loading and merging."""

    def __init__(self):
        """Initialize configuration manager."""
        self._configs: Dict[str, Dict[str, Any]] = {}
        self._load_defaults()

    def _load_defaults(self):
        """Load default configurations for supported languages."""
        self._configs["csharp"] = {
            "usings": ["UnityEngine"],
            "base_class": None,
            "class_visibility": "public",
            "use_tabs": True,
            "line_ending": "\n",
        }

    def get_config(
        self,
        language: str = "csharp",
        custom_config: Optional[Dict[str, Any]] = None,
        config_file: Optional[Union[str, Path]] = None,
        preset: Optional[str] = None,
    ) -> GeneratorConfig:
        """
        Get complete configuration for a language.

        Merge order: language defaults, preset, config file, custom overrides.

        Args:
            language: Target language name
            custom_config: Custom configuration overrides
            config_file: Path to JSON configuration file
            preset: Name of a preset from PRESETS

        Returns:
            Merged configuration for the language
        """
        base_config = copy.deepcopy(self._configs.get(language, {}))

        if preset:
            if preset not in PRESETS:
                raise ConfigError(
                    f"Unknown preset: {preset}. Available: {', '.join(sorted(PRESETS))}"
                )
            base_config.update(copy.deepcopy(PRESETS[preset]))

        if config_file:
            base_config.update(self._load_config_file(config_file))

        if custom_config:
            base_config.update(custom_config)

        return self._dict_to_config(base_config)

    def _load_config_file(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """Load configuration from JSON file."""
        path = Path(config_path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        if path.suffix.lower() != ".json":
            raise ConfigError(f"Configuration file must be JSON: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in configuration file {path}: {e}") from e
        except UnicodeDecodeError as e:
            raise ConfigError(f"Configuration file {path} is not valid UTF-8: {e}") from e
        except OSError as e:
            raise ConfigError(f"Failed to load configuration file {path}: {e}") from e

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")

        logger.debug("Loaded configuration file %s", path)
        return config

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> GeneratorConfig:
        """Convert dictionary to GeneratorConfig instance."""
        known_fields = {f.name for f in fields(GeneratorConfig)}

        config_args = {}
        custom_args = {}

        for key, value in config_dict.items():
            if key in known_fields:
                config_args[key] = value
            else:
                custom_args[key] = value

        if "usings" in config_args:
            if config_args["usings"] is None:
                config_args["usings"] = []
            elif isinstance(config_args["usings"], str):
                config_args["usings"] = [config_args["usings"]]

        # Unknown keys go into language_config
        if custom_args:
            existing_custom = dict(config_args.get("language_config") or {})
            existing_custom.update(custom_args)
            config_args["language_config"] = existing_custom

        return GeneratorConfig(**config_args)

    def save_config(self, config: GeneratorConfig, output_path: Union[str, Path]):
        """Save configuration to JSON file."""
        path = Path(output_path)

        try:
            with open(path, "w", encoding="utf-8") as f:
                json.dump(config.to_dict(), f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise ConfigError(f"Failed to save configuration to {path}: {e}") from e

        logger.info("Configuration saved to %s", path)

    def list_languages(self) -> list[str]:
        """Get list of languages with default configurations."""
        return list(self._configs.keys())

    def validate_config(self, config: GeneratorConfig) -> list[str]:
        """
        Validate configuration.

        Returns:
            List of validation warnings
        """
        warnings = []

        if config.class_visibility not in VALID_VISIBILITIES:
            warnings.append(f"Invalid class_visibility: {config.class_visibility}")

        if config.line_ending not in VALID_LINE_ENDINGS:
            warnings.append(f"Invalid line_ending: {config.line_ending!r}")

        if not config.use_tabs and config.indent_size < 1:
            warnings.append(f"Invalid indent_size: {config.indent_size}")

        for namespace in config.usings:
            parts = namespace.split(".") if isinstance(namespace, str) else [None]
            if not all(isinstance(p, str) and p.isidentifier() for p in parts):
                warnings.append(f"Invalid using namespace: {namespace}")

        if config.base_class is not None and not config.base_class.isidentifier():
            warnings.append(f"Invalid base_class: {config.base_class}")

        return warnings


# Global configuration manager instance
_config_manager = None


def get_config_manager() -> ConfigManager:
    """Get the global configuration manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def load_config(
    language: str = "csharp",
    custom_config: Optional[Dict[str, Any]] = None,
    config_file: Optional[Union[str, Path]] = None,
    preset: Optional[str] = None,
) -> GeneratorConfig:
    """
    Convenience function to load configuration.

    Args:
        language: Target language name
        custom_config: Custom configuration overrides
        config_file: Path to JSON configuration file
        preset: Preset name

    Returns:
        Merged configuration for the language
    """
    return get_config_manager().get_config(language, custom_config, config_file, preset)
