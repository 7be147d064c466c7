"""
Generator settings.

A language starts from its entry in LANGUAGE_DEFAULTS; a JSON file and then
explicit overrides are layered on top. Keys that are not GeneratorConfig
fields are kept in ``custom`` for the language generator to read.
"""

import copy
import json
from pathlib import Path
from typing import Dict, Any, List, Optional, Union
from dataclasses import asdict, dataclass, field, fields


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""
    pass


VALID_CASES = {"pascal", "camel", "snake", "screaming_snake", "original"}

# Package clauses are only meaningful for these targets
PACKAGED_LANGUAGES = {"go", "java"}

LANGUAGE_DEFAULTS: Dict[str, Dict[str, Any]] = {
    "go": {
        "package_name": "schema",
        "field_case": "pascal",
        "custom": {"use_tabs": True},
    },
    "typescript": {
        "package_name": "",
        "field_case": "original",
    },
    "c": {
        "package_name": "",
        "field_case": "snake",
    },
    "java": {
        "package_name": "schema",
        "field_case": "camel",
    },
    "rust": {
        "package_name": "",
        "field_case": "snake",
        "custom": {"derives": ["Debug", "Clone", "PartialEq"]},
    },
}


@dataclass
class GeneratorConfig:
    """Settings shared by every language generator."""

    # Output
    output_file: Optional[str] = None
    package_name: str = "schema"

    # Layout
    indent_size: int = 4
    line_ending: str = "\n"

    # Identifier cases: pascal, camel, snake, screaming_snake, original
    type_case: str = "pascal"
    field_case: str = "pascal"

    add_comments: bool = True

    # Directory whose templates replace the built-in ones of the same name
    template_dir: Optional[str] = None

    # Stop the run at the first node that fails to generate
    fail_fast: bool = False

    custom: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, settings: Dict[str, Any]) -> "GeneratorConfig":
        """Build a config, moving unknown keys into ``custom``."""
        known = {f.name for f in fields(cls)}
        kwargs = {key: value for key, value in settings.items() if key in known}
        extra = {key: value for key, value in settings.items() if key not in known}
        if extra:
            kwargs["custom"] = {**kwargs.get("custom", {}), **extra}
        return cls(**kwargs)

    def to_mapping(self) -> Dict[str, Any]:
        """Flat dict form, with ``custom`` entries at the top level."""
        settings = asdict(self)
        settings.update(settings.pop("custom"))
        return settings

    def problems(self, language: str) -> List[str]:
        """Describe settings that will not produce sensible output."""
        found = []
        for attr in ("type_case", "field_case"):
            value = getattr(self, attr)
            if value not in VALID_CASES:
                found.append(f"Invalid {attr}: {value}")

        if self.indent_size < 0:
            found.append(f"Invalid indent_size: {self.indent_size}")

        if self.template_dir and not Path(self.template_dir).is_dir():
            found.append(f"Template directory not found: {self.template_dir}")

        language = language.lower()
        if language in PACKAGED_LANGUAGES:
            parts = self.package_name.split(".") if self.package_name else []
            if not parts or not all(part.isidentifier() for part in parts):
                found.append(f"Invalid {language} package name: {self.package_name}")
        return found


def merge_settings(target: Dict[str, Any], overrides: Dict[str, Any]):
    """Apply overrides in place; the nested ``custom`` dicts are combined."""
    for key, value in overrides.items():
        if key == "custom" and isinstance(value, dict):
            target.setdefault("custom", {}).update(value)
        else:
            target[key] = value


def read_config_file(config_path: Union[str, Path]) -> Dict[str, Any]:
    """
    Read settings from a JSON file.

    Raises:
        ConfigError: If the file is missing, not JSON, or not a JSON object
    """
    path = Path(config_path)
    if not path.exists():
        raise ConfigError(f"Configuration file not found: {path}")
    if path.suffix.lower() != ".json":
        raise ConfigError(f"Configuration file must be JSON: {path}")

    try:
        settings = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in configuration file {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to load configuration file {path}: {e}") from e

    if not isinstance(settings, dict):
        raise ConfigError(f"Configuration file must contain a JSON object: {path}")
    return settings


class ConfigManager:
    """Resolves the effective configuration for a language."""

    def __init__(self, defaults: Optional[Dict[str, Dict[str, Any]]] = None):
        self._defaults = copy.deepcopy(LANGUAGE_DEFAULTS if defaults is None else defaults)

    def get_config(self, language: Optional[str] = None,
                   custom_config: Optional[Dict[str, Any]] = None,
                   config_file: Optional[Union[str, Path]] = None) -> GeneratorConfig:
        """
        Layer defaults, file and overrides for a language.

        Args:
            language: Target language name (None for bare defaults)
            custom_config: Explicit overrides, applied last
            config_file: Path to a JSON configuration file

        Returns:
            Merged configuration
        """
        settings = copy.deepcopy(self._defaults.get((language or "").lower(), {}))
        if config_file:
            merge_settings(settings, read_config_file(config_file))
        if custom_config:
            merge_settings(settings, custom_config)
        return GeneratorConfig.from_mapping(settings)

    def save_config(self, config: GeneratorConfig, output_path: Union[str, Path]):
        """Write a configuration as a flat JSON object."""
        path = Path(output_path)
        try:
            path.write_text(
                json.dumps(config.to_mapping(), indent=2, ensure_ascii=False),
                encoding="utf-8",
            )
        except OSError as e:
            raise ConfigError(f"Failed to save configuration to {path}: {e}") from e

    def list_languages(self) -> List[str]:
        return list(self._defaults)

    def validate_config(self, config: GeneratorConfig, language: str) -> List[str]:
        """Return warnings for a configuration; empty when it is usable."""
        return config.problems(language)


_config_manager = None


def get_config_manager() -> ConfigManager:
    """Get the shared configuration manager."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def load_config(language: Optional[str] = None,
                custom_config: Optional[Dict[str, Any]] = None,
                config_file: Optional[Union[str, Path]] = None) -> GeneratorConfig:
    """Shortcut for ``get_config_manager().get_config(...)``."""
    return get_config_manager().get_config(language, custom_config, config_file)
