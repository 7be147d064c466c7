"""
Language generator registry.

Maps language names and their aliases to CodeGenerator subclasses, and
builds configured generator instances with the language defaults applied.
"""

from dataclasses import dataclass, field
from importlib import import_module
from pathlib import Path
from typing import Dict, Type, Optional, Any, List, Union

from ..logging_config import get_logger
from .core.config import GeneratorConfig, load_config
from .core.generator import CodeGenerator
from .core.schema import NodeKind
from .dispatch import find_hook, hook_name

logger = get_logger(__name__)

ConfigSource = Union[GeneratorConfig, Dict[str, Any], str, Path]

# language, module under codegen.languages, class name, aliases
BUILTIN_GENERATORS = (
    ("go", "go", "GoGenerator", ["golang"]),
    ("typescript", "typescript", "TypeScriptGenerator", ["ts"]),
    ("c", "c", "CGenerator", []),
    ("java", "java", "JavaGenerator", []),
    ("rust", "rust", "RustGenerator", ["rs"]),
)


class RegistryError(Exception):
    """Exception raised for registry-related errors."""

    pass


@dataclass
class LanguageEntry:
    """A registered language and the names it answers to."""

    language: str
    generator_class: Type[CodeGenerator]
    aliases: List[str] = field(default_factory=list)

    @property
    def names(self) -> List[str]:
        return [self.language] + self.aliases


class GeneratorRegistry:
    """Registry of code generators keyed by lowercase language name."""

    def __init__(self):
        self._entries: Dict[str, LanguageEntry] = {}
        # Every known name, primary or alias, to its primary language
        self._names: Dict[str, str] = {}

    def register(
        self,
        language: str,
        generator_class: Type[CodeGenerator],
        aliases: Optional[List[str]] = None,
        replace: bool = False,
    ):
        """
        Register a generator for a language.

        Args:
            language: Primary language name (e.g., 'go', 'rust')
            generator_class: CodeGenerator subclass
            aliases: Alternative names for this language
            replace: Replace an existing registration instead of keeping it

        Raises:
            RegistryError: If the class is not a CodeGenerator or an alias
                is already taken
        """
        if not isinstance(generator_class, type) or not issubclass(generator_class, CodeGenerator):
            raise RegistryError("Generator class must inherit from CodeGenerator")

        key = language.lower()
        previous = self._entries.get(key)
        if previous is not None and not replace:
            logger.debug(f"Generator for '{key}' already registered")
            return

        alias_keys = list(previous.aliases) if previous else []
        for alias in aliases or []:
            alias_key = alias.lower()
            if alias_key == key or alias_key in alias_keys:
                continue
            if alias_key in self._entries:
                raise RegistryError(f"Alias '{alias}' conflicts with existing primary language")
            owner = self._names.get(alias_key)
            if owner is not None and owner != key and not replace:
                raise RegistryError(f"Alias '{alias}' already points to '{owner}'")
            alias_keys.append(alias_key)

        self._entries[key] = LanguageEntry(key, generator_class, sorted(alias_keys))
        for name in [key] + alias_keys:
            self._names[name] = key

    def unregister(self, language: str):
        """Remove a language together with its aliases."""
        key = self._primary(language)
        self._entries.pop(key, None)
        self._names = {name: target for name, target in self._names.items() if target != key}

    def _primary(self, language: str) -> str:
        name = language.lower()
        return self._names.get(name, name)

    def _entry(self, language: str) -> LanguageEntry:
        entry = self._entries.get(self._primary(language))
        if entry is None:
            raise RegistryError(
                f"No generator registered for language: {language}. "
                f"Available: {', '.join(self.list_languages())}"
            )
        return entry

    def get_generator_class(self, language: str) -> Type[CodeGenerator]:
        """Generator class for a language name or alias."""
        return self._entry(language).generator_class

    def create_generator(self, language: str, config: Optional[ConfigSource] = None) -> CodeGenerator:
        """
        Create a configured generator.

        A GeneratorConfig is used as is; a dict or a config file path is
        layered over the language defaults.

        Raises:
            RegistryError: If the language is unknown, the config is of an
                unsupported type, or the generator cannot be constructed
        """
        entry = self._entry(language)

        if isinstance(config, GeneratorConfig):
            final_config = config
        elif isinstance(config, (str, Path)):
            final_config = load_config(entry.language, config_file=config)
        elif isinstance(config, dict):
            final_config = load_config(entry.language, custom_config=config)
        elif config is None:
            final_config = load_config(entry.language)
        else:
            raise RegistryError(f"Invalid config type: {type(config)}")

        try:
            return entry.generator_class(final_config)
        except Exception as e:
            raise RegistryError(f"Failed to create {language} generator: {e}") from e

    def list_languages(self) -> List[str]:
        return sorted(self._entries)

    def get_aliases_for_language(self, language: str) -> List[str]:
        entry = self._entries.get(self._primary(language))
        return list(entry.aliases) if entry else []

    def list_all_names(self) -> Dict[str, List[str]]:
        """Map each primary language to all of its names, aliases included."""
        return {key: entry.names for key, entry in self._entries.items()}

    def is_supported(self, language: str) -> bool:
        return self._primary(language) in self._entries

    def get_language_info(self, language: str) -> Dict[str, Any]:
        """
        Describe a registered language.

        ``node_kinds`` lists the node kinds the generator has a hook for;
        nodes of other kinds are skipped during generation.
        """
        entry = self._entry(language)
        generator = self.create_generator(entry.language)

        return {
            "name": generator.language_name,
            "class": entry.generator_class.__name__,
            "file_extension": generator.file_extension,
            "aliases": list(entry.aliases),
            "module": entry.generator_class.__module__,
            "node_kinds": [
                kind.value
                for kind in NodeKind
                if find_hook(generator, hook_name(kind)) is not None
            ],
        }


_global_registry: Optional[GeneratorRegistry] = None


def get_registry() -> GeneratorRegistry:
    """Get the global generator registry, initializing if needed."""
    global _global_registry
    if _global_registry is None:
        _global_registry = GeneratorRegistry()
        _auto_register_generators(_global_registry)
    return _global_registry


def _auto_register_generators(registry: GeneratorRegistry):
    """Register the generators shipped with the package."""
    # Imported here; the language modules import the core package
    for language, module_name, class_name, aliases in BUILTIN_GENERATORS:
        module = import_module(f"{__package__}.languages.{module_name}")
        registry.register(language, getattr(module, class_name), aliases=aliases)


def register_generator(
    language: str,
    generator_class: Type[CodeGenerator],
    aliases: Optional[List[str]] = None,
):
    """Register a generator in the global registry."""
    get_registry().register(language, generator_class, aliases)


def get_generator(language: str, config: Optional[ConfigSource] = None) -> CodeGenerator:
    """
    Create a generator from the global registry.

    Args:
        language: Language name or alias
        config: GeneratorConfig, override dict, or JSON config file path

    Returns:
        Generator instance
    """
    return get_registry().create_generator(language, config)


def list_supported_languages() -> List[str]:
    return get_registry().list_languages()


def is_language_supported(language: str) -> bool:
    return get_registry().is_supported(language)


def get_language_info(language: str) -> Dict[str, Any]:
    """Describe a language from the global registry."""
    return get_registry().get_language_info(language)
