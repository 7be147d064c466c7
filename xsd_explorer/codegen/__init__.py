"""
XSD Explorer Code Generation Module

Generates type declarations in various languages from parsed XSD schemas.
"""

from .registry import (
    GeneratorRegistry,
    RegistryError,
    get_generator,
    get_registry,
    list_supported_languages,
)
from .core.generator import CodeGenerator, GenerationResult, generate_code
from .core.schema import SchemaDocument
from .core.config import GeneratorConfig, ConfigManager, load_config
from .dispatch import HandlerRegistry, call_by_name, handler_name, hook_name


def generate(document, language="go", config=None):
    """
    Generate code for a schema document.

    Args:
        document: SchemaDocument or sequence of schema nodes
        language: Target language name or alias
        config: Generator configuration dict, GeneratorConfig or file path

    Returns:
        GenerationResult with generated code
    """
    if not isinstance(document, SchemaDocument):
        document = SchemaDocument(document)

    generator = get_generator(language, config)
    return generate_code(generator, document)


__all__ = [
    "GeneratorRegistry",
    "RegistryError",
    "CodeGenerator",
    "GenerationResult",
    "GeneratorConfig",
    "ConfigManager",
    "HandlerRegistry",
    "SchemaDocument",
    "call_by_name",
    "generate",
    "generate_code",
    "get_generator",
    "get_registry",
    "handler_name",
    "hook_name",
    "list_supported_languages",
    "load_config",
]
