"""
Core code generation components.

Provides the schema model, type resolution and naming utilities, and the
base classes used by all language generators.
"""

from .config import GeneratorConfig, ConfigManager, ConfigError, load_config
from .schema import (
    Attribute,
    AttributeGroup,
    ComplexType,
    Element,
    Group,
    NodeKind,
    Restriction,
    SchemaDocument,
    SimpleType,
)
from .builtins import BUILTIN_TYPES, SUPPORTED_LANGUAGES, get_builtin_type, is_builtin_type
from .qname import get_ns_prefix, trim_ns_prefix
from .naming import (
    FieldNameCounter,
    NameSanitizer,
    NamingCase,
    gen_field_comment,
    make_first_lower_case,
    make_first_upper_case,
    to_snake_case,
)
from .ordering import to_sorted_pairs
from .resolver import (
    ResolvedType,
    ShapeKind,
    flatten_alias,
    resolve_base_of_simple_type,
    resolve_type,
)
from .templates import TemplateEngine, TemplateError, create_template_engine
from .generator import (
    CodeGenerator,
    GeneratorError,
    GenerationResult,
    NodeFailure,
    generate_code,
)

__all__ = [
    # Base generator interface
    "CodeGenerator",
    "GeneratorError",
    "GenerationResult",
    "NodeFailure",
    "generate_code",
    # Schema model
    "Attribute",
    "AttributeGroup",
    "ComplexType",
    "Element",
    "Group",
    "NodeKind",
    "Restriction",
    "SchemaDocument",
    "SimpleType",
    # Built-in types and type resolution
    "BUILTIN_TYPES",
    "SUPPORTED_LANGUAGES",
    "get_builtin_type",
    "is_builtin_type",
    "ResolvedType",
    "ShapeKind",
    "flatten_alias",
    "resolve_base_of_simple_type",
    "resolve_type",
    # Naming utilities - language-agnostic
    "get_ns_prefix",
    "trim_ns_prefix",
    "FieldNameCounter",
    "NameSanitizer",
    "NamingCase",
    "gen_field_comment",
    "make_first_lower_case",
    "make_first_upper_case",
    "to_snake_case",
    "to_sorted_pairs",
    # Configuration system
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Template system - language-agnostic
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
