"""
Base generator interface for all code generation targets.

Defines the contract that all language generators must implement and the
driver that walks a schema document, dispatching each node to the
generator's ``gen_<kind>`` hook.
"""

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, List, Any, Optional, Set, Tuple

from ...logging_config import get_logger
from ..dispatch import call_by_name, handler_name
from .builtins import language_index
from .config import ConfigError, GeneratorConfig, load_config
from .naming import FieldNameCounter, NameSanitizer, NamingCase, gen_field_comment
from .qname import trim_ns_prefix
from .resolver import ResolvedType, ShapeKind, resolve_type
from .schema import (
    Attribute,
    Element,
    NodeKind,
    Restriction,
    SchemaDocument,
    SchemaNode,
    SimpleType,
)
from .templates import TemplateEngine, create_template_engine

logger = get_logger(__name__)

# Shapes that have a declaration of their own in the generated file
DECLARED_SHAPES = (ShapeKind.RESTRICTED, ShapeKind.LIST, ShapeKind.UNION, ShapeKind.STRUCTURE)


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class CodeGenerator(ABC):
    """Abstract base class for all code generators."""

    # Comment marker used for generated documentation
    comment_prefix = "//"

    # Words the target language will not accept as identifiers
    reserved_words: Set[str] = set()

    # In-memory templates: name -> Jinja2 source
    templates: Dict[str, str] = {}

    # Type spellings whose literals are written unquoted
    numeric_types: Set[str] = set()

    # Case of enumeration member identifiers
    enum_case = NamingCase.PASCAL_CASE

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize generator with optional configuration."""
        # Fails with ConfigError for a language outside the built-in table
        language_index(self.language_name)

        self.config = config or load_config(self.language_name)
        self.sanitizer = self.create_sanitizer()
        self.field_counter = FieldNameCounter()
        self.document = SchemaDocument()
        self._template_engine = None
        self._setup_templates()

    def create_sanitizer(self) -> NameSanitizer:
        """Name sanitizer aware of the target language's reserved words."""
        return NameSanitizer(self.reserved_words)

    def _setup_templates(self):
        """Build the template engine from this generator's templates."""
        self._template_engine = create_template_engine(self.templates, self.config.template_dir)

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the target language as spelled in SUPPORTED_LANGUAGES."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.go')."""
        pass

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator."""
        if self._template_engine is None:
            self._setup_templates()
        return self._template_engine

    # Run lifecycle

    def begin_run(self, document: SchemaDocument):
        """Start a generation run with a fresh field name counter."""
        self.document = document
        self.field_counter = FieldNameCounter()

    def assemble(self, fragments: List[str]) -> str:
        """
        Join rendered fragments into a complete source file.

        Args:
            fragments: Output of the gen_* hooks, in document order

        Returns:
            Complete file content
        """
        parts = []
        header = self.render_header()
        if header:
            parts.append(header.rstrip("\n"))
        parts.extend(fragment.strip("\n") for fragment in fragments)
        return "\n\n".join(parts) + "\n"

    def render_header(self) -> str:
        """Package declaration, imports or includes; empty by default."""
        return ""

    # Helpers shared by the gen_* hooks

    def resolve(self, type_name: str) -> ResolvedType:
        """Resolve a schema type name for this generator's language."""
        return resolve_type(type_name, self.document, self.language_name)

    def type_name(self, name: str) -> str:
        """Identifier for a declared type."""
        return self.sanitizer.sanitize_name(name, NamingCase(self.config.type_case))

    def declaration_name(self, name: str) -> str:
        """Identifier for a top-level declaration, unique within the run."""
        return self.field_counter.unique(self.type_name(name))

    def field_name(self, name: str, counter: Optional[FieldNameCounter] = None) -> str:
        """Identifier for a struct field, unique within ``counter`` if given."""
        field_name = self.sanitizer.sanitize_name(name, NamingCase(self.config.field_case))
        if counter is not None:
            field_name = counter.unique(field_name)
        return field_name

    def spell(self, resolved: ResolvedType) -> str:
        """Language spelling of a resolved type."""
        if resolved.kind == ShapeKind.PRIMITIVE:
            return resolved.spelling
        return self.type_name(resolved.name)

    def type_spelling(self, type_name: str, plural: bool = False) -> str:
        """Spell a referenced type, wrapping it in the language's list type."""
        spelling = self.spell(self.resolve(type_name))
        if plural:
            return self.list_of(spelling)
        return spelling

    def list_of(self, spelling: str) -> str:
        """Spell a list of ``spelling``."""
        return f"{spelling}[]"

    def field_type(self, declaration) -> str:
        """Type of a struct field; anonymous types are named after the field."""
        return self.type_spelling(declaration.type or declaration.name, declaration.plural)

    def field_data(self, declaration, counter: FieldNameCounter, attribute: bool) -> Dict[str, Any]:
        """Template context for one element or attribute field."""
        return {
            "name": self.field_name(declaration.name, counter),
            "original_name": trim_ns_prefix(declaration.name),
            "type": self.field_type(declaration),
            "optional": declaration.optional,
            "plural": declaration.plural,
            "attribute": attribute,
        }

    def struct_fields(self, attributes, elements) -> List[Dict[str, Any]]:
        """Fields of a structure: attributes first, then elements."""
        counter = FieldNameCounter()
        fields = [self.field_data(a, counter, attribute=True) for a in attributes]
        fields += [self.field_data(e, counter, attribute=False) for e in elements]
        return fields

    def expand_attributes(self, node) -> List[Attribute]:
        """Own attributes plus those of referenced attribute groups."""
        attributes = list(node.attributes)
        for group in getattr(node, "attribute_groups", []):
            group = self._dereference(group)
            attributes.extend(group.attributes)
        return attributes

    def expand_elements(self, node) -> List[Element]:
        """Own elements plus those of referenced model groups."""
        elements = list(node.elements)
        for group in getattr(node, "groups", []):
            group = self._dereference(group)
            elements.extend(group.elements)
        return elements

    def _dereference(self, group):
        if not group.ref:
            return group
        local = trim_ns_prefix(group.ref)
        for node in self.document:
            if node.kind == group.kind and node.name == local:
                return node
        logger.warning(f"Unresolved {group.kind.value} reference {group.ref!r}")
        return group

    def enum_constants(self, base_spelling: str, values: List[str]) -> List[Dict[str, str]]:
        """Template context for enumeration members."""
        counter = FieldNameCounter()
        return [
            {
                "name": counter.unique(self.sanitizer.sanitize_name(value, self.enum_case)),
                "value": value,
                "literal": self.literal(value, base_spelling),
            }
            for value in values
        ]

    def literal(self, value: str, spelling: str) -> str:
        """Source literal for a value of the given type spelling."""
        if spelling in self.numeric_types:
            try:
                float(value)
                return value
            except ValueError:
                pass
        return json.dumps(value, ensure_ascii=False)

    def facet_notes(self, restriction: Restriction) -> List[str]:
        """Human-readable restriction facets for documentation comments."""
        notes = []
        if restriction.pattern is not None:
            notes.append(f"pattern: {restriction.pattern}")
        if restriction.has_min_length:
            notes.append(f"minLength: {restriction.min_length}")
        if restriction.has_max_length:
            notes.append(f"maxLength: {restriction.max_length}")
        return notes

    def comment(self, name: str, doc: str, notes: Optional[List[str]] = None) -> str:
        """Documentation comment for a declaration, empty when disabled."""
        if not self.config.add_comments:
            return ""
        lines = [gen_field_comment(name, doc, self.comment_prefix).strip("\n")]
        lines += [f"{self.comment_prefix} {note}" for note in notes or []]
        return "\n".join(lines)

    def simple_type_context(self, node: SimpleType) -> Tuple[str, Dict[str, Any]]:
        """
        Work out how a simple type is declared.

        Returns:
            (shape, context) where shape is "alias", "enum" or "union" and
            names the template to render
        """
        resolved = self.resolve(node.name)
        name = self.declaration_name(node.name)
        local = trim_ns_prefix(node.name)
        context = {"name": name, "original_name": local}

        # An alias of another declared type refers to it by name; the
        # enumeration or union belongs to the target declaration
        if resolved.name != local and resolved.kind in DECLARED_SHAPES:
            context["comment"] = self.comment(name, node.doc)
            context["type"] = self.spell(resolved)
            return "alias", context

        notes = self.facet_notes(resolved.restriction) if resolved.restriction else []
        context["comment"] = self.comment(name, node.doc, notes)

        if resolved.kind == ShapeKind.RESTRICTED and resolved.restriction.enum:
            context["type"] = resolved.spelling
            context["constants"] = self.enum_constants(
                resolved.spelling, resolved.restriction.enum
            )
            return "enum", context

        if resolved.kind == ShapeKind.UNION:
            counter = FieldNameCounter()
            context["members"] = [
                {
                    "name": self.field_name(member_name, counter),
                    "original_name": member_name,
                    "type": self.spell(member),
                }
                for member_name, member in resolved.members
            ]
            return "union", context

        if resolved.kind == ShapeKind.RESTRICTED:
            context["type"] = resolved.spelling
        elif resolved.kind == ShapeKind.LIST:
            context["type"] = self.list_of(self.spell(resolved.item))
        else:
            context["type"] = self.spell(resolved)
        return "alias", context

    def structure_context(self, node) -> Dict[str, Any]:
        """Template context for a complex type, group or attribute group."""
        name = self.declaration_name(node.name)
        base = getattr(node, "base", "")
        return {
            "name": name,
            "original_name": trim_ns_prefix(node.name),
            "comment": self.comment(name, node.doc),
            "base": self.type_spelling(base) if base else "",
            "fields": self.struct_fields(
                self.expand_attributes(node) if hasattr(node, "attributes") else [],
                self.expand_elements(node) if hasattr(node, "elements") else [],
            ),
        }

    def element_alias_context(self, node) -> Optional[Dict[str, Any]]:
        """
        Context for a top-level element or attribute declared as an alias.

        Returns None when the declaration would only restate a type of the
        same name.
        """
        type_name = node.type or node.name
        if self.type_name(type_name) == self.type_name(node.name):
            return None
        name = self.declaration_name(node.name)
        return {
            "name": name,
            "original_name": trim_ns_prefix(node.name),
            "comment": self.comment(name, node.doc),
            "type": self.type_spelling(type_name, node.plural),
        }

    def indent(self) -> str:
        if self.config.custom.get("use_tabs"):
            return "\t"
        return " " * self.config.indent_size

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a template with context.

        Args:
            template_name: Template name
            context: Template variables

        Returns:
            Rendered content
        """
        context = {"indent": self.indent(), **context}
        return self.template_engine.render_template(template_name, context)

    def template_exists(self, template_name: str) -> bool:
        """Check if a template exists."""
        return self.template_engine.template_exists(template_name)

    def validate_document(self, document: SchemaDocument) -> List[str]:
        """
        Validate a document for issues worth reporting.

        Language generators may override this to add their own checks.

        Returns:
            List of warning messages (empty if no issues)
        """
        warnings = self.config.problems(self.language_name)
        previous = self.document
        self.document = document

        try:
            for node in document:
                if node.kind == NodeKind.COMPLEX_TYPE:
                    if not node.elements and not node.attributes and not node.groups:
                        warnings.append(f"Complex type '{node.name}' has no content")
                    referenced = [element.type for element in node.elements]
                    referenced += [attribute.type for attribute in node.attributes]
                elif node.kind in (NodeKind.ELEMENT, NodeKind.ATTRIBUTE):
                    referenced = [node.type]
                else:
                    continue

                for type_name in referenced:
                    if type_name and self.resolve(type_name).kind == ShapeKind.UNRESOLVED:
                        warnings.append(
                            f"Unresolved type '{type_name}' referenced by '{node.name}'"
                        )
        finally:
            self.document = previous

        return warnings

    def format_code(self, code: str) -> str:
        """
        Apply language-specific formatting to generated code.

        Args:
            code: Raw generated code

        Returns:
            Formatted code
        """
        # Basic cleanup - remove excessive blank lines
        lines = code.split("\n")
        formatted_lines = []
        blank_count = 0

        for line in lines:
            stripped = line.rstrip()
            if not stripped:
                blank_count += 1
                if blank_count <= 2:  # Allow max 2 consecutive blank lines
                    formatted_lines.append("")
            else:
                blank_count = 0
                formatted_lines.append(stripped)

        return self.config.line_ending.join(formatted_lines)


@dataclass
class NodeFailure:
    """A node whose generation hook failed."""

    node_name: str
    kind: NodeKind
    error: Exception

    def __str__(self) -> str:
        return f"{self.kind.value} '{self.node_name}': {self.error}"


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self,
        code: str,
        warnings: List[str] = None,
        metadata: Dict[str, Any] = None,
        failures: List[NodeFailure] = None,
    ):
        """
        Initialize generation result.

        Args:
            code: Generated code
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
            failures: Nodes whose hooks failed
        """
        self.code = code
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.failures = failures or []
        self.success = not self.failures
        self.error_message = None
        self.exception = None

    @property
    def failure_count(self) -> int:
        return len(self.failures)

    @classmethod
    def error(cls, message: str, exception: Exception = None) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls(code="")
        result.success = False
        result.error_message = message
        result.exception = exception
        return result


def _generate_node(generator: CodeGenerator, node: SchemaNode) -> Optional[str]:
    try:
        return call_by_name(generator, handler_name(node), node)
    except (ConfigError, GeneratorError):
        raise
    except Exception as e:
        # Template and lookup errors inside a hook are failures of that node
        raise GeneratorError(str(e)) from e


def generate_code(generator: CodeGenerator, document: SchemaDocument) -> GenerationResult:
    """
    Generate code for a schema document with error handling.

    Nodes whose hooks fail are recorded and the run continues with the
    remaining nodes, unless the generator config sets ``fail_fast``.
    A configuration error fails the whole run.

    Args:
        generator: Code generator instance
        document: Parsed schema document

    Returns:
        GenerationResult with code, warnings, failures and metadata
    """
    try:
        warnings = generator.validate_document(document)
        generator.begin_run(document)

        fragments = []
        failures = []
        skipped = 0

        for node in document:
            try:
                fragment = _generate_node(generator, node)
            except GeneratorError as e:
                logger.error(f"Failed to generate {node.kind.value} '{node.name}': {e}")
                failures.append(NodeFailure(node.name, node.kind, e))
                if generator.config.fail_fast:
                    break
                continue

            if fragment:
                fragments.append(fragment)
            else:
                skipped += 1

        code = generator.format_code(generator.assemble(fragments))

        metadata = {
            "language": generator.language_name,
            "file_extension": generator.file_extension,
            "node_count": len(document),
            "generated_count": len(fragments),
            "skipped_count": skipped,
            "failure_count": len(failures),
            "node_kinds": document.count_by_kind(),
        }

        result = GenerationResult(code, warnings, metadata, failures)
        if failures:
            result.error_message = f"{len(failures)} node(s) failed to generate"
        return result

    except ConfigError as e:
        logger.error(f"Configuration error: {e}")
        return GenerationResult.error(f"Configuration error: {str(e)}", exception=e)
    except Exception as e:
        logger.error(f"Code generation failed: {e}", exc_info=True)
        return GenerationResult.error(f"Code generation failed: {str(e)}", exception=e)
