"""
Go code generator implementation.

Generates Go type declarations with XML struct tags from schema nodes.
"""

from typing import Dict, List, Optional, Any

from ...core.config import GeneratorConfig
from ...core.generator import CodeGenerator
from ...core.naming import NameSanitizer
from ...core.schema import Attribute, AttributeGroup, ComplexType, Element, Group, SimpleType
from .naming import GO_RESERVED_WORDS, create_go_sanitizer, validate_go_package_name

HEADER_TEMPLATE = """\
// Code generated by xsd_explorer. DO NOT EDIT.

package {{ package_name }}
{% if imports %}

import (
{% for imp in imports %}
{{ indent }}"{{ imp }}"
{% endfor %}
)
{% endif %}
"""

ALIAS_TEMPLATE = """\
{% if comment %}
{{ comment }}
{% endif %}
type {{ name }} {{ type }}
"""

ENUM_TEMPLATE = """\
{% if comment %}
{{ comment }}
{% endif %}
type {{ name }} {{ type }}

const (
{% for constant in constants %}
{{ indent }}{{ name }}{{ constant.name }} {{ name }} = {{ constant.literal }}
{% endfor %}
)
"""

UNION_TEMPLATE = """\
{% if comment %}
{{ comment }}
{% endif %}
type {{ name }} struct {
{% for member in members %}
{{ indent }}{{ member.name }} {{ member.type }}
{% endfor %}
}
"""

STRUCT_TEMPLATE = """\
{% if comment %}
{{ comment }}
{% endif %}
type {{ name }} struct {
{% if base %}
{{ indent }}{{ base }}
{% endif %}
{% for field in fields %}
{{ indent }}{{ field.name }} {{ field.type }} `xml:"{{ field.original_name }}{% if field.attribute %},attr{% endif %}{% if field.optional %},omitempty{% endif %}"`
{% endfor %}
}
"""

# Import path required by a qualified type spelling
GO_TYPE_IMPORTS = {
    "xml.Name": "encoding/xml",
    "time.Time": "time",
}


class GoGenerator(CodeGenerator):
    """Code generator for Go types with XML struct tags."""

    reserved_words = GO_RESERVED_WORDS
    numeric_types = {
        "int", "int8", "int16", "int64", "uint8", "uint16", "uint32", "uint64",
        "float32", "float64",
    }
    templates = {
        "header.go.j2": HEADER_TEMPLATE,
        "alias.go.j2": ALIAS_TEMPLATE,
        "enum.go.j2": ENUM_TEMPLATE,
        "union.go.j2": UNION_TEMPLATE,
        "struct.go.j2": STRUCT_TEMPLATE,
    }

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize Go generator with configuration."""
        super().__init__(config)
        self.package_name = self.config.package_name or "schema"
        self.use_pointers = self.config.custom.get("use_pointers_for_optional", True)
        self.imports_needed = set()

    def create_sanitizer(self) -> NameSanitizer:
        return create_go_sanitizer()

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "Go"

    @property
    def file_extension(self) -> str:
        """Return Go file extension."""
        return ".go"

    def begin_run(self, document):
        super().begin_run(document)
        self.imports_needed = set()

    def list_of(self, spelling: str) -> str:
        return f"[]{spelling}"

    def field_type(self, declaration) -> str:
        spelling = super().field_type(declaration)
        self._track_imports(spelling)
        if declaration.optional and self.use_pointers and not declaration.plural:
            return f"*{spelling}"
        return spelling

    def _track_imports(self, spelling: str):
        for qualified, path in GO_TYPE_IMPORTS.items():
            if qualified in spelling:
                self.imports_needed.add(path)

    def render_header(self) -> str:
        """Render package declaration and imports."""
        context = {
            "package_name": self.package_name,
            "imports": sorted(self.imports_needed),
        }
        return self.render_template("header.go.j2", context)

    # Generation hooks, dispatched by node kind

    def gen_simple_type(self, node: SimpleType) -> Optional[str]:
        if not node.name:
            return None
        shape, context = self.simple_type_context(node)
        self._track_imports(context.get("type", ""))
        for member in context.get("members", []):
            self._track_imports(member["type"])
        return self.render_template(f"{shape}.go.j2", context)

    def gen_complex_type(self, node: ComplexType) -> Optional[str]:
        if not node.name:
            return None
        return self.render_template("struct.go.j2", self.structure_context(node))

    def gen_group(self, node: Group) -> Optional[str]:
        if not node.name or node.ref:
            return None
        return self.render_template("struct.go.j2", self.structure_context(node))

    def gen_attribute_group(self, node: AttributeGroup) -> Optional[str]:
        if not node.name or node.ref:
            return None
        return self.render_template("struct.go.j2", self.structure_context(node))

    def gen_element(self, node: Element) -> Optional[str]:
        context = self.element_alias_context(node)
        if context is None:
            return None
        self._track_imports(context["type"])
        return self.render_template("alias.go.j2", context)

    def gen_attribute(self, node: Attribute) -> Optional[str]:
        context = self.element_alias_context(node)
        if context is None:
            return None
        self._track_imports(context["type"])
        return self.render_template("alias.go.j2", context)

    def validate_document(self, document) -> List[str]:
        """Validate document and Go package settings."""
        warnings = super().validate_document(document)
        warnings.extend(validate_go_package_name(self.package_name))
        return warnings


def create_go_generator(config: Optional[Dict[str, Any]] = None) -> GoGenerator:
    """Create a Go generator with default configuration."""
    from ...core.config import load_config

    return GoGenerator(load_config("go", custom_config=config))
