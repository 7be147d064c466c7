"""
TypeScript code generator implementation.

Generates TypeScript interfaces, enums and type aliases from schema nodes.
"""

from typing import Any, Dict, Optional

from ...core.generator import CodeGenerator
from ...core.schema import ComplexType, Element, SimpleType

TYPESCRIPT_RESERVED_WORDS = {
    "break", "case", "catch", "class", "const", "continue", "debugger",
    "default", "delete", "do", "else", "enum", "export", "extends", "false",
    "finally", "for", "function", "if", "import", "in", "instanceof", "new",
    "null", "return", "super", "switch", "this", "throw", "true", "try",
    "typeof", "var", "void", "while", "with", "implements", "interface",
    "let", "package", "private", "protected", "public", "static", "yield",
}

ALIAS_TEMPLATE = """\
{% if comment %}
{{ comment }}
{% endif %}
export type {{ name }} = {{ type }};
"""

ENUM_TEMPLATE = """\
{% if comment %}
{{ comment }}
{% endif %}
export enum {{ name }} {
{% for constant in constants %}
{{ indent }}{{ constant.name }} = {{ constant.literal }},
{% endfor %}
}
"""

UNION_TEMPLATE = """\
{% if comment %}
{{ comment }}
{% endif %}
export type {{ name }} = {% for member in members %}{{ member.type }}{% if not loop.last %} | {% endif %}{% endfor %};
"""

INTERFACE_TEMPLATE = """\
{% if comment %}
{{ comment }}
{% endif %}
export interface {{ name }}{% if base %} extends {{ base }}{% endif %} {
{% for field in fields %}
{{ indent }}{{ field.name }}{% if field.optional %}?{% endif %}: {{ field.type }};
{% endfor %}
}
"""


class TypeScriptGenerator(CodeGenerator):
    """Code generator for TypeScript interfaces and types."""

    reserved_words = TYPESCRIPT_RESERVED_WORDS
    numeric_types = {"number"}
    templates = {
        "alias.ts.j2": ALIAS_TEMPLATE,
        "enum.ts.j2": ENUM_TEMPLATE,
        "union.ts.j2": UNION_TEMPLATE,
        "interface.ts.j2": INTERFACE_TEMPLATE,
    }

    @property
    def language_name(self) -> str:
        return "TypeScript"

    @property
    def file_extension(self) -> str:
        return ".ts"

    def list_of(self, spelling: str) -> str:
        return f"Array<{spelling}>"

    def gen_simple_type(self, node: SimpleType) -> Optional[str]:
        if not node.name:
            return None
        shape, context = self.simple_type_context(node)
        return self.render_template(f"{shape}.ts.j2", context)

    def gen_complex_type(self, node: ComplexType) -> Optional[str]:
        if not node.name:
            return None
        return self.render_template("interface.ts.j2", self.structure_context(node))

    def gen_element(self, node: Element) -> Optional[str]:
        context = self.element_alias_context(node)
        if context is None:
            return None
        return self.render_template("alias.ts.j2", context)


def create_typescript_generator(config: Optional[Dict[str, Any]] = None) -> TypeScriptGenerator:
    """Create a TypeScript generator with default configuration."""
    from ...core.config import load_config

    return TypeScriptGenerator(load_config("typescript", custom_config=config))
