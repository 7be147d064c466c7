"""
Rust code generator implementation.

Generates Rust type aliases, enums and structs from schema nodes.
"""

from typing import Any, Dict, List, Optional

from ...core.config import GeneratorConfig
from ...core.generator import CodeGenerator
from ...core.naming import FieldNameCounter
from ...core.schema import ComplexType, Element, Group, SimpleType

RUST_RESERVED_WORDS = {
    "as", "break", "const", "continue", "crate", "else", "enum", "extern",
    "false", "fn", "for", "if", "impl", "in", "let", "loop", "match", "mod",
    "move", "mut", "pub", "ref", "return", "self", "Self", "static", "struct",
    "super", "trait", "true", "type", "unsafe", "use", "where", "while",
    "async", "await", "dyn", "abstract", "become", "box", "do", "final",
    "macro", "override", "priv", "typeof", "unsized", "virtual", "yield", "try",
}

HEADER_TEMPLATE = """\
// Code generated by xsd_explorer. DO NOT EDIT.
"""

ALIAS_TEMPLATE = """\
{% if comment %}
{{ comment }}
{% endif %}
pub type {{ name }} = {{ type }};
"""

ENUM_TEMPLATE = """\
{% if comment %}
{{ comment }}
{% endif %}
{% if derives %}
#[derive({{ derives|join(", ") }})]
{% endif %}
pub enum {{ name }} {
{% for constant in constants %}
{{ indent }}{{ constant.name }},
{% endfor %}
}

impl {{ name }} {
{{ indent }}pub fn as_str(&self) -> &'static str {
{{ indent }}{{ indent }}match self {
{% for constant in constants %}
{{ indent }}{{ indent }}{{ indent }}{{ name }}::{{ constant.name }} => {{ constant.literal }},
{% endfor %}
{{ indent }}{{ indent }}}
{{ indent }}}
}
"""

UNION_TEMPLATE = """\
{% if comment %}
{{ comment }}
{% endif %}
{% if derives %}
#[derive({{ derives|join(", ") }})]
{% endif %}
pub enum {{ name }} {
{% for member in members %}
{{ indent }}{{ member.name }}({{ member.type }}),
{% endfor %}
}
"""

STRUCT_TEMPLATE = """\
{% if comment %}
{{ comment }}
{% endif %}
{% if derives %}
#[derive({{ derives|join(", ") }})]
{% endif %}
pub struct {{ name }} {
{% if base %}
{{ indent }}pub base: {{ base }},
{% endif %}
{% for field in fields %}
{{ indent }}pub {{ field.name }}: {{ field.type }},
{% endfor %}
}
"""


class RustGenerator(CodeGenerator):
    """Code generator for Rust types."""

    reserved_words = RUST_RESERVED_WORDS
    templates = {
        "header.rs.j2": HEADER_TEMPLATE,
        "alias.rs.j2": ALIAS_TEMPLATE,
        "enum.rs.j2": ENUM_TEMPLATE,
        "union.rs.j2": UNION_TEMPLATE,
        "struct.rs.j2": STRUCT_TEMPLATE,
    }

    def __init__(self, config: Optional[GeneratorConfig] = None):
        super().__init__(config)
        self.derives: List[str] = list(self.config.custom.get("derives", []))

    @property
    def language_name(self) -> str:
        return "Rust"

    @property
    def file_extension(self) -> str:
        return ".rs"

    def list_of(self, spelling: str) -> str:
        return f"Vec<{spelling}>"

    def field_type(self, declaration) -> str:
        spelling = super().field_type(declaration)
        if declaration.optional and not declaration.plural:
            return f"Option<{spelling}>"
        return spelling

    def render_header(self) -> str:
        return self.render_template("header.rs.j2", {})

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        context = {"derives": self.derives, **context}
        return super().render_template(template_name, context)

    def gen_simple_type(self, node: SimpleType) -> Optional[str]:
        if not node.name:
            return None
        shape, context = self.simple_type_context(node)
        if shape == "union":
            # Variants are types, not fields
            counter = FieldNameCounter()
            for member in context["members"]:
                member["name"] = counter.unique(self.type_name(member["original_name"]))
        return self.render_template(f"{shape}.rs.j2", context)

    def gen_complex_type(self, node: ComplexType) -> Optional[str]:
        if not node.name:
            return None
        return self.render_template("struct.rs.j2", self.structure_context(node))

    def gen_group(self, node: Group) -> Optional[str]:
        if not node.name or node.ref:
            return None
        return self.render_template("struct.rs.j2", self.structure_context(node))

    def gen_element(self, node: Element) -> Optional[str]:
        context = self.element_alias_context(node)
        if context is None:
            return None
        return self.render_template("alias.rs.j2", context)


def create_rust_generator(config: Optional[Dict[str, Any]] = None) -> RustGenerator:
    """Create a Rust generator with default configuration."""
    from ...core.config import load_config

    return RustGenerator(load_config("rust", custom_config=config))
