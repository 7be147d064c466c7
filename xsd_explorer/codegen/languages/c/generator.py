"""
C code generator implementation.

Generates C typedefs, enums, unions and structs from schema nodes.
"""

import re
from typing import Any, Dict, Optional

from ...core.config import GeneratorConfig
from ...core.generator import CodeGenerator
from ...core.naming import NamingCase
from ...core.schema import AttributeGroup, ComplexType, Group, SimpleType

C_RESERVED_WORDS = {
    "auto", "break", "case", "char", "const", "continue", "default", "do",
    "double", "else", "enum", "extern", "float", "for", "goto", "if",
    "inline", "int", "long", "register", "restrict", "return", "short",
    "signed", "sizeof", "static", "struct", "switch", "typedef", "union",
    "unsigned", "void", "volatile", "while", "bool", "true", "false",
}

HEADER_TEMPLATE = """\
// Code generated by xsd_explorer. DO NOT EDIT.
{% for include in includes %}
#include <{{ include }}>
{% endfor %}
"""

ALIAS_TEMPLATE = """\
{% if comment %}
{{ comment }}
{% endif %}
typedef {{ type }} {{ name }};
"""

ENUM_TEMPLATE = """\
{% if comment %}
{{ comment }}
{% endif %}
typedef enum {
{% for constant in constants %}
{{ indent }}{{ name|snake_case|upper }}_{{ constant.name }}{% if constant.literal == constant.value %} = {{ constant.value }}{% endif %}, // {{ constant.value }}
{% endfor %}
} {{ name }};
"""

UNION_TEMPLATE = """\
{% if comment %}
{{ comment }}
{% endif %}
typedef union {
{% for member in members %}
{{ indent }}{{ member.type }} {{ member.name }};
{% endfor %}
} {{ name }};
"""

STRUCT_TEMPLATE = """\
{% if comment %}
{{ comment }}
{% endif %}
typedef struct {
{% if base %}
{{ indent }}{{ base }} base;
{% endif %}
{% for field in fields %}
{{ indent }}{{ field.type }} {{ field.name }};
{% endfor %}
} {{ name }};
"""

# Standard header declaring a type spelling
C_TYPE_INCLUDES = {
    "bool": "stdbool.h",
}

_WORD = re.compile(r"\w+")


class CGenerator(CodeGenerator):
    """Code generator for C typedefs."""

    reserved_words = C_RESERVED_WORDS
    numeric_types = {"int", "unsigned int"}
    enum_case = NamingCase.SCREAMING_SNAKE
    templates = {
        "header.h.j2": HEADER_TEMPLATE,
        "alias.h.j2": ALIAS_TEMPLATE,
        "enum.h.j2": ENUM_TEMPLATE,
        "union.h.j2": UNION_TEMPLATE,
        "struct.h.j2": STRUCT_TEMPLATE,
    }

    def __init__(self, config: Optional[GeneratorConfig] = None):
        super().__init__(config)
        self.includes_needed = set()

    @property
    def language_name(self) -> str:
        return "C"

    @property
    def file_extension(self) -> str:
        return ".h"

    def begin_run(self, document):
        super().begin_run(document)
        self.includes_needed = set()

    def list_of(self, spelling: str) -> str:
        if spelling.endswith("[]"):
            return f"{spelling[:-2]}**"
        return f"{spelling}*"

    def spell(self, resolved) -> str:
        spelling = super().spell(resolved)
        self._track_includes(spelling)
        if spelling.endswith("[]"):
            return f"{spelling[:-2]}*"
        return spelling

    def _track_includes(self, spelling: str):
        for word in _WORD.findall(spelling):
            if word in C_TYPE_INCLUDES:
                self.includes_needed.add(C_TYPE_INCLUDES[word])

    def render_header(self) -> str:
        return self.render_template("header.h.j2", {"includes": sorted(self.includes_needed)})

    def gen_simple_type(self, node: SimpleType) -> Optional[str]:
        if not node.name:
            return None
        shape, context = self.simple_type_context(node)
        return self.render_template(f"{shape}.h.j2", context)

    def gen_complex_type(self, node: ComplexType) -> Optional[str]:
        if not node.name:
            return None
        return self.render_template("struct.h.j2", self.structure_context(node))

    def gen_group(self, node: Group) -> Optional[str]:
        if not node.name or node.ref:
            return None
        return self.render_template("struct.h.j2", self.structure_context(node))

    def gen_attribute_group(self, node: AttributeGroup) -> Optional[str]:
        if not node.name or node.ref:
            return None
        return self.render_template("struct.h.j2", self.structure_context(node))


def create_c_generator(config: Optional[Dict[str, Any]] = None) -> CGenerator:
    """Create a C generator with default configuration."""
    from ...core.config import load_config

    return CGenerator(load_config("c", custom_config=config))
