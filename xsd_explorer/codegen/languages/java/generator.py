"""
Java code generator implementation.

Generates Java classes and enums from schema nodes. All declarations share
one compilation unit, so they are emitted package-private.
"""

from typing import Any, Dict, Optional

from ...core.config import GeneratorConfig
from ...core.generator import CodeGenerator
from ...core.naming import NamingCase
from ...core.schema import ComplexType, SimpleType

JAVA_RESERVED_WORDS = {
    "abstract", "assert", "boolean", "break", "byte", "case", "catch", "char",
    "class", "const", "continue", "default", "do", "double", "else", "enum",
    "extends", "final", "finally", "float", "for", "goto", "if", "implements",
    "import", "instanceof", "int", "interface", "long", "native", "new",
    "package", "private", "protected", "public", "return", "short", "static",
    "strictfp", "super", "switch", "synchronized", "this", "throw", "throws",
    "transient", "try", "void", "volatile", "while", "true", "false", "null",
    "var", "record", "yield",
}

HEADER_TEMPLATE = """\
// Code generated by xsd_explorer. DO NOT EDIT.
{% if package_name %}

package {{ package_name }};
{% endif %}
{% if imports %}

{% for imp in imports %}
import {{ imp }};
{% endfor %}
{% endif %}
"""

VALUE_CLASS_TEMPLATE = """\
{% if comment %}
{{ comment }}
{% endif %}
class {{ name }} {
{{ indent }}public {{ type }} value;
}
"""

ENUM_TEMPLATE = """\
{% if comment %}
{{ comment }}
{% endif %}
enum {{ name }} {
{% for constant in constants %}
{{ indent }}{{ constant.name }}({{ constant.literal }}){% if loop.last %};{% else %},{% endif %}

{% endfor %}

{{ indent }}private final String value;

{{ indent }}{{ name }}(String value) {
{{ indent }}{{ indent }}this.value = value;
{{ indent }}}

{{ indent }}public String value() {
{{ indent }}{{ indent }}return value;
{{ indent }}}
}
"""

CLASS_TEMPLATE = """\
{% if comment %}
{{ comment }}
{% endif %}
class {{ name }}{% if base %} extends {{ base }}{% endif %} {
{% for field in fields %}
{{ indent }}public {{ field.type }} {{ field.name }};
{% endfor %}
}
"""

UNION_TEMPLATE = """\
{% if comment %}
{{ comment }}
{% endif %}
class {{ name }} {
{% for member in members %}
{{ indent }}public {{ member.type }} {{ member.name }};
{% endfor %}
}
"""

# Import required by a type spelling
JAVA_TYPE_IMPORTS = {
    "List<": "java.util.List",
    "QName": "javax.xml.namespace.QName",
}


class JavaGenerator(CodeGenerator):
    """Code generator for Java classes and enums."""

    reserved_words = JAVA_RESERVED_WORDS
    enum_case = NamingCase.SCREAMING_SNAKE
    templates = {
        "header.java.j2": HEADER_TEMPLATE,
        "alias.java.j2": VALUE_CLASS_TEMPLATE,
        "enum.java.j2": ENUM_TEMPLATE,
        "union.java.j2": UNION_TEMPLATE,
        "class.java.j2": CLASS_TEMPLATE,
    }

    def __init__(self, config: Optional[GeneratorConfig] = None):
        super().__init__(config)
        self.imports_needed = set()

    @property
    def language_name(self) -> str:
        return "Java"

    @property
    def file_extension(self) -> str:
        return ".java"

    def begin_run(self, document):
        super().begin_run(document)
        self.imports_needed = set()

    def list_of(self, spelling: str) -> str:
        return f"List<{spelling}>"

    def type_spelling(self, type_name: str, plural: bool = False) -> str:
        spelling = super().type_spelling(type_name, plural)
        self._track_imports(spelling)
        return spelling

    def _track_imports(self, spelling: str):
        for marker, path in JAVA_TYPE_IMPORTS.items():
            if marker in spelling:
                self.imports_needed.add(path)

    def render_header(self) -> str:
        context = {
            "package_name": self.config.package_name,
            "imports": sorted(self.imports_needed),
        }
        return self.render_template("header.java.j2", context)

    def gen_simple_type(self, node: SimpleType) -> Optional[str]:
        if not node.name:
            return None
        shape, context = self.simple_type_context(node)
        self._track_imports(context.get("type", ""))
        for member in context.get("members", []):
            self._track_imports(member["type"])
        return self.render_template(f"{shape}.java.j2", context)

    def gen_complex_type(self, node: ComplexType) -> Optional[str]:
        if not node.name:
            return None
        return self.render_template("class.java.j2", self.structure_context(node))


def create_java_generator(config: Optional[Dict[str, Any]] = None) -> JavaGenerator:
    """Create a Java generator with default configuration."""
    from ...core.config import load_config

    return JavaGenerator(load_config("java", custom_config=config))
