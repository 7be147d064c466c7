"""
Go-specific naming utilities and sanitization.

Exported Go identifiers spell common initialisms in full capitals
("OrderID", not "OrderId"); the sanitizer here applies that on top of the
generic case conversion.
"""

import re

from ...core.naming import NameSanitizer, NamingCase

GO_RESERVED_WORDS = {
    "break", "case", "chan", "const", "continue", "default", "defer", "else",
    "fallthrough", "for", "func", "go", "goto", "if", "import", "interface",
    "map", "package", "range", "return", "select", "struct", "switch", "type",
    "var",
}

# Predeclared type names; a field spelled like one would shadow it
GO_BUILTIN_TYPES = {
    "bool", "byte", "complex64", "complex128", "error", "float32", "float64",
    "int", "int8", "int16", "int32", "int64", "rune", "string", "uint",
    "uint8", "uint16", "uint32", "uint64", "uintptr",
}

GO_INITIALISMS = {"API", "HTML", "HTTP", "ID", "JSON", "URI", "URL", "UUID", "XML"}

# "Id" at a word boundary, but not the "Id" of "Idle"
_INITIALISM_WORD = re.compile(
    "({})(?![a-z])".format("|".join(sorted(word.capitalize() for word in GO_INITIALISMS)))
)


def apply_initialisms(name: str) -> str:
    """Capitalize known initialisms inside a Pascal or camel case name."""
    return _INITIALISM_WORD.sub(lambda match: match.group(1).upper(), name)


class GoNameSanitizer(NameSanitizer):
    """Name sanitizer following Go's initialism convention."""

    def _convert_case(self, name: str, target_case: NamingCase) -> str:
        result = super()._convert_case(name, target_case)
        if target_case in (NamingCase.PASCAL_CASE, NamingCase.CAMEL_CASE):
            result = apply_initialisms(result)
        return result


def create_go_sanitizer() -> GoNameSanitizer:
    """Create a name sanitizer configured for Go."""
    return GoNameSanitizer(GO_RESERVED_WORDS, GO_BUILTIN_TYPES)


def validate_go_package_name(name: str) -> list[str]:
    """
    Check a package clause name against Go conventions.

    Returns:
        List of problems, empty when the name is fine
    """
    if not name:
        return ["Package name cannot be empty"]

    problems = []
    if not name.isidentifier():
        problems.append(f"'{name}' is not a valid Go identifier")
    if name != name.lower():
        problems.append("Package names should be lowercase")
    if "_" in name:
        problems.append("Package names should not contain underscores")
    if name in GO_RESERVED_WORDS:
        problems.append(f"'{name}' is a Go reserved word")
    return problems
